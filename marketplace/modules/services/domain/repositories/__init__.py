# 📄 File: marketplace/modules/services/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the storage contracts for bookings, their history, consultations and schedules.
# 🧪 Purpose (Technical Summary):
# Exports the services repository interfaces.
# 🔗 Dependencies:
# booking_repository.py, appointment_repository.py
# 🔄 Connected Modules / Calls From:
# services infrastructure, services domain services

from .appointment_repository import AppointmentRepository, AvailabilityRepository
from .booking_repository import BookingRepository, BookingStatusLogRepository

__all__ = [
    "AppointmentRepository",
    "AvailabilityRepository",
    "BookingRepository",
    "BookingStatusLogRepository",
]
