# 📄 File: marketplace/modules/services/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The booking rules that need more than one record at a time.
# 🧪 Purpose (Technical Summary):
# Exports the booking status and appointment domain services.
# 🔗 Dependencies:
# booking_status_service.py, appointment_service.py
# 🔄 Connected Modules / Calls From:
# embedding application services, tests

from .appointment_service import AppointmentService
from .booking_status_service import BookingStatusService

__all__ = ["AppointmentService", "BookingStatusService"]
