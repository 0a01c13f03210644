# 📄 File: marketplace/modules/services/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# One place to import home-service booking, consultation and availability types from.
# 🧪 Purpose (Technical Summary):
# Re-exports the services domain entities and enums.
# 🔗 Dependencies:
# booking.py, booking_status_log.py, appointment.py, availability.py
# 🔄 Connected Modules / Calls From:
# services repositories and domain services, finance, reviews

from .appointment import (
    Appointment,
    AppointmentActor,
    AppointmentCancellation,
    AppointmentSource,
    AppointmentStatus,
    ConsultationFee,
    ConsultationLocation,
    ConsultationMode,
    ProfessionalType,
)
from .availability import (
    Availability,
    AvailabilityType,
    BookableSlot,
    DateAvailability,
    TimeSlot,
    WeeklySchedule,
)
from .booking import Booking, BookingActor, BookingPricing, BookingStatus
from .booking_status_log import BookingStatusLog, ChangeMeta, ChangeSource

__all__ = [
    "Appointment",
    "AppointmentActor",
    "AppointmentCancellation",
    "AppointmentSource",
    "AppointmentStatus",
    "Availability",
    "AvailabilityType",
    "BookableSlot",
    "Booking",
    "BookingActor",
    "BookingPricing",
    "BookingStatus",
    "BookingStatusLog",
    "ChangeMeta",
    "ChangeSource",
    "ConsultationFee",
    "ConsultationLocation",
    "ConsultationMode",
    "DateAvailability",
    "ProfessionalType",
    "TimeSlot",
    "WeeklySchedule",
]
