# 📄 File: marketplace/modules/services/domain/models/appointment.py
# 🧭 Purpose (Layman Explanation):
# A consultation with a doctor or an advocate: the day and time slot, how it happens
# (clinic visit, video call, phone call, home visit, chamber), the fee and its status.
# 🧪 Purpose (Technical Summary):
# Appointment entity with professional type, consultation mode (checked against the
# professional type), fee, payment status and a guarded status lifecycle
# scheduled -> confirmed -> checked-in -> completed, plus cancel and no-show.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, marketplace.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# services repositories, AppointmentService, finance (payments, refunds), reviews

import uuid
from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator, model_validator

from marketplace.shared.core.exceptions import BusinessRuleViolationError
from marketplace.shared.domain.base import SoftDeletableModel, ValueObject
from marketplace.shared.domain.value_objects import DEFAULT_CURRENCY, Amount, PaymentStatus
from marketplace.shared.utils.helpers import utc_now
from marketplace.shared.utils.validators import normalize_time_slot


class ProfessionalType(str, Enum):
    DOCTOR = "doctor"
    ADVOCATE = "advocate"


class ConsultationMode(str, Enum):
    CLINIC = "clinic"
    ONLINE = "online"
    HOME = "home"
    CHAMBER = "chamber"
    PHONE = "phone"


# Modes each professional offers
PROFESSIONAL_MODES = {
    ProfessionalType.DOCTOR.value: {
        ConsultationMode.CLINIC.value,
        ConsultationMode.ONLINE.value,
        ConsultationMode.HOME.value,
    },
    ProfessionalType.ADVOCATE.value: {
        ConsultationMode.CHAMBER.value,
        ConsultationMode.ONLINE.value,
        ConsultationMode.PHONE.value,
    },
}


class AppointmentStatus(str, Enum):
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked-in"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no-show"


class AppointmentActor(str, Enum):
    """Who cancelled an appointment"""
    USER = "user"
    PROVIDER = "provider"
    ADMIN = "admin"


class AppointmentSource(str, Enum):
    APP = "app"
    WEB = "web"
    ADMIN = "admin"


class ConsultationFee(ValueObject):
    amount: Amount
    currency: str = DEFAULT_CURRENCY


class ConsultationLocation(ValueObject):
    """Clinic or chamber where an in-person consultation takes place"""
    name: Optional[str] = None
    address_id: Optional[uuid.UUID] = None


class AppointmentCancellation(ValueObject):
    reason: Optional[str] = None
    cancelled_at: datetime = Field(default_factory=utc_now)
    cancelled_by: AppointmentActor


class Appointment(SoftDeletableModel):
    """
    Doctor or advocate consultation.

    Invariants:
    - end_time is after start_time on appointment_date
    - the consultation mode is one the professional type offers
      (doctor: clinic/online/home, advocate: chamber/online/phone)
    - completed and cancelled appointments do not change status again
    """

    user_id: uuid.UUID
    provider_id: uuid.UUID
    professional_type: ProfessionalType
    doctor_profile_id: Optional[uuid.UUID] = None
    advocate_profile_id: Optional[uuid.UUID] = None
    appointment_date: date
    start_time: str
    end_time: str
    duration_minutes: int = Field(default=30, ge=1)
    mode: ConsultationMode
    location: Optional[ConsultationLocation] = None
    reason: Optional[str] = Field(None, max_length=1000)
    fee: ConsultationFee
    payment_id: Optional[uuid.UUID] = None
    payment_status: PaymentStatus = PaymentStatus.PENDING
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    cancellation: Optional[AppointmentCancellation] = None
    confirmed_at: Optional[datetime] = None
    checked_in_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    notes: Optional[str] = Field(None, max_length=1000)
    source: AppointmentSource = AppointmentSource.APP

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_slot(cls, v: str) -> str:
        return normalize_time_slot(v)

    @field_validator("reason", "notes")
    @classmethod
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if v else v

    @model_validator(mode="after")
    def check_slot_and_mode(self) -> "Appointment":
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        if self.mode not in PROFESSIONAL_MODES[self.professional_type]:
            raise ValueError(f"A {self.professional_type} does not offer {self.mode} consultations")
        return self

    @property
    def is_closed(self) -> bool:
        return self.status in (
            AppointmentStatus.COMPLETED.value,
            AppointmentStatus.CANCELLED.value,
            AppointmentStatus.NO_SHOW.value,
        )

    def _require_open(self, action: str) -> None:
        if self.is_closed:
            raise BusinessRuleViolationError(
                f"Cannot {action} a {self.status} appointment",
                rule="appointment_closed",
                context={"appointment_id": str(self.id), "status": self.status}
            )

    def overlaps(self, start_time: str, end_time: str) -> bool:
        return self.start_time < end_time and start_time < self.end_time

    def confirm(self) -> None:
        self._require_open("confirm")
        self.status = AppointmentStatus.CONFIRMED
        self.confirmed_at = utc_now()
        self.touch()

    def check_in(self) -> None:
        self._require_open("check in")
        self.status = AppointmentStatus.CHECKED_IN
        self.checked_in_at = utc_now()
        self.touch()

    def complete(self) -> None:
        self._require_open("complete")
        self.status = AppointmentStatus.COMPLETED
        self.completed_at = utc_now()
        self.touch()

    def mark_no_show(self) -> None:
        self._require_open("mark no-show on")
        self.status = AppointmentStatus.NO_SHOW
        self.touch()

    def mark_paid(self, payment_id: Optional[uuid.UUID] = None) -> None:
        if payment_id is not None:
            self.payment_id = payment_id
        self.payment_status = PaymentStatus.PAID
        self.touch()

    def cancel(self, reason: Optional[str] = None, by: AppointmentActor = AppointmentActor.USER) -> None:
        """
        Cancel the appointment.

        Args:
            reason: Free-text reason
            by: user, provider or admin
        """
        self._require_open("cancel")
        self.status = AppointmentStatus.CANCELLED
        self.cancellation = AppointmentCancellation(reason=reason, cancelled_by=by)
        self.touch()
