# 📄 File: marketplace/modules/services/domain/models/availability.py
# 🧭 Purpose (Layman Explanation):
# When a provider can be booked: their usual weekly hours, plus days where those hours
# are changed, and which time slots on a day are already taken.
# 🧪 Purpose (Technical Summary):
# Availability entity: weekly windows per weekday, date-specific overrides holding
# discrete slots with a booked flag, and slot generation from the weekly windows using
# slot duration and buffer time.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, marketplace.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# services repositories, AppointmentService

import uuid
from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from marketplace.shared.core.exceptions import BusinessRuleViolationError
from marketplace.shared.domain.base import SoftDeletableModel, ValueObject
from marketplace.shared.utils.validators import normalize_time_slot

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def _to_minutes(value: str) -> int:
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def _to_clock(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


class AvailabilityType(str, Enum):
    WEEKLY = "weekly"
    DATE_SPECIFIC = "date-specific"


class TimeSlot(ValueObject):
    start_time: str
    end_time: str

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        return normalize_time_slot(v)

    @model_validator(mode="after")
    def check_order(self) -> "TimeSlot":
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self

    def contains(self, start_time: str, end_time: str) -> bool:
        return self.start_time <= start_time and end_time <= self.end_time


class BookableSlot(TimeSlot):
    is_booked: bool = False
    booking_id: Optional[uuid.UUID] = None


class DateAvailability(ValueObject):
    """Slots that replace the weekly schedule on one date"""
    day: date
    slots: List[BookableSlot] = Field(default_factory=list)


class WeeklySchedule(ValueObject):
    """Working windows per weekday; an empty day means closed"""
    monday: List[TimeSlot] = Field(default_factory=list)
    tuesday: List[TimeSlot] = Field(default_factory=list)
    wednesday: List[TimeSlot] = Field(default_factory=list)
    thursday: List[TimeSlot] = Field(default_factory=list)
    friday: List[TimeSlot] = Field(default_factory=list)
    saturday: List[TimeSlot] = Field(default_factory=list)
    sunday: List[TimeSlot] = Field(default_factory=list)

    def windows_on(self, day: date) -> List[TimeSlot]:
        return getattr(self, WEEKDAYS[day.weekday()])


class Availability(SoftDeletableModel):
    """
    Provider availability, optionally scoped to one service.

    A date-specific entry overrides the weekly schedule for its date. Weekly
    windows are cut into slots of slot_duration minutes, separated by
    buffer_time minutes.
    """

    provider_id: uuid.UUID
    service_id: Optional[uuid.UUID] = None
    type: AvailabilityType = AvailabilityType.WEEKLY
    weekly: WeeklySchedule = Field(default_factory=WeeklySchedule)
    date_specific: List[DateAvailability] = Field(default_factory=list)
    slot_duration: int = Field(default=60, ge=5, le=24 * 60)
    buffer_time: int = Field(default=0, ge=0)
    timezone: str = "Asia/Kolkata"
    is_active: bool = True

    def _override_for(self, day: date) -> Optional[DateAvailability]:
        for entry in self.date_specific:
            if entry.day == day:
                return entry
        return None

    def generate_slots(self, day: date) -> List[BookableSlot]:
        """Cut the weekly windows of a day into bookable slots."""
        slots = []
        step = self.slot_duration + self.buffer_time
        for window in self.weekly.windows_on(day):
            start, end = _to_minutes(window.start_time), _to_minutes(window.end_time)
            while start + self.slot_duration <= end:
                slots.append(BookableSlot(
                    start_time=_to_clock(start),
                    end_time=_to_clock(start + self.slot_duration),
                ))
                start += step
        return slots

    def slots_on(self, day: date) -> List[BookableSlot]:
        override = self._override_for(day)
        if override is not None:
            return list(override.slots)
        return self.generate_slots(day)

    def free_slots(self, day: date) -> List[BookableSlot]:
        return [slot for slot in self.slots_on(day) if not slot.is_booked]

    def is_available_on(self, day: date) -> bool:
        return self.is_active and not self.is_deleted and bool(self.free_slots(day))

    def is_slot_free(self, day: date, start_time: str, end_time: str) -> bool:
        if not self.is_active or self.is_deleted:
            return False
        return any(slot.contains(start_time, end_time) for slot in self.free_slots(day))

    def set_date_slots(self, day: date, slots: List[TimeSlot]) -> None:
        """Replace the schedule of one date with the given slots."""
        entry = DateAvailability(
            day=day,
            slots=[BookableSlot(start_time=s.start_time, end_time=s.end_time) for s in slots],
        )
        self.date_specific = [e for e in self.date_specific if e.day != day] + [entry]
        self.touch()

    def _set_booking(self, day: date, start_time: str, booking_id: Optional[uuid.UUID], booked: bool) -> BookableSlot:
        start_time = normalize_time_slot(start_time)
        slots = self.slots_on(day)
        for index, slot in enumerate(slots):
            if slot.start_time != start_time:
                continue
            if booked and slot.is_booked:
                raise BusinessRuleViolationError(
                    "Slot is already booked",
                    rule="slot_already_booked",
                    context={"date": day.isoformat(), "start_time": start_time}
                )
            slots[index] = BookableSlot(
                start_time=slot.start_time,
                end_time=slot.end_time,
                is_booked=booked,
                booking_id=booking_id if booked else None,
            )
            entry = DateAvailability(day=day, slots=slots)
            self.date_specific = [e for e in self.date_specific if e.day != day] + [entry]
            self.touch()
            return slots[index]
        raise BusinessRuleViolationError(
            "No such slot in the provider's schedule",
            rule="slot_not_found",
            context={"date": day.isoformat(), "start_time": start_time}
        )

    def book_slot(self, day: date, start_time: str, booking_id: Optional[uuid.UUID] = None) -> BookableSlot:
        """
        Mark the slot starting at start_time as booked.

        A day without an override is first materialized from the weekly
        schedule so its booked flags can be stored.

        Raises:
            BusinessRuleViolationError: If the slot does not exist or is taken
        """
        return self._set_booking(day, start_time, booking_id, booked=True)

    def release_slot(self, day: date, start_time: str) -> BookableSlot:
        return self._set_booking(day, start_time, None, booked=False)
