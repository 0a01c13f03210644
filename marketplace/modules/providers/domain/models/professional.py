# 📄 File: marketplace/modules/providers/domain/models/professional.py
# 🧭 Purpose (Layman Explanation):
# Profiles for doctors and advocates: their degrees, registrations, how they consult
# (clinic, online, phone) and what each kind of consultation costs.
# 🧪 Purpose (Technical Summary):
# DoctorProfile and AdvocateProfile domain models with qualification/registration value
# objects and per-mode consultation fees restricted to the modes each profession offers.
# 🔗 Dependencies:
# pydantic, provider.py, marketplace.shared.domain.value_objects
# 🔄 Connected Modules / Calls From:
# providers repositories, reviews (rating service)

from enum import Enum
from typing import ClassVar, Dict, List, Optional, Type

from pydantic import Field, field_validator

from marketplace.modules.identity.domain.models import Gender
from marketplace.shared.domain.base import ValueObject
from marketplace.shared.domain.value_objects import DEFAULT_CURRENCY, Amount

from .provider import ProviderProfile


class Qualification(ValueObject):
    degree: str
    institute: Optional[str] = None
    year: Optional[int] = Field(None, ge=1900, le=2100)


class Registration(ValueObject):
    """Medical council / bar council registration"""
    council: Optional[str] = None
    registration_number: str
    year: Optional[int] = Field(None, ge=1900, le=2100)


class Court(ValueObject):
    name: str
    city: Optional[str] = None
    state: Optional[str] = None


class DoctorConsultationMode(str, Enum):
    CLINIC = "clinic"
    ONLINE = "online"
    HOME_VISIT = "home-visit"


class AdvocateConsultationMode(str, Enum):
    CHAMBER = "chamber"
    ONLINE = "online"
    PHONE = "phone"


class _ConsultingProfile(ProviderProfile):
    """Shared fields of consulting professionals."""

    consultation_mode_enum: ClassVar[Type[Enum]]

    full_name: str = Field(min_length=1, max_length=120)
    slug: str = Field(min_length=1, max_length=140)
    gender: Optional[Gender] = None
    experience_years: int = Field(default=0, ge=0)
    about: Optional[str] = None
    qualifications: List[Qualification] = Field(default_factory=list)
    consultation_modes: List[str] = Field(default_factory=list)
    fees: Dict[str, Amount] = Field(default_factory=dict)
    currency: str = DEFAULT_CURRENCY
    is_featured: bool = False

    @field_validator("consultation_modes", "fees")
    @classmethod
    def validate_modes(cls, v):
        allowed = {mode.value for mode in cls.consultation_mode_enum}
        unknown = set(v) - allowed
        if unknown:
            raise ValueError(f"Unsupported consultation modes: {sorted(unknown)}")
        return v

    def fee_for(self, mode: str) -> Optional[float]:
        return self.fees.get(mode)


class DoctorProfile(_ConsultingProfile):
    """Doctor listing with clinic / online / home-visit consultations."""

    consultation_mode_enum: ClassVar[Type[Enum]] = DoctorConsultationMode

    specializations: List[str] = Field(default_factory=list)
    registrations: List[Registration] = Field(default_factory=list)
    consultation_modes: List[str] = Field(default_factory=lambda: [DoctorConsultationMode.CLINIC.value])
    total_appointments: int = Field(default=0, ge=0)


class AdvocateProfile(_ConsultingProfile):
    """Advocate listing with chamber / online / phone consultations."""

    consultation_mode_enum: ClassVar[Type[Enum]] = AdvocateConsultationMode

    practice_areas: List[str] = Field(default_factory=list)
    courts: List[Court] = Field(default_factory=list)
    registration: Optional[Registration] = None
    consultation_modes: List[str] = Field(default_factory=lambda: [AdvocateConsultationMode.CHAMBER.value])
    total_cases: int = Field(default=0, ge=0)
