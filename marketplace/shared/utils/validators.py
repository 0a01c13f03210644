# 📄 File: marketplace/shared/utils/validators.py
# 🧭 Purpose (Layman Explanation):
# Checkers that make sure contact and business details look right before they are saved:
# email addresses, Indian mobile numbers, PIN codes, GST numbers and bank IFSC codes.
# 🧪 Purpose (Technical Summary):
# Reusable validation functions returning ValidationResult objects, plus thin normalizers
# that raise ValueError so they can be called from pydantic field validators.
# 🔗 Dependencies:
# re, email-validator
# 🔄 Connected Modules / Calls From:
# identity domain models (User, Address), provider profiles, finance (Wallet settlement account, Invoice)

import re
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

PHONE_PATTERN = re.compile(r'^(?:\+?91)?[6-9]\d{9}$')
PINCODE_PATTERN = re.compile(r'^[1-9]\d{5}$')
GSTIN_PATTERN = re.compile(r'^\d{2}[A-Z]{5}\d{4}[A-Z][1-9A-Z]Z[0-9A-Z]$')
IFSC_PATTERN = re.compile(r'^[A-Z]{4}0[A-Z0-9]{6}$')
PAN_PATTERN = re.compile(r'^[A-Z]{5}\d{4}[A-Z]$')
TIME_SLOT_PATTERN = re.compile(r'^([01]\d|2[0-3]):[0-5]\d$')


class ValidationResult:
    """Result object for validation operations"""
    def __init__(self, is_valid: bool, errors: Optional[List[str]] = None, value: Optional[str] = None):
        self.is_valid = is_valid
        self.errors = errors or []
        self.value = value

    def add_error(self, error: str):
        """Add validation error"""
        self.errors.append(error)
        self.is_valid = False


# ==============================================================================
# EMAIL AND CONTACT VALIDATION
# ==============================================================================

def validate_email_address(email: str) -> ValidationResult:
    """
    Validate email address format.

    Args:
        email: Email address to validate

    Returns:
        ValidationResult with the normalized (lowercased) address in ``value``
    """
    result = ValidationResult(True)

    if not email or not isinstance(email, str):
        result.add_error("Email address is required")
        return result

    email = email.strip().lower()

    if len(email) > 254:
        result.add_error("Email address is too long (max 254 characters)")
        return result

    try:
        valid_email = validate_email(email, check_deliverability=False)
        result.value = valid_email.normalized.lower()
    except EmailNotValidError as e:
        result.add_error(f"Invalid email format: {str(e)}")

    return result


def validate_phone_number(phone: str) -> ValidationResult:
    """
    Validate an Indian mobile number (optionally prefixed with +91 / 91).

    The normalized value is the bare 10-digit number.
    """
    result = ValidationResult(True)

    if not phone or not isinstance(phone, str):
        result.add_error("Phone number is required")
        return result

    cleaned_phone = re.sub(r'[\s\-\.\(\)]', '', phone.strip())

    if not PHONE_PATTERN.match(cleaned_phone):
        result.add_error("Invalid phone number format")
        return result

    result.value = cleaned_phone[-10:]
    return result


# ==============================================================================
# ADDRESS AND BUSINESS IDENTIFIERS
# ==============================================================================

def validate_pincode(pincode: str) -> ValidationResult:
    result = ValidationResult(True)
    value = (pincode or "").strip()
    if not PINCODE_PATTERN.match(value):
        result.add_error("PIN code must be 6 digits and cannot start with 0")
        return result
    result.value = value
    return result


def validate_gstin(gstin: str) -> ValidationResult:
    result = ValidationResult(True)
    value = (gstin or "").strip().upper()
    if not GSTIN_PATTERN.match(value):
        result.add_error("Invalid GSTIN format")
        return result
    result.value = value
    return result


def validate_ifsc(ifsc: str) -> ValidationResult:
    result = ValidationResult(True)
    value = (ifsc or "").strip().upper()
    if not IFSC_PATTERN.match(value):
        result.add_error("Invalid IFSC code format")
        return result
    result.value = value
    return result


def validate_time_slot(value: str) -> ValidationResult:
    """24-hour HH:MM clock time used by schedules, timings and shows."""
    result = ValidationResult(True)
    value = (value or "").strip()
    if not TIME_SLOT_PATTERN.match(value):
        result.add_error("Time must use HH:MM 24-hour format")
        return result
    result.value = value
    return result


# ==============================================================================
# PYDANTIC HELPERS
# ==============================================================================

def _require(result: ValidationResult) -> str:
    if not result.is_valid:
        raise ValueError("; ".join(result.errors))
    return result.value


def normalize_email(email: str) -> str:
    return _require(validate_email_address(email))


def normalize_phone(phone: Optional[str]) -> Optional[str]:
    if phone is None:
        return None
    return _require(validate_phone_number(phone))


def normalize_pincode(pincode: str) -> str:
    return _require(validate_pincode(pincode))


def normalize_gstin(gstin: Optional[str]) -> Optional[str]:
    if not gstin:
        return None
    return _require(validate_gstin(gstin))


def normalize_ifsc(ifsc: Optional[str]) -> Optional[str]:
    if not ifsc:
        return None
    return _require(validate_ifsc(ifsc))


def normalize_time_slot(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return _require(validate_time_slot(value))
