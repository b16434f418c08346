"""Field-level validation rules.

Every rule takes the candidate value (and sometimes a peer value) and returns a
``Verdict``; none of them raise. Callers collect the failing verdicts into a
``{field: message}`` map so a form reports all of its errors at once.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Mapping, Optional

from ..core.constants import MAX_AGE_YEARS, MAX_EMAIL_LENGTH, MIN_ADDRESS_LENGTH, MIN_AGE_YEARS
from ..core.exceptions import ValidationError
from .datetime_utils import now_local, parse_iso_date

_NAME_RE = re.compile(r"^[A-Za-zÀ-ÖØ-öø-ɏ .\-]+$")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_LOCAL_MOBILE_RE = re.compile(r"^09\d{9}$")
_INTL_MOBILE_RE = re.compile(r"^639\d{9}$")
_URL_RE = re.compile(r"^https?://[^\s]*\.[^\s]*$", re.IGNORECASE)
_NON_DIGIT_RE = re.compile(r"\D")
_WS_RE = re.compile(r"\s+")

OTHER = "Other"


@dataclass(frozen=True)
class Verdict:
    valid: bool
    error: Optional[str] = None


VALID = Verdict(True)


def _reject(message: str) -> Verdict:
    return Verdict(False, message)


def _blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def require_non_empty(value: str, field_name: str) -> str:
    """Raising variant used by services for single mandatory inputs."""
    verdict = validate_required(value, field_name)
    if not verdict.valid:
        raise ValidationError(verdict.error or "")
    return value.strip()


def validate_required(value: Optional[str], label: str) -> Verdict:
    if _blank(value):
        return _reject(f"{label} is required.")
    return VALID


def validate_name(value: Optional[str], label: str = "Name") -> Verdict:
    if _blank(value):
        return _reject(f"{label} is required.")
    if not _NAME_RE.match(str(value).strip()):
        return _reject(f"{label} must contain letters only (no numbers or special characters)")
    return VALID


def _normalize_person_name(name: str) -> str:
    return _WS_RE.sub(" ", name.strip().lower())


def validate_not_same_person(
    own_name: Optional[str],
    other_name: Optional[str],
    label: str = "Emergency contact name",
    other_label: str = "your own name",
) -> Verdict:
    """Reject a contact whose name equals the owner's full name (case-insensitive)."""
    if _blank(own_name) or _blank(other_name):
        # Emptiness is reported by the required-field rules.
        return VALID
    if _normalize_person_name(own_name) == _normalize_person_name(other_name):
        return _reject(f"{label} cannot be the same as {other_label}.")
    return VALID


def normalize_phone(value: Optional[str]) -> str:
    """Digits-only form of a phone number."""
    return _NON_DIGIT_RE.sub("", value or "")


def validate_phone(
    value: Optional[str],
    label: str = "Phone number",
    *,
    optional: bool = False,
    allow_international: bool = True,
) -> Verdict:
    """Philippine mobile numbers: ``09XXXXXXXXX`` or ``+63 9XXXXXXXXX``."""
    if _blank(value):
        return VALID if optional else _reject(f"{label} is required.")

    digits = normalize_phone(value)
    if _LOCAL_MOBILE_RE.match(digits):
        return VALID
    if allow_international and _INTL_MOBILE_RE.match(digits):
        return VALID

    if allow_international:
        return _reject(f"{label} must be 11 digits starting with 09 (e.g., 09123456789) or +63 followed by 10 digits")
    return _reject(f"{label} must be exactly 11 digits starting with 09 (e.g., 09123456789)")


def validate_email(value: Optional[str], label: str = "Email", *, optional: bool = False) -> Verdict:
    if _blank(value):
        return VALID if optional else _reject(f"{label} is required.")
    email = str(value).strip()
    if not _EMAIL_RE.match(email):
        return _reject("Please enter a valid email address")
    if len(email) > MAX_EMAIL_LENGTH:
        return _reject(f"{label} must be less than {MAX_EMAIL_LENGTH} characters")
    return VALID


def validate_url(value: Optional[str], label: str = "URL", *, optional: bool = True) -> Verdict:
    if _blank(value):
        return VALID if optional else _reject(f"{label} is required.")
    if not _URL_RE.match(str(value).strip()):
        return _reject("Please enter a valid URL (e.g., https://facebook.com/yourprofile)")
    return VALID


def _age_on(born: date, today: date) -> int:
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def validate_date_of_birth(
    value: Optional[str],
    label: str = "Date of birth",
    *,
    optional: bool = False,
    check_age: bool = True,
    today: Optional[date] = None,
) -> Verdict:
    """Real calendar date, not in the future and, with ``check_age``, an age within 15..100."""
    if _blank(value):
        return VALID if optional else _reject(f"{label} is required.")

    if isinstance(value, date):
        born = value
    else:
        try:
            born = parse_iso_date(str(value).strip()[:10])
        except ValueError:
            return _reject("Please enter a valid date")

    today = today or now_local().date()
    if born > today:
        return _reject(f"{label} cannot be in the future")
    if not check_age:
        return VALID

    age = _age_on(born, today)
    if age < MIN_AGE_YEARS:
        return _reject(f"Age must be at least {MIN_AGE_YEARS} years")
    if age > MAX_AGE_YEARS:
        return _reject(f"Age cannot be more than {MAX_AGE_YEARS} years")
    return VALID


def validate_address(
    value: Optional[str],
    label: str = "Address",
    *,
    optional: bool = False,
    min_length: int = MIN_ADDRESS_LENGTH,
) -> Verdict:
    if _blank(value):
        return VALID if optional else _reject(f"{label} is required.")
    if len(str(value).strip()) < min_length:
        return _reject(f"{label} must be at least {min_length} characters")
    return VALID


def validate_at_least_one(values: Mapping[str, Optional[str]], group_label: str) -> Verdict:
    """Accept when any value of the group is non-empty.

    ``values`` maps display labels to values, e.g. ``{"SSS": "...", "TIN": ""}``.
    """
    if any(not _blank(v) for v in values.values()):
        return VALID
    labels = list(values)
    if len(labels) > 1:
        listed = f"{', '.join(labels[:-1])}, or {labels[-1]}"
    else:
        listed = "".join(labels)
    return _reject(f"At least one {group_label} is required ({listed})")


def validate_relationship(
    value: Optional[str],
    allowed: Iterable[str],
    *,
    other_text: Optional[str] = None,
    label: str = "Relationship",
) -> Verdict:
    """Value from a fixed list; choosing ``Other`` requires the free-text field."""
    if _blank(value):
        return _reject(f"{label} is required.")
    allowed = list(allowed)
    value = str(value).strip()
    if value not in allowed:
        return _reject(f"{label} must be one of: {', '.join(allowed)}")
    if value == OTHER and _blank(other_text):
        return _reject(f"Please specify the {label.lower()}")
    return VALID


def _digits_rule(value: Optional[str], label: str, pattern: str, hint: str) -> Verdict:
    if _blank(value):
        return VALID
    digits = re.sub(r"[-\s]", "", str(value))
    if not re.fullmatch(pattern, digits):
        return _reject(f"{label} must be {hint}")
    return VALID


def validate_sss_number(value: Optional[str]) -> Verdict:
    return _digits_rule(value, "SSS Number", r"\d{10}", "10 digits (format: XX-XXXXXXX-X)")


def validate_tin_number(value: Optional[str]) -> Verdict:
    return _digits_rule(value, "TIN Number", r"\d{9,12}", "9-12 digits (format: XXX-XXX-XXX or XXX-XXX-XXX-XXX)")


def validate_philhealth_number(value: Optional[str]) -> Verdict:
    return _digits_rule(value, "PhilHealth Number", r"\d{12}", "12 digits (format: XX-XXXXXXXXX-X)")


def validate_pagibig_number(value: Optional[str]) -> Verdict:
    return _digits_rule(value, "Pag-IBIG Number", r"\d{12}", "12 digits (format: XXXX-XXXX-XXXX)")


def validate_gsis_number(value: Optional[str]) -> Verdict:
    return _digits_rule(value, "GSIS Number", r"\d{11}", "11 digits")


def validate_prc_license_number(value: Optional[str]) -> Verdict:
    return _digits_rule(value, "PRC License Number", r"\d{7}", "7 digits")


def collect_errors(checks: Mapping[str, Verdict]) -> dict[str, str]:
    """Keep only the failing verdicts, keyed by field."""
    return {field: v.error or "Invalid value" for field, v in checks.items() if not v.valid}
