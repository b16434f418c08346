"""Family member form checks and collection caps.

``validate_family_member`` reports every failing field at once.
``check_family_caps`` looks at the owner's whole collection: at most one
spouse and two parents; children, siblings and others are unbounded.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.sanitizers import sanitize_name, sanitize_phone, sanitize_string
from ..common.validators import (
    Verdict,
    collect_errors,
    validate_date_of_birth,
    validate_name,
    validate_phone,
    validate_required,
)
from ..core.constants import MAX_PARENTS, MAX_SPOUSES
from ..core.enums import FamilyMemberType
from ..core.exceptions import ConflictError, ValidationError
from .model import FamilyMember, FamilyMemberFields, FamilyMemberInput

SPOUSE_LIMIT_MESSAGE = "Only one spouse can be recorded."
PARENT_LIMIT_MESSAGE = "A maximum of two parents can be recorded."

_CAPS = {
    FamilyMemberType.SPOUSE: (MAX_SPOUSES, SPOUSE_LIMIT_MESSAGE),
    FamilyMemberType.PARENT: (MAX_PARENTS, PARENT_LIMIT_MESSAGE),
}


def _validate_type(value: str) -> Verdict:
    verdict = validate_required(value, "Type")
    if not verdict.valid:
        return verdict
    allowed = [t.value for t in FamilyMemberType]
    if value.strip() not in allowed:
        return Verdict(False, f"Type must be one of: {', '.join(allowed)}")
    return verdict


def validate_family_member(data: FamilyMemberInput, *, today: Optional[date] = None) -> dict[str, str]:
    checks = {
        "type": _validate_type(data.type),
        "name": validate_name(data.name, "Name"),
        # Children are often under the employee age floor, so only the calendar checks apply.
        "dateOfBirth": validate_date_of_birth(
            data.date_of_birth, "Date of birth", optional=True, check_age=False, today=today
        ),
        "contactNumber": validate_phone(
            data.contact_number, "Contact number", optional=True, allow_international=False
        ),
    }
    if data.member_type == FamilyMemberType.OTHER:
        checks["relationship"] = validate_required(data.relationship, "Relationship")
    return collect_errors(checks)


def clean_family_member(data: FamilyMemberInput, *, today: Optional[date] = None) -> FamilyMemberFields:
    """Validate and sanitize; raises ``ValidationError`` carrying every field error."""
    errors = validate_family_member(data, today=today)
    if errors:
        raise ValidationError("Please correct the highlighted fields", errors)

    dob = data.date_of_birth.strip()
    return FamilyMemberFields(
        type=FamilyMemberType(data.type.strip()),
        name=sanitize_name(data.name),
        date_of_birth=parse_iso_date(dob[:10]) if dob else None,
        occupation=sanitize_string(data.occupation) or None,
        relationship=sanitize_string(data.relationship) or None,
        contact_number=sanitize_phone(data.contact_number) or None,
        address=sanitize_string(data.address) or None,
        is_dependent=data.is_dependent,
    )


def check_family_caps(
    existing: Iterable[FamilyMember],
    candidate_type: FamilyMemberType,
    *,
    exclude_id: Optional[int] = None,
) -> None:
    """Raise ``ConflictError`` if adding ``candidate_type`` would exceed its cap.

    ``exclude_id`` leaves out the member being updated so that re-saving an
    existing spouse does not count it twice.
    """
    cap = _CAPS.get(candidate_type)
    if cap is None:
        return
    limit, message = cap
    count = sum(1 for m in existing if m.type == candidate_type and m.id != exclude_id)
    if count >= limit:
        raise ConflictError(message)
