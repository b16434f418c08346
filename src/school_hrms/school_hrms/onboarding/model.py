from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, Optional

CIVIL_STATUSES = ("Single", "Married", "Divorced", "Widowed")
BLOOD_TYPES = ("A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-")
EMERGENCY_RELATIONSHIPS = ("Spouse", "Parent", "Sibling", "Child", "Relative", "Friend", "Other")

GOVT_ID_FIELDS = (
    "sss_number",
    "tin_number",
    "philhealth_number",
    "pagibig_number",
    "gsis_number",
    "prc_license_number",
)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass(frozen=True)
class Candidate:
    candidate_id: str
    full_name: str
    email: Optional[str] = None


@dataclass(frozen=True)
class EmployeeInfo:
    """Personal details a hired candidate submits before onboarding.

    Used both for the raw form (strings as typed) and for the sanitized
    values that get stored.
    """

    date_of_birth: str = ""
    place_of_birth: str = ""
    civil_status: str = ""
    nationality: str = ""
    religion: str = ""
    blood_type: str = ""
    present_address: str = ""
    permanent_address: str = ""
    phone: str = ""
    email: str = ""
    messenger_name: str = ""
    fb_link: str = ""
    sss_number: str = ""
    tin_number: str = ""
    philhealth_number: str = ""
    pagibig_number: str = ""
    gsis_number: str = ""
    prc_license_number: str = ""
    prc_validity: str = ""
    emergency_contact_name: str = ""
    emergency_contact_number: str = ""
    emergency_contact_relationship: str = ""
    emergency_contact_relationship_other: str = ""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "EmployeeInfo":
        """Accepts camelCase (``placeOfBirth``) or snake_case keys."""
        values = {}
        for f in fields(cls):
            raw = payload.get(_camel(f.name), payload.get(f.name))
            values[f.name] = "" if raw is None else str(raw)
        return cls(**values)

    def to_dict(self) -> dict:
        return {_camel(k): v for k, v in asdict(self).items()}
