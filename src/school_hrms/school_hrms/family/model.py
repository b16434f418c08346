from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_date
from ..core.enums import FamilyMemberType


def _pick(payload: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in payload:
            return payload[key]
    return None


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


@dataclass(frozen=True)
class FamilyMemberInput:
    """Raw form values for one family member, before validation."""

    type: str = ""
    name: str = ""
    date_of_birth: str = ""
    occupation: str = ""
    relationship: str = ""
    contact_number: str = ""
    address: str = ""
    is_dependent: bool = False

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "FamilyMemberInput":
        return cls(
            type=_as_text(_pick(payload, "type")),
            name=_as_text(_pick(payload, "name")),
            date_of_birth=_as_text(_pick(payload, "dateOfBirth", "date_of_birth")),
            occupation=_as_text(_pick(payload, "occupation")),
            relationship=_as_text(_pick(payload, "relationship")),
            contact_number=_as_text(_pick(payload, "contactNumber", "contact_number")),
            address=_as_text(_pick(payload, "address")),
            is_dependent=_as_bool(_pick(payload, "isDependent", "is_dependent")),
        )

    @property
    def member_type(self) -> Optional[FamilyMemberType]:
        try:
            return FamilyMemberType(self.type.strip())
        except ValueError:
            return None


@dataclass(frozen=True)
class FamilyMemberFields:
    """Validated, sanitized non-key fields; what the repository writes."""

    type: FamilyMemberType
    name: str
    date_of_birth: Optional[date] = None
    occupation: Optional[str] = None
    relationship: Optional[str] = None
    contact_number: Optional[str] = None
    address: Optional[str] = None
    is_dependent: bool = False


@dataclass(frozen=True)
class FamilyMember:
    id: int
    owner_id: str
    type: FamilyMemberType
    name: str
    date_of_birth: Optional[date] = None
    occupation: Optional[str] = None
    relationship: Optional[str] = None
    contact_number: Optional[str] = None
    address: Optional[str] = None
    is_dependent: bool = False

    @classmethod
    def from_fields(cls, member_id: int, owner_id: str, fields: FamilyMemberFields) -> "FamilyMember":
        return cls(
            id=member_id,
            owner_id=owner_id,
            type=fields.type,
            name=fields.name,
            date_of_birth=fields.date_of_birth,
            occupation=fields.occupation,
            relationship=fields.relationship,
            contact_number=fields.contact_number,
            address=fields.address,
            is_dependent=fields.is_dependent,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.owner_id,
            "type": self.type.value,
            "name": self.name,
            "dateOfBirth": format_date(self.date_of_birth) or None,
            "occupation": self.occupation,
            "relationship": self.relationship,
            "contactNumber": self.contact_number,
            "address": self.address,
            "isDependent": self.is_dependent,
        }
