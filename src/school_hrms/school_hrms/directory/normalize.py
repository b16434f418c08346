"""Row -> Record conversion at the data-access boundary.

Backends hand back related objects either as a list (one-to-many join), a
single dict, or nothing at all. Everything is folded into one shape here so
the rest of the package never has to check which one it got.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import coerce_date
from ..core.enums import AccountStatus, EmploymentStatus
from .model import ContactInfo, EmploymentDetail, Record

logger = logging.getLogger(__name__)


def as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [v for v in value if v is not None]
    return [value]


def first_of(value: Any) -> Optional[Mapping[str, Any]]:
    items = as_list(value)
    return items[0] if items else None


def _text(row: Optional[Mapping[str, Any]], *keys: str) -> str:
    if not row:
        return ""
    for key in keys:
        value = row.get(key)
        if value:
            return str(value).strip()
    return ""


def _optional_text(row: Optional[Mapping[str, Any]], *keys: str) -> Optional[str]:
    return _text(row, *keys) or None


def _enum_or_none(enum_cls, value: Any):
    if not value:
        return None
    try:
        return enum_cls(str(value))
    except ValueError:
        return None


def contact_from_row(value: Any) -> ContactInfo:
    row = first_of(value)
    return ContactInfo(
        email=_optional_text(row, "email", "Email"),
        phone=_optional_text(row, "phone", "Phone"),
        messenger_name=_optional_text(row, "messenger_name", "MessengerName"),
        fb_link=_optional_text(row, "fb_link", "FBLink"),
    )


def employment_from_row(value: Any, *, employee_id: str = "") -> Optional[EmploymentDetail]:
    row = first_of(value)
    if not row:
        return None

    status = _enum_or_none(EmploymentStatus, row.get("employment_status") or row.get("EmploymentStatus"))
    hire = coerce_date(row.get("hire_date") or row.get("HireDate"))
    resigned = coerce_date(row.get("resignation_date") or row.get("ResignationDate"))
    retired = coerce_date(row.get("retirement_date") or row.get("RetirementDate"))

    try:
        return EmploymentDetail(status=status, hire_date=hire, resignation_date=resigned, retirement_date=retired)
    except ValueError:
        logger.warning("Employee %s has a separation date before the hire date; ignoring separation", employee_id)
        return EmploymentDetail(status=status, hire_date=hire)


def record_from_row(row: Mapping[str, Any]) -> Record:
    employee_id = str(row.get("employee_id") or row.get("EmployeeID") or "")

    department = row.get("department")
    if isinstance(department, (list, tuple, dict)):
        department = _text(first_of(department), "department_name", "DepartmentName")

    account = first_of(row.get("account") or row.get("User"))

    return Record(
        employee_id=employee_id,
        first_name=_text(row, "first_name", "FirstName"),
        last_name=_text(row, "last_name", "LastName"),
        middle_name=_text(row, "middle_name", "MiddleName"),
        suffix=_text(row, "suffix", "Suffix"),
        department=str(department or "").strip(),
        position=_text(row, "position", "Position"),
        contact=contact_from_row(row.get("contact") or row.get("ContactInfo")),
        employment=employment_from_row(row.get("employment") or row.get("EmploymentDetail"), employee_id=employee_id),
        account_status=_enum_or_none(AccountStatus, (account or {}).get("status") or (account or {}).get("Status")),
    )


def records_from_rows(rows: Sequence[Mapping[str, Any]]) -> list[Record]:
    return [record_from_row(r) for r in rows]
