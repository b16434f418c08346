from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_date, format_years_of_service
from ..core.enums import AccountStatus, EmploymentStatus, ServiceBucket
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ContactInfo:
    email: Optional[str] = None
    phone: Optional[str] = None
    messenger_name: Optional[str] = None
    fb_link: Optional[str] = None


@dataclass(frozen=True)
class EmploymentDetail:
    """Employment metadata of a Record.

    Invariant: hire date <= separation date (resignation or retirement) when both are set.
    """

    status: Optional[EmploymentStatus] = None
    hire_date: Optional[date] = None
    resignation_date: Optional[date] = None
    retirement_date: Optional[date] = None

    def __post_init__(self):
        if self.hire_date:
            for separation in (self.resignation_date, self.retirement_date):
                if separation and separation < self.hire_date:
                    raise ValueError("separation date precedes hire date")


@dataclass(frozen=True)
class Record:
    """Employee-like entity shown in the directory."""

    employee_id: str
    first_name: str = ""
    last_name: str = ""
    middle_name: str = ""
    suffix: str = ""
    department: str = ""
    position: str = ""
    contact: ContactInfo = field(default_factory=ContactInfo)
    employment: Optional[EmploymentDetail] = None
    account_status: Optional[AccountStatus] = None

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name, self.suffix]
        return " ".join(p for p in parts if p) or self.employee_id

    @property
    def hire_date(self) -> Optional[date]:
        return self.employment.hire_date if self.employment else None

    @property
    def employment_status(self) -> Optional[EmploymentStatus]:
        return self.employment.status if self.employment else None

    def to_dict(self, *, today: Optional[date] = None) -> dict:
        employment = self.employment or EmploymentDetail()
        return {
            "employeeId": self.employee_id,
            "firstName": self.first_name,
            "middleName": self.middle_name,
            "lastName": self.last_name,
            "suffix": self.suffix,
            "fullName": self.full_name,
            "department": self.department,
            "position": self.position,
            "contact": {
                "email": self.contact.email,
                "phone": self.contact.phone,
                "messengerName": self.contact.messenger_name,
                "fbLink": self.contact.fb_link,
            },
            "employmentStatus": employment.status.value if employment.status else None,
            "hireDate": format_date(employment.hire_date) or None,
            "resignationDate": format_date(employment.resignation_date) or None,
            "accountStatus": self.account_status.value if self.account_status else None,
            "yearsOfService": format_years_of_service(employment.hire_date, today=today),
        }


@dataclass(frozen=True)
class DirectoryCriteria:
    """Active directory filters. Empty string / None means "match everything"."""

    name: str = ""
    department: str = ""
    position: str = ""
    status: Optional[EmploymentStatus] = None
    years_of_service: Optional[ServiceBucket] = None

    def merge(self, other: "DirectoryCriteria") -> "DirectoryCriteria":
        """Fields set on ``other`` override the ones set here."""
        changes = {f.name: getattr(other, f.name) for f in fields(other) if getattr(other, f.name)}
        return replace(self, **changes)

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "DirectoryCriteria":
        """Build criteria from query parameters (``name``, ``department``, ...)."""

        def text(key: str) -> str:
            return str(params.get(key) or "").strip()

        status = None
        if text("status"):
            try:
                status = EmploymentStatus(text("status"))
            except ValueError:
                raise ValidationError("Invalid employment status", {"status": "Invalid employment status"})

        bucket = None
        raw_bucket = text("yearsOfService") or text("years_of_service")
        if raw_bucket:
            try:
                bucket = ServiceBucket(raw_bucket)
            except ValueError:
                raise ValidationError(
                    "Invalid years of service range", {"yearsOfService": "Invalid years of service range"}
                )

        return cls(
            name=text("name"),
            department=text("department"),
            position=text("position"),
            status=status,
            years_of_service=bucket,
        )


@dataclass(frozen=True)
class FilterOptions:
    departments: tuple[str, ...] = ()
    positions: tuple[str, ...] = ()
    statuses: tuple[str, ...] = tuple(s.value for s in EmploymentStatus)

    def to_dict(self) -> dict:
        return {
            "departments": list(self.departments),
            "positions": list(self.positions),
            "statuses": list(self.statuses),
        }


@dataclass(frozen=True)
class PageInfo:
    current_page: int
    total_pages: int
    total_count: int
    page_size: int

    @classmethod
    def for_count(cls, total_count: int, page_size: int, page: int) -> "PageInfo":
        total_pages = max(1, math.ceil(total_count / page_size))
        return cls(
            current_page=min(max(page, 1), total_pages),
            total_pages=total_pages,
            total_count=total_count,
            page_size=page_size,
        )

    @property
    def start(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def end(self) -> int:
        return self.current_page * self.page_size

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        return self.current_page > 1

    def to_dict(self) -> dict:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalCount": self.total_count,
            "limit": self.page_size,
            "hasNextPage": self.has_next_page,
            "hasPrevPage": self.has_prev_page,
        }
