from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for access gating."""

    ADMIN = "admin"
    FACULTY = "faculty"
    EMPLOYEE = "employee"


class EmploymentStatus(str, Enum):
    REGULAR = "Regular"
    PROBATIONARY = "Probationary"
    PART_TIME = "Part_Time"
    HIRED = "Hired"
    RESIGNED = "Resigned"
    RETIRED = "Retired"


class AccountStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class FamilyMemberType(str, Enum):
    SPOUSE = "Spouse"
    CHILD = "Child"
    PARENT = "Parent"
    SIBLING = "Sibling"
    OTHER = "Other"


class ServiceBucket(str, Enum):
    """Years-of-service ranges offered by the directory filter.

    Each bucket is a half-open range [low, high); the last one has no upper bound.
    """

    UNDER_5 = "0-5"
    FROM_5_TO_10 = "5-10"
    FROM_10_TO_15 = "10-15"
    FROM_15_TO_20 = "15-20"
    OVER_20 = "20+"

    @property
    def bounds(self) -> tuple[int, int | None]:
        return _BUCKET_BOUNDS[self]

    def contains(self, years: int) -> bool:
        low, high = self.bounds
        return years >= low and (high is None or years < high)


_BUCKET_BOUNDS = {
    ServiceBucket.UNDER_5: (0, 5),
    ServiceBucket.FROM_5_TO_10: (5, 10),
    ServiceBucket.FROM_10_TO_15: (10, 15),
    ServiceBucket.FROM_15_TO_20: (15, 20),
    ServiceBucket.OVER_20: (20, None),
}


class DirectoryAction(str, Enum):
    """Admin actions accepted by PUT /directory."""

    UPDATE_STATUS = "update_status"
    ACTIVATE = "activate"
    DEACTIVATE = "deactivate"


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"
