from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AccountStatus, EmploymentStatus
from .model import Record


class DirectoryRepository(Protocol):
    """Read/write access to directory Records.

    Note: implementations return normalized ``Record`` objects, never raw rows.
    """

    def list_records(
        self,
        *,
        department: Optional[str] = None,
        position: Optional[str] = None,
        status: Optional[EmploymentStatus] = None,
    ) -> Sequence[Record]:
        raise NotImplementedError

    def list_departments(self) -> Sequence[str]:
        raise NotImplementedError

    def list_positions(self) -> Sequence[str]:
        raise NotImplementedError

    def employee_exists(self, employee_id: str) -> bool:
        raise NotImplementedError

    def update_employment_status(self, employee_id: str, status: EmploymentStatus) -> bool:
        raise NotImplementedError

    def set_account_status(self, employee_id: str, status: AccountStatus) -> bool:
        """False when the employee has no user account."""

        raise NotImplementedError
