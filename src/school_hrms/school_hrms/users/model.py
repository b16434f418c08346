from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AccountStatus, Role


@dataclass(frozen=True)
class User:
    """Login account; optionally linked to an employee Record."""

    user_id: int
    username: str
    full_name: str
    password_hash: str
    role: Role
    employee_id: Optional[str] = None
    status: AccountStatus = AccountStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE
