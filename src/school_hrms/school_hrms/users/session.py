from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError


@dataclass(frozen=True)
class SessionContext:
    """Who is calling. Passed explicitly into every service that gates on role.

    Controllers build it from the Flask session; tests construct it directly.
    """

    user_id: Optional[int] = None
    role: Optional[Role] = None
    employee_id: Optional[str] = None
    full_name: str = ""

    @classmethod
    def anonymous(cls) -> "SessionContext":
        return cls()

    @classmethod
    def from_session(cls, data: Mapping[str, Any]) -> "SessionContext":
        if "user_id" not in data:
            return cls.anonymous()
        try:
            role = Role(data.get("role"))
        except ValueError:
            role = None
        return cls(
            user_id=int(data["user_id"]),
            role=role,
            employee_id=data.get("employee_id") or None,
            full_name=data.get("name") or "",
        )

    def to_session(self) -> dict:
        return {
            "user_id": self.user_id,
            "role": self.role.value if self.role else None,
            "employee_id": self.employee_id,
            "name": self.full_name,
        }

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def has_role(self, *roles: Role) -> bool:
        return self.role in roles

    def require_login(self) -> None:
        if not self.is_authenticated:
            raise AuthenticationError("Please sign in to continue")

    def require_role(self, *roles: Role) -> None:
        self.require_login()
        if not self.has_role(*roles):
            raise AuthorizationError("You do not have permission to perform this action")

    def can_access_employee(self, employee_id: str) -> bool:
        """Admins and faculty see every employee; everyone else only themself."""
        if self.has_role(Role.ADMIN, Role.FACULTY):
            return True
        return bool(self.employee_id) and self.employee_id == str(employee_id)

    def require_employee_access(self, employee_id: str) -> None:
        self.require_login()
        if not self.can_access_employee(employee_id):
            raise AuthorizationError("You do not have permission to access this employee")
