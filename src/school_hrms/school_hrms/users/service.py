from __future__ import annotations

import logging

from werkzeug.security import check_password_hash

from ..core.exceptions import AuthenticationError
from .repository import UserRepository
from .session import SessionContext

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionContext:
        user = self._users.get_by_username((username or "").strip())
        if not user or not user.is_active:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # Placeholder or corrupted hashes in the users table.
            ok = False

        if not ok:
            logger.info("Failed login for %s", user.username)
            raise AuthenticationError("Invalid username or password")

        return SessionContext(
            user_id=user.user_id,
            role=user.role,
            employee_id=user.employee_id,
            full_name=user.full_name,
        )
