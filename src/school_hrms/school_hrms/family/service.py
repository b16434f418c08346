from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import now_local
from ..common.envelope import Envelope
from ..core.exceptions import DomainError, NotFoundError
from ..directory.repository import DirectoryRepository
from ..users.session import SessionContext
from .model import FamilyMemberInput
from .repository import FamilyRepository
from .validation import check_family_caps, clean_family_member

logger = logging.getLogger(__name__)


class FamilyService:
    """Family CRUD for one employee at a time.

    Every public method returns an ``Envelope`` and never raises: domain
    errors keep their message, anything else is logged and replaced by a
    message safe to show to the user.
    """

    def __init__(
        self,
        family: FamilyRepository,
        directory: DirectoryRepository,
        *,
        clock: Optional[Callable[[], date]] = None,
    ):
        self._family = family
        self._directory = directory
        self._clock = clock or (lambda: now_local().date())

    def _guard(self, session: SessionContext, owner_id: str) -> str:
        owner_id = str(owner_id or "").strip()
        session.require_employee_access(owner_id)
        if not self._directory.employee_exists(owner_id):
            raise NotFoundError("Employee not found")
        return owner_id

    def _run(self, operation: str, action: Callable[[], Any]) -> Envelope:
        try:
            return Envelope.ok(action())
        except DomainError as e:
            logger.info("%s rejected: %s", operation, e)
            return Envelope.from_exception(e)
        except Exception as e:
            logger.exception("%s failed", operation)
            return Envelope.from_exception(e)

    def get_family_data(self, session: SessionContext, owner_id: str) -> Envelope:
        def action():
            owner = self._guard(session, owner_id)
            return [m.to_dict() for m in self._family.list_for_owner(owner)]

        return self._run("get_family_data", action)

    def add_family_member(self, session: SessionContext, owner_id: str, payload: Mapping[str, Any]) -> Envelope:
        def action():
            owner = self._guard(session, owner_id)
            fields = clean_family_member(FamilyMemberInput.from_dict(payload), today=self._clock())
            # Caps are checked against a fresh read, not whatever the caller last saw.
            check_family_caps(self._family.list_for_owner(owner), fields.type)
            member = self._family.add(owner, fields)
            logger.info("Family member %s (%s) added for employee %s", member.id, fields.type.value, owner)
            return member.to_dict()

        return self._run("add_family_member", action)

    def update_family_member(
        self, session: SessionContext, owner_id: str, member_id: int, payload: Mapping[str, Any]
    ) -> Envelope:
        def action():
            owner = self._guard(session, owner_id)
            fields = clean_family_member(FamilyMemberInput.from_dict(payload), today=self._clock())
            existing = self._family.list_for_owner(owner)
            if not any(m.id == member_id for m in existing):
                raise NotFoundError("Family member not found")
            check_family_caps(existing, fields.type, exclude_id=member_id)
            self._family.update(owner, member_id, fields)
            return None

        return self._run("update_family_member", action)

    def delete_family_member(self, session: SessionContext, owner_id: str, member_id: int) -> Envelope:
        def action():
            owner = self._guard(session, owner_id)
            if not self._family.delete(owner, member_id):
                raise NotFoundError("Family member not found")
            logger.info("Family member %s deleted for employee %s", member_id, owner)
            return None

        return self._run("delete_family_member", action)
