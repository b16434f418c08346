from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ..core.enums import AccountStatus, DirectoryAction, EmploymentStatus, LoadStatus, Role
from ..core.exceptions import NotFoundError, UnavailableError, ValidationError
from ..users.session import SessionContext
from .export import export_filename
from .model import DirectoryCriteria, FilterOptions, PageInfo
from .repository import DirectoryRepository
from .view import LOAD_FAILED_MESSAGE, DirectoryView

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryResult:
    records: list[dict]
    page: PageInfo
    filter_options: FilterOptions

    def to_dict(self) -> dict:
        return {
            "records": self.records,
            "pagination": self.page.to_dict(),
            "filterOptions": self.filter_options.to_dict(),
        }


def _positive_int(value, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


class DirectoryService:
    """Use cases behind the employee directory (search, export, admin actions)."""

    def __init__(
        self,
        directory: DirectoryRepository,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
        clock: Optional[Callable[[], date]] = None,
    ):
        self._directory = directory
        self._page_size = page_size
        self._max_page_size = max_page_size
        self._clock = clock or (lambda: now_local().date())

    def page_size_for(self, limit) -> int:
        return min(_positive_int(limit, self._page_size), self._max_page_size)

    def filter_options(self) -> FilterOptions:
        return FilterOptions(
            departments=tuple(self._directory.list_departments()),
            positions=tuple(self._directory.list_positions()),
        )

    def _load(self, criteria: DirectoryCriteria, page_size: int) -> DirectoryView:
        view = DirectoryView(page_size=page_size, clock=self._clock)
        state = view.refresh(
            lambda: self._directory.list_records(
                department=criteria.department or None,
                position=criteria.position or None,
                status=criteria.status,
            ),
            self.filter_options,
        )
        if state.load_status == LoadStatus.FAILED:
            raise UnavailableError(state.error or LOAD_FAILED_MESSAGE)
        view.set_filter(criteria)
        return view

    def search(self, criteria: DirectoryCriteria, *, page=1, limit=None) -> DirectoryResult:
        view = self._load(criteria, self.page_size_for(limit))
        view.set_page(_positive_int(page, 1))
        today = self._clock()
        return DirectoryResult(
            records=[r.to_dict(today=today) for r in view.visible_records()],
            page=view.page_info(),
            filter_options=view.state.filter_options,
        )

    def export(self, criteria: DirectoryCriteria) -> tuple[str, str]:
        """Return ``(filename, csv_text)`` for every record matching ``criteria``."""
        view = self._load(criteria, self._page_size)
        return export_filename(self._clock()), view.export_all()

    def apply_action(
        self,
        session: SessionContext,
        *,
        employee_id: Optional[str],
        action: Optional[str],
        new_status: Optional[str] = None,
    ) -> str:
        session.require_role(Role.ADMIN)

        employee_id = str(employee_id or "").strip()
        if not employee_id or not action:
            raise ValidationError("Missing required fields")
        try:
            action = DirectoryAction(action)
        except ValueError:
            raise ValidationError("Invalid action")

        if not self._directory.employee_exists(employee_id):
            raise NotFoundError("Employee not found")

        if action == DirectoryAction.UPDATE_STATUS:
            if not new_status:
                raise ValidationError("New status is required", {"newStatus": "New status is required"})
            try:
                status = EmploymentStatus(new_status)
            except ValueError:
                raise ValidationError("Invalid employment status", {"newStatus": "Invalid employment status"})
            self._directory.update_employment_status(employee_id, status)
            logger.info("Employee %s status set to %s by user %s", employee_id, status.value, session.user_id)
            return f"Employment status updated to {status.value}"

        account_status = AccountStatus.ACTIVE if action == DirectoryAction.ACTIVATE else AccountStatus.INACTIVE
        if not self._directory.set_account_status(employee_id, account_status):
            raise NotFoundError("Employee has no user account")
        logger.info("Employee %s account %s by user %s", employee_id, account_status.value, session.user_id)
        return f"Account {'activated' if account_status == AccountStatus.ACTIVE else 'deactivated'}"
