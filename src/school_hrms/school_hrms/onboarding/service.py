from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import now_local
from ..common.envelope import Envelope
from ..core.enums import Role
from ..core.exceptions import ConflictError, DomainError, NotFoundError, ValidationError
from ..users.session import SessionContext
from .model import EmployeeInfo
from .repository import OnboardingRepository
from .validation import masked, sanitize_employee_info, validate_employee_info

logger = logging.getLogger(__name__)


class OnboardingService:
    """Employee-information submission by a hired candidate."""

    def __init__(self, onboarding: OnboardingRepository, *, clock: Optional[Callable[[], date]] = None):
        self._onboarding = onboarding
        self._clock = clock or (lambda: now_local().date())

    def submit_employee_info(self, candidate_id: str, payload: Mapping[str, Any]) -> Envelope:
        try:
            candidate = self._onboarding.get_candidate(candidate_id)
            if candidate is None:
                raise NotFoundError("Candidate not found")
            if self._onboarding.get_submission(candidate_id) is not None:
                raise ConflictError("Employee information has already been submitted.")

            info = EmployeeInfo.from_dict(payload)
            errors = validate_employee_info(info, candidate_name=candidate.full_name, today=self._clock())
            if errors:
                raise ValidationError("Please correct the errors in the form before proceeding", errors)

            cleaned = sanitize_employee_info(info)
            self._onboarding.save_submission(candidate_id, cleaned)
            logger.info("Employee information submitted for candidate %s", candidate_id)
            return Envelope.ok(masked(cleaned).to_dict())
        except DomainError as e:
            return Envelope.from_exception(e)
        except Exception as e:
            logger.exception("Employee information submission failed for candidate %s", candidate_id)
            return Envelope.from_exception(e)

    def get_submission(self, session: SessionContext, candidate_id: str) -> Envelope:
        try:
            session.require_role(Role.ADMIN)
            info = self._onboarding.get_submission(candidate_id)
            if info is None:
                raise NotFoundError("No employee information submitted yet")
            return Envelope.ok(masked(info).to_dict())
        except DomainError as e:
            return Envelope.from_exception(e)
        except Exception as e:
            logger.exception("Loading employee information failed for candidate %s", candidate_id)
            return Envelope.from_exception(e)
