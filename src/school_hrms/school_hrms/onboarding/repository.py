from __future__ import annotations

from typing import Optional, Protocol

from .model import Candidate, EmployeeInfo


class OnboardingRepository(Protocol):
    def get_candidate(self, candidate_id: str) -> Optional[Candidate]:
        raise NotImplementedError

    def get_submission(self, candidate_id: str) -> Optional[EmployeeInfo]:
        raise NotImplementedError

    def save_submission(self, candidate_id: str, info: EmployeeInfo) -> None:
        raise NotImplementedError
