from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

from src.school_hrms.school_hrms.core.enums import AccountStatus, EmploymentStatus
from src.school_hrms.school_hrms.directory.model import ContactInfo, EmploymentDetail, Record
from src.school_hrms.school_hrms.family.model import FamilyMember, FamilyMemberFields
from src.school_hrms.school_hrms.onboarding.model import Candidate, EmployeeInfo
from src.school_hrms.school_hrms.users.model import User

FIXED_TODAY = date(2026, 3, 15)


@pytest.fixture
def fixed_today() -> date:
    return FIXED_TODAY


def make_record(
    employee_id: str,
    first_name: str = "Ana",
    last_name: str = "Reyes",
    *,
    department: str = "Mathematics",
    position: str = "Teacher I",
    hire_date: Optional[date] = None,
    status: Optional[EmploymentStatus] = EmploymentStatus.REGULAR,
    email: Optional[str] = None,
    account_status: Optional[AccountStatus] = AccountStatus.ACTIVE,
) -> Record:
    return Record(
        employee_id=employee_id,
        first_name=first_name,
        last_name=last_name,
        department=department,
        position=position,
        contact=ContactInfo(email=email),
        employment=EmploymentDetail(status=status, hire_date=hire_date),
        account_status=account_status,
    )


class InMemoryDirectory:
    def __init__(self, records=(), departments=()):
        self.records = list(records)
        self.departments = list(departments)
        self.fail_with: Optional[Exception] = None

    def list_records(self, *, department=None, position=None, status=None):
        if self.fail_with:
            raise self.fail_with
        out = self.records
        if department:
            out = [r for r in out if r.department == department]
        if position:
            out = [r for r in out if r.position == position]
        if status is not None:
            out = [r for r in out if r.employment_status == status]
        return list(out)

    def list_departments(self):
        return sorted(set(self.departments) | {r.department for r in self.records if r.department})

    def list_positions(self):
        return sorted({r.position for r in self.records if r.position})

    def employee_exists(self, employee_id: str) -> bool:
        return any(r.employee_id == employee_id for r in self.records)

    def _replace(self, employee_id: str, **changes) -> None:
        self.records = [replace(r, **changes) if r.employee_id == employee_id else r for r in self.records]

    def update_employment_status(self, employee_id: str, status: EmploymentStatus) -> bool:
        record = next(r for r in self.records if r.employee_id == employee_id)
        employment = replace(record.employment or EmploymentDetail(), status=status)
        self._replace(employee_id, employment=employment)
        return True

    def set_account_status(self, employee_id: str, status: AccountStatus) -> bool:
        record = next(r for r in self.records if r.employee_id == employee_id)
        if record.account_status is None:
            return False
        self._replace(employee_id, account_status=status)
        return True


class InMemoryFamily:
    def __init__(self):
        self.members: dict[int, FamilyMember] = {}
        self._id = 0
        self.fail_with: Optional[Exception] = None

    def list_for_owner(self, owner_id: str):
        if self.fail_with:
            raise self.fail_with
        return [m for m in self.members.values() if m.owner_id == owner_id]

    def add(self, owner_id: str, fields: FamilyMemberFields) -> FamilyMember:
        self._id += 1
        member = FamilyMember.from_fields(self._id, owner_id, fields)
        self.members[self._id] = member
        return member

    def _owned(self, owner_id: str, member_id: int) -> bool:
        member = self.members.get(member_id)
        return member is not None and member.owner_id == owner_id

    def update(self, owner_id: str, member_id: int, fields: FamilyMemberFields) -> bool:
        if not self._owned(owner_id, member_id):
            return False
        self.members[member_id] = FamilyMember.from_fields(member_id, owner_id, fields)
        return True

    def delete(self, owner_id: str, member_id: int) -> bool:
        if not self._owned(owner_id, member_id):
            return False
        del self.members[member_id]
        return True


class InMemoryOnboarding:
    def __init__(self, candidates=()):
        self.candidates = {c.candidate_id: c for c in candidates}
        self.submissions: dict[str, EmployeeInfo] = {}

    def get_candidate(self, candidate_id: str) -> Optional[Candidate]:
        return self.candidates.get(candidate_id)

    def get_submission(self, candidate_id: str) -> Optional[EmployeeInfo]:
        return self.submissions.get(candidate_id)

    def save_submission(self, candidate_id: str, info: EmployeeInfo) -> None:
        self.submissions[candidate_id] = info


class InMemoryUsers:
    def __init__(self, users=()):
        self.users = list(users)

    def get_by_id(self, user_id: int) -> Optional[User]:
        return next((u for u in self.users if u.user_id == user_id), None)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users if u.username == username), None)
