from __future__ import annotations

from typing import Protocol, Sequence

from .model import FamilyMember, FamilyMemberFields


class FamilyRepository(Protocol):
    def list_for_owner(self, owner_id: str) -> Sequence[FamilyMember]:
        raise NotImplementedError

    def add(self, owner_id: str, fields: FamilyMemberFields) -> FamilyMember:
        raise NotImplementedError

    def update(self, owner_id: str, member_id: int, fields: FamilyMemberFields) -> bool:
        raise NotImplementedError

    def delete(self, owner_id: str, member_id: int) -> bool:
        raise NotImplementedError
