from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .directory.mysql_directory_repository import MySQLDirectoryRepository
from .directory.repository import DirectoryRepository
from .directory.service import DirectoryService
from .family.mysql_family_repository import MySQLFamilyRepository
from .family.repository import FamilyRepository
from .family.service import FamilyService
from .onboarding.mysql_onboarding_repository import MySQLOnboardingRepository
from .onboarding.repository import OnboardingRepository
from .onboarding.service import OnboardingService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    directory_repo: DirectoryRepository
    family_repo: FamilyRepository
    onboarding_repo: OnboardingRepository

    auth_service: AuthService
    directory_service: DirectoryService
    family_service: FamilyService
    onboarding_service: OnboardingService

    conn: Optional[DatabaseConnection] = None


def build_services(
    *,
    users_repo: UserRepository,
    directory_repo: DirectoryRepository,
    family_repo: FamilyRepository,
    onboarding_repo: OnboardingRepository,
    page_size: int = 50,
    max_page_size: int = 200,
    clock=None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of any repository implementations (MySQL or in-memory)."""
    return Container(
        users_repo=users_repo,
        directory_repo=directory_repo,
        family_repo=family_repo,
        onboarding_repo=onboarding_repo,
        auth_service=AuthService(users_repo),
        directory_service=DirectoryService(
            directory_repo, page_size=page_size, max_page_size=max_page_size, clock=clock
        ),
        family_service=FamilyService(family_repo, directory_repo, clock=clock),
        onboarding_service=OnboardingService(onboarding_repo, clock=clock),
        conn=conn,
    )


def build_container(*, db_config: dict, page_size: int = 50, max_page_size: int = 200) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return build_services(
        users_repo=MySQLUserRepository(conn),
        directory_repo=MySQLDirectoryRepository(conn),
        family_repo=MySQLFamilyRepository(conn),
        onboarding_repo=MySQLOnboardingRepository(conn),
        page_size=page_size,
        max_page_size=max_page_size,
        conn=conn,
    )
