"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory repositories seeded with one ACTIVE and one PENDING user
- Fixed clock and UUID providers
- Services wired with a mocked mail sender
"""

from unittest.mock import Mock

import pytest

from userhub.adapters.clock import FixedClockHolder, FixedUuidHolder
from userhub.adapters.repository.memory import InMemoryPostRepository, InMemoryUserRepository
from userhub.domain.certification import CertificationService
from userhub.domain.models import User, UserStatus
from userhub.domain.posts import PostService
from userhub.domain.users import UserService

FIXED_MILLIS = 1678530673958
FIXED_UUID = "aaaaaaaa-aaaa-aaaa-aaaa-aaaaaaaaaaaa"
SEEDED_LOGIN_AT = 1678500000000


@pytest.fixture
def clock_holder() -> FixedClockHolder:
    return FixedClockHolder(FIXED_MILLIS)


@pytest.fixture
def uuid_holder() -> FixedUuidHolder:
    return FixedUuidHolder(FIXED_UUID)


@pytest.fixture
def mail_sender() -> Mock:
    return Mock()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """Repository holding user 1 (ACTIVE) and user 2 (PENDING)."""
    repository = InMemoryUserRepository()
    repository.save(
        User(
            id=1,
            email="tester@test.com",
            nickname="tester",
            address="Seoul",
            certification_code=FIXED_UUID,
            status=UserStatus.ACTIVE,
            last_login_at=SEEDED_LOGIN_AT,
        )
    )
    repository.save(
        User(
            id=2,
            email="tester2@test.com",
            nickname="tester2",
            address="Jeju",
            certification_code=FIXED_UUID,
            status=UserStatus.PENDING,
            last_login_at=SEEDED_LOGIN_AT,
        )
    )
    return repository


@pytest.fixture
def post_repository(user_repository: InMemoryUserRepository) -> InMemoryPostRepository:
    return InMemoryPostRepository(user_repository)


@pytest.fixture
def user_service(
    user_repository: InMemoryUserRepository,
    mail_sender: Mock,
    clock_holder: FixedClockHolder,
    uuid_holder: FixedUuidHolder,
) -> UserService:
    return UserService(
        repository=user_repository,
        certification_service=CertificationService(mail_sender=mail_sender),
        clock_holder=clock_holder,
        uuid_holder=uuid_holder,
    )


@pytest.fixture
def post_service(
    post_repository: InMemoryPostRepository,
    user_repository: InMemoryUserRepository,
    clock_holder: FixedClockHolder,
) -> PostService:
    return PostService(
        repository=post_repository,
        user_repository=user_repository,
        clock_holder=clock_holder,
    )
