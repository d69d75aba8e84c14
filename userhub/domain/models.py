"""
Domain models - Immutable user and post records.

Every transition returns a brand-new frozen instance built with
dataclasses.replace(); nothing is mutated in place.

User Status Machine (Forward-Only Transitions)
==============================================

States:
- PENDING: Initial state after creation (certification code mailed)
- ACTIVE: Terminal state, visible to ordinary lookups

Valid Transitions:
    PENDING -> ACTIVE   (matching certification code)
    PENDING -> ACTIVE   (login)

Invalid Transitions (never allowed):
    ACTIVE -> PENDING   (ACTIVE is terminal)
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from .exceptions import CertificationCodeNotMatched

if TYPE_CHECKING:
    from .ports import ClockHolder, UuidHolder


class UserStatus(str, Enum):
    """User lifecycle states."""

    PENDING = "PENDING"
    ACTIVE = "ACTIVE"


@dataclass(frozen=True)
class UserCreate:
    """Fields supplied when registering a user."""

    email: str
    nickname: str
    address: str


@dataclass(frozen=True)
class UserUpdate:
    """Profile fields a user may change."""

    nickname: str
    address: str


@dataclass(frozen=True)
class User:
    """
    Immutable user record.

    All fields default so records are built by keyword; the store assigns
    ``id`` on first save. ``last_login_at`` is epoch milliseconds.
    """

    id: int | None = None
    email: str | None = None
    nickname: str | None = None
    address: str | None = None
    certification_code: str | None = None
    status: UserStatus = UserStatus.PENDING
    last_login_at: int | None = None

    @classmethod
    def from_create(cls, user_create: UserCreate, uuid_holder: "UuidHolder") -> "User":
        """Build a new PENDING user with a fresh certification code."""
        return cls(
            email=user_create.email,
            nickname=user_create.nickname,
            address=user_create.address,
            certification_code=uuid_holder.random(),
            status=UserStatus.PENDING,
        )

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    def update(self, user_update: UserUpdate) -> "User":
        """Replace nickname and address only."""
        return replace(self, nickname=user_update.nickname, address=user_update.address)

    def login(self, clock_holder: "ClockHolder") -> "User":
        """Activate and stamp the login time, even if already ACTIVE."""
        return replace(self, status=UserStatus.ACTIVE, last_login_at=clock_holder.millis())

    def certificate(self, certification_code: str) -> "User":
        """
        Activate the user if the supplied code matches the stored one.

        Raises:
            CertificationCodeNotMatched: If the codes differ
        """
        if self.certification_code != certification_code:
            raise CertificationCodeNotMatched()
        return replace(self, status=UserStatus.ACTIVE)


@dataclass(frozen=True)
class PostCreate:
    writer_id: int
    content: str


@dataclass(frozen=True)
class PostUpdate:
    content: str


@dataclass(frozen=True)
class Post:
    """Immutable post record; timestamps are epoch milliseconds."""

    content: str
    created_at: int
    writer: User
    id: int | None = None
    modified_at: int | None = None

    @classmethod
    def from_create(
        cls, writer: User, post_create: PostCreate, clock_holder: "ClockHolder"
    ) -> "Post":
        return cls(content=post_create.content, created_at=clock_holder.millis(), writer=writer)

    def update(self, post_update: PostUpdate, clock_holder: "ClockHolder") -> "Post":
        return replace(self, content=post_update.content, modified_at=clock_holder.millis())
