"""
User domain service - Lifecycle orchestration for user records.

This module contains the business logic for user lookup, registration,
profile updates, login and email verification.

Visibility rule: get_by_email() and get_by_id() only ever return ACTIVE
users. PENDING users exist in storage but are reported as not found.
Mutating operations (update, login, verify_email) load users in any
status.

Mutation discipline: load the current record, compute the next immutable
value, overwrite the stored row. No locking; concurrent writes to the same
id are last-write-wins unless the repository adds its own locking.
"""

import logging
from dataclasses import dataclass

from .certification import CertificationService
from .exceptions import MailDeliveryError, ResourceNotFound
from .models import User, UserCreate, UserStatus, UserUpdate
from .ports import ClockHolder, UserRepository, UuidHolder

logger = logging.getLogger(__name__)

USERS = "Users"


@dataclass
class UserService:
    """
    Domain service for the user lifecycle.

    Orchestrates the repository, certification service and the
    clock/UUID providers.
    """

    repository: UserRepository
    certification_service: CertificationService
    clock_holder: ClockHolder
    uuid_holder: UuidHolder

    def get_by_email(self, email: str) -> User:
        """
        Return the ACTIVE user registered under ``email``.

        Raises:
            ResourceNotFound: If no user has this email or it is not ACTIVE
        """
        user = self.repository.find_by_email(email)
        if user is None or user.status != UserStatus.ACTIVE:
            raise ResourceNotFound(USERS, email)
        return user

    def get_by_id(self, user_id: int) -> User:
        """
        Return the ACTIVE user with ``user_id``.

        Raises:
            ResourceNotFound: If no user has this id or it is not ACTIVE
        """
        user = self.repository.find_by_id(user_id)
        if user is None or user.status != UserStatus.ACTIVE:
            raise ResourceNotFound(USERS, user_id)
        return user

    def create(self, user_create: UserCreate) -> User:
        """
        Register a new PENDING user and mail its certification code.

        Email uniqueness is left to the repository. A mail delivery failure
        is logged and does not undo the registration.

        Args:
            user_create: Email, nickname and address of the new user

        Returns:
            The stored user with its assigned id

        Raises:
            EmailAlreadyRegistered: If the repository rejects the email
        """
        user = self.repository.save(User.from_create(user_create, self.uuid_holder))
        logger.info("Created user id=%s status=%s", user.id, user.status.value)

        try:
            self.certification_service.send(user.email, user.certification_code, user.id)
        except MailDeliveryError:
            # Delivery is best-effort
            logger.warning(
                "Certification mail for user id=%s was not delivered", user.id, exc_info=True
            )

        return user

    def update(self, user_id: int, user_update: UserUpdate) -> User:
        """Replace nickname and address of a user in any status."""
        user = self._load(user_id).update(user_update)
        user = self.repository.save(user)
        logger.info("Updated profile of user id=%s", user_id)
        return user

    def login(self, user_id: int) -> User:
        """Activate the user if needed and record the login time."""
        user = self._load(user_id).login(self.clock_holder)
        user = self.repository.save(user)
        logger.info("User id=%s logged in at %s", user_id, user.last_login_at)
        return user

    def verify_email(self, user_id: int, certification_code: str) -> User:
        """
        Activate a user presenting the certification code it was mailed.

        Raises:
            ResourceNotFound: If no user has this id
            CertificationCodeNotMatched: If the code differs from the stored one
        """
        user = self._load(user_id).certificate(certification_code)
        user = self.repository.save(user)
        logger.info("Verified email of user id=%s", user_id)
        return user

    def _load(self, user_id: int) -> User:
        """Load a user in any status."""
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise ResourceNotFound(USERS, user_id)
        return user
