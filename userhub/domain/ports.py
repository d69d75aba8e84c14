"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .models import Post, User


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def save(self, user: User) -> User:
        """
        Persist a user record.

        Assigns an id when ``user.id`` is None, otherwise overwrites the
        stored row with the same id.

        Args:
            user: User value to persist

        Returns:
            The stored user, carrying its assigned id

        Raises:
            EmailAlreadyRegistered: If the email belongs to another user
        """
        ...

    def find_by_id(self, user_id: int) -> User | None:
        """Return the user with this id in any status, or None."""
        ...

    def find_by_email(self, email: str) -> User | None:
        """Return the user with this email in any status, or None."""
        ...


class PostRepository(Protocol):
    """Port interface for post persistence."""

    def save(self, post: Post) -> Post:
        """Persist a post, assigning an id when absent."""
        ...

    def find_by_id(self, post_id: int) -> Post | None:
        """Return the post with this id, or None."""
        ...


class ClockHolder(Protocol):
    """Port interface for the current time."""

    def millis(self) -> int:
        """Return milliseconds since the Unix epoch."""
        ...


class UuidHolder(Protocol):
    """Port interface for unique token generation."""

    def random(self) -> str:
        """Return a fresh opaque unique string."""
        ...


class MailSender(Protocol):
    """Port interface for email delivery."""

    def send(self, email: str, title: str, content: str) -> None:
        """
        Send a message to an email address.

        Args:
            email: Recipient email address
            title: Message subject
            content: Plain-text message body

        Raises:
            MailDeliveryError: If the transport could not accept the message
        """
        ...
