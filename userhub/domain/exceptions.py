"""
Domain exceptions - Semantic error types for users and posts.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class UserhubError(Exception):
    """Base class for userhub domain errors."""

    pass


class ResourceNotFound(UserhubError):
    """
    Lookup found no row, or a row whose status disqualifies it.

    Attributes:
        datasource: Logical collection name (e.g. "Users", "Posts")
        identifier: The id or email that was looked up
    """

    def __init__(self, datasource: str, identifier: object) -> None:
        super().__init__(f"{datasource} with key {identifier!r} not found")
        self.datasource = datasource
        self.identifier = identifier


class CertificationCodeNotMatched(UserhubError):
    """Supplied certification code differs from the stored one."""

    def __init__(self) -> None:
        super().__init__("Certification code does not match")


class EmailAlreadyRegistered(UserhubError):
    """Email already belongs to another stored user."""

    pass


class MailDeliveryError(UserhubError):
    """Mail transport failed to hand off a message."""

    pass
