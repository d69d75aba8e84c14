"""
Domain layer - Pure business logic with zero framework imports.

This package contains the user lifecycle and post logic. It defines its
own port interfaces for infrastructure abstraction, so adapters can be
swapped without touching the services.
"""

from .certification import CertificationService
from .exceptions import (
    CertificationCodeNotMatched,
    EmailAlreadyRegistered,
    MailDeliveryError,
    ResourceNotFound,
    UserhubError,
)
from .models import Post, PostCreate, PostUpdate, User, UserCreate, UserStatus, UserUpdate
from .ports import ClockHolder, MailSender, PostRepository, UserRepository, UuidHolder
from .posts import PostService
from .users import UserService

__all__ = [
    "CertificationCodeNotMatched",
    "CertificationService",
    "ClockHolder",
    "EmailAlreadyRegistered",
    "MailDeliveryError",
    "MailSender",
    "Post",
    "PostCreate",
    "PostRepository",
    "PostService",
    "PostUpdate",
    "ResourceNotFound",
    "User",
    "UserCreate",
    "UserRepository",
    "UserService",
    "UserStatus",
    "UserUpdate",
    "UserhubError",
    "UuidHolder",
]
