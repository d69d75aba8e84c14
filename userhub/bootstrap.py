"""
Service composition - Build domain services from settings.

This module wires adapters into the domain services:
- Creates the database connection pool and runs migrations (postgres backend)
- Selects the mail sender (console or SMTP)
- Builds UserService and PostService over shared repositories
"""

import logging
from dataclasses import dataclass

from psycopg_pool import ConnectionPool

from userhub.adapters.clock import SystemClockHolder, SystemUuidHolder
from userhub.adapters.mail import ConsoleMailSender, SmtpMailSender
from userhub.adapters.repository import (
    InMemoryPostRepository,
    InMemoryUserRepository,
    PostgresPostRepository,
    PostgresUserRepository,
    run_migrations,
)
from userhub.config.logging import configure_logging
from userhub.config.settings import Settings, get_settings
from userhub.domain.certification import CertificationService
from userhub.domain.ports import ClockHolder, MailSender, PostRepository, UserRepository
from userhub.domain.posts import PostService
from userhub.domain.users import UserService

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Wired services plus the pool backing them, if any."""

    users: UserService
    posts: PostService
    pool: ConnectionPool | None = None

    def close(self) -> None:
        """Release the connection pool."""
        if self.pool is not None:
            self.pool.close()
            logger.info("Database connection pool closed")


def create_pool(settings: Settings) -> ConnectionPool:
    """Open a connection pool sized from settings and run migrations."""
    logger.info("Connecting to database...")
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )
    logger.info("Running database migrations...")
    run_migrations(pool)
    return pool


def build_mail_sender(settings: Settings) -> MailSender:
    if settings.mail_backend == "smtp":
        return SmtpMailSender(
            host=settings.smtp_host,
            port=settings.smtp_port,
            sender=settings.mail_from,
            timeout=settings.smtp_timeout_seconds,
        )
    return ConsoleMailSender()


def build_repositories(
    settings: Settings, pool: ConnectionPool | None = None
) -> tuple[UserRepository, PostRepository]:
    """
    Create the user and post repositories for the configured backend.

    Raises:
        ValueError: If the postgres backend is selected without a pool
    """
    if settings.storage_backend == "postgres":
        if pool is None:
            raise ValueError("postgres storage backend requires a connection pool")
        return PostgresUserRepository(pool), PostgresPostRepository(pool)
    user_repository = InMemoryUserRepository()
    return user_repository, InMemoryPostRepository(user_repository)


def build_user_service(
    settings: Settings,
    repository: UserRepository,
    mail_sender: MailSender,
    clock_holder: ClockHolder | None = None,
) -> UserService:
    certification_service = CertificationService(
        mail_sender=mail_sender, base_url=settings.certification_base_url
    )
    return UserService(
        repository=repository,
        certification_service=certification_service,
        clock_holder=clock_holder or SystemClockHolder(),
        uuid_holder=SystemUuidHolder(),
    )


def build_post_service(
    repository: PostRepository,
    user_repository: UserRepository,
    clock_holder: ClockHolder | None = None,
) -> PostService:
    return PostService(
        repository=repository,
        user_repository=user_repository,
        clock_holder=clock_holder or SystemClockHolder(),
    )


def build_services(settings: Settings | None = None) -> Services:
    """
    Build every service from settings (cached settings when omitted).

    Both services share the same user repository so posts see the
    users the user service stores.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(settings) if settings.storage_backend == "postgres" else None
    user_repository, post_repository = build_repositories(settings, pool)
    mail_sender = build_mail_sender(settings)
    clock_holder = SystemClockHolder()

    services = Services(
        users=build_user_service(settings, user_repository, mail_sender, clock_holder),
        posts=build_post_service(post_repository, user_repository, clock_holder),
        pool=pool,
    )
    logger.info(
        "Services ready (storage=%s, mail=%s)", settings.storage_backend, settings.mail_backend
    )
    return services
