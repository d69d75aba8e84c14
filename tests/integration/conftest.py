"""
Shared fixtures for PostgreSQL integration tests.

Requires PostgreSQL reachable at DATABASE_URL. When it is not, every test
in this directory is skipped.
"""

from collections.abc import Generator

import psycopg
import pytest
from psycopg_pool import ConnectionPool

from userhub.adapters.repository.postgres import (
    PostgresPostRepository,
    PostgresUserRepository,
    run_migrations,
)
from userhub.config.settings import get_settings


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool and run migrations once per session."""
    settings = get_settings()
    try:
        psycopg.connect(settings.database_url, connect_timeout=2).close()
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not reachable: {e}")

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture(autouse=True)
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Empty both tables and reset their id sequences before each test."""
    with pool.connection() as conn:
        conn.execute("TRUNCATE posts, users RESTART IDENTITY CASCADE")
        conn.commit()
    yield


@pytest.fixture
def user_repository(pool: ConnectionPool) -> PostgresUserRepository:
    return PostgresUserRepository(pool)


@pytest.fixture
def post_repository(pool: ConnectionPool) -> PostgresPostRepository:
    return PostgresPostRepository(pool)
