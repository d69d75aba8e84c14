"""Repository adapters - In-memory and database implementations."""

from .memory import InMemoryPostRepository, InMemoryUserRepository
from .postgres import PostgresPostRepository, PostgresUserRepository, run_migrations

__all__ = [
    "InMemoryPostRepository",
    "InMemoryUserRepository",
    "PostgresPostRepository",
    "PostgresUserRepository",
    "run_migrations",
]
