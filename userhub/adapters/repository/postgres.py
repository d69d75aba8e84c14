"""
PostgreSQL repository adapters - Implement UserRepository and PostRepository.

This module provides the PostgreSQL implementation of the domain's
repository ports using psycopg3 with raw SQL.

Save semantics:
- Records without an id are inserted and receive an id from the table's
  serial sequence (RETURNING id).
- Records with an id overwrite their row with a plain UPDATE (last write
  wins). The sequence is never touched on this path.
- Only when no row holds that id is it inserted with the explicit id
  (INSERT ... ON CONFLICT (id) DO UPDATE, for a concurrent insert of the
  same id). If that insert created the row, the sequence is advanced with
  nextval() until it is past the id. nextval() only moves forward, so ids
  handed out to concurrent, uncommitted inserts are never reissued.
- Only a violation of the users.email UNIQUE constraint is translated into
  the domain's EmailAlreadyRegistered; every other error propagates.

All SQL uses parameterized queries. Timestamps are stored as BIGINT epoch
milliseconds, matching the domain models.
"""

import logging
from dataclasses import replace
from pathlib import Path

from psycopg import Cursor
from psycopg.errors import UniqueViolation
from psycopg_pool import ConnectionPool

from userhub.domain.exceptions import EmailAlreadyRegistered
from userhub.domain.models import Post, User, UserStatus

logger = logging.getLogger(__name__)

# Default name PostgreSQL gives the UNIQUE constraint on users.email
EMAIL_CONSTRAINT = "users_email_key"

# Structure: userhub/adapters/repository/postgres.py -> userhub/migrations/
MIGRATIONS_DIR = Path(__file__).resolve().parent.parent.parent / "migrations"

# Draws from the sequence until it has handed out a value >= the explicit id.
# {sequence} is a module constant, never user input.
_ADVANCE_SEQUENCE_SQL = """
    SELECT MAX(nextval(%s::regclass))
    FROM generate_series(1, GREATEST(%s - (SELECT last_value FROM {sequence}) + 1, 0))
"""


def _advance_sequence(cursor: Cursor, table: str, row_id: int) -> None:
    sequence = f"{table}_id_seq"
    cursor.execute(_ADVANCE_SEQUENCE_SQL.format(sequence=sequence), (sequence, row_id))


def _row_to_user(row: tuple) -> User:
    return User(
        id=row[0],
        email=row[1],
        nickname=row[2],
        address=row[3],
        certification_code=row[4],
        status=UserStatus(row[5]),
        last_login_at=row[6],
    )


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def save(self, user: User) -> User:
        """
        Insert a new user or overwrite an existing row.

        Args:
            user: User to persist; id None means insert

        Returns:
            The stored user with its id

        Raises:
            EmailAlreadyRegistered: If another row holds the same email
        """
        values = (
            user.email,
            user.nickname,
            user.address,
            user.certification_code,
            user.status.value,
            user.last_login_at,
        )

        insert_sql = """
            INSERT INTO users (email, nickname, address, certification_code, status, last_login_at)
            VALUES (%s, %s, %s, %s, %s, %s)
            RETURNING id
        """

        update_sql = """
            UPDATE users
            SET email = %s,
                nickname = %s,
                address = %s,
                certification_code = %s,
                status = %s,
                last_login_at = %s
            WHERE id = %s
            RETURNING id
        """

        # xmax = 0 only on a freshly inserted row version
        upsert_sql = """
            INSERT INTO users (id, email, nickname, address, certification_code, status, last_login_at)
            VALUES (%s, %s, %s, %s, %s, %s, %s)
            ON CONFLICT (id) DO UPDATE
            SET email = EXCLUDED.email,
                nickname = EXCLUDED.nickname,
                address = EXCLUDED.address,
                certification_code = EXCLUDED.certification_code,
                status = EXCLUDED.status,
                last_login_at = EXCLUDED.last_login_at
            RETURNING id, (xmax = 0) AS inserted
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                if user.id is None:
                    cursor.execute(insert_sql, values)
                    user_id = cursor.fetchone()[0]
                else:
                    user_id = user.id
                    cursor.execute(update_sql, (*values, user.id))
                    if cursor.fetchone() is None:
                        cursor.execute(upsert_sql, (user.id, *values))
                        _, inserted = cursor.fetchone()
                        if inserted:
                            _advance_sequence(cursor, "users", user.id)
                conn.commit()
        except UniqueViolation as e:
            if e.diag.constraint_name == EMAIL_CONSTRAINT:
                raise EmailAlreadyRegistered(user.email) from e
            raise

        return replace(user, id=user_id)

    def find_by_id(self, user_id: int) -> User | None:
        sql = """
            SELECT id, email, nickname, address, certification_code, status, last_login_at
            FROM users
            WHERE id = %s
        """
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (user_id,))
            row = cursor.fetchone()
        return _row_to_user(row) if row is not None else None

    def find_by_email(self, email: str) -> User | None:
        sql = """
            SELECT id, email, nickname, address, certification_code, status, last_login_at
            FROM users
            WHERE email = %s
        """
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()
        return _row_to_user(row) if row is not None else None


class PostgresPostRepository:
    """
    Implements PostRepository protocol via psycopg3.

    Only the writer id is stored on the post row; reads join the users
    table to rebuild the writer as it is now.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def save(self, post: Post) -> Post:
        values = (post.content, post.created_at, post.modified_at, post.writer.id)

        insert_sql = """
            INSERT INTO posts (content, created_at, modified_at, writer_id)
            VALUES (%s, %s, %s, %s)
            RETURNING id
        """

        update_sql = """
            UPDATE posts
            SET content = %s, created_at = %s, modified_at = %s, writer_id = %s
            WHERE id = %s
            RETURNING id
        """

        upsert_sql = """
            INSERT INTO posts (id, content, created_at, modified_at, writer_id)
            VALUES (%s, %s, %s, %s, %s)
            ON CONFLICT (id) DO UPDATE
            SET content = EXCLUDED.content,
                created_at = EXCLUDED.created_at,
                modified_at = EXCLUDED.modified_at,
                writer_id = EXCLUDED.writer_id
            RETURNING id, (xmax = 0) AS inserted
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            if post.id is None:
                cursor.execute(insert_sql, values)
                post_id = cursor.fetchone()[0]
            else:
                post_id = post.id
                cursor.execute(update_sql, (*values, post.id))
                if cursor.fetchone() is None:
                    cursor.execute(upsert_sql, (post.id, *values))
                    _, inserted = cursor.fetchone()
                    if inserted:
                        _advance_sequence(cursor, "posts", post.id)
            conn.commit()

        return replace(post, id=post_id)

    def find_by_id(self, post_id: int) -> Post | None:
        sql = """
            SELECT p.id, p.content, p.created_at, p.modified_at,
                   u.id, u.email, u.nickname, u.address, u.certification_code,
                   u.status, u.last_login_at
            FROM posts p
            JOIN users u ON u.id = p.writer_id
            WHERE p.id = %s
        """
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (post_id,))
            row = cursor.fetchone()

        if row is None:
            return None
        return Post(
            id=row[0],
            content=row[1],
            created_at=row[2],
            modified_at=row[3],
            writer=_row_to_user(row[4:]),
        )


def run_migrations(pool: ConnectionPool, migrations_dir: Path = MIGRATIONS_DIR) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).
    The SQL files ship inside the package, so installed copies find them.

    Args:
        pool: psycopg3 ConnectionPool instance
        migrations_dir: Directory holding the *.sql files

    Raises:
        RuntimeError: If the directory is missing, holds no SQL files,
            or a migration file fails to execute
    """
    if not migrations_dir.is_dir():
        raise RuntimeError(f"Migrations directory not found: {migrations_dir}")

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        raise RuntimeError(f"No migration files found in {migrations_dir}")

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
