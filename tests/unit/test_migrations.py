"""
Unit tests for run_migrations.

Migration files live in temporary directories and the pool is a
MagicMock, so no database is needed.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from userhub.adapters.repository.postgres import MIGRATIONS_DIR, run_migrations


def test_packaged_migrations_present() -> None:
    """The default directory sits inside the package and holds the table migrations."""
    names = sorted(path.name for path in MIGRATIONS_DIR.glob("*.sql"))

    assert MIGRATIONS_DIR.parent.name == "userhub"
    assert names == ["001_create_users.sql", "002_create_posts.sql"]


class TestRunMigrations:
    """Tests for migration discovery and execution."""

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        """A directory that does not exist is an error, not a silent no-op."""
        with pytest.raises(RuntimeError, match="not found"):
            run_migrations(MagicMock(), tmp_path / "absent")

    def test_empty_directory_raises(self, tmp_path: Path) -> None:
        """A directory without SQL files is an error."""
        (tmp_path / "README.txt").write_text("not sql")

        with pytest.raises(RuntimeError, match="No migration files"):
            run_migrations(MagicMock(), tmp_path)

    def test_files_run_in_sorted_order(self, tmp_path: Path) -> None:
        """SQL files are executed by filename order."""
        (tmp_path / "002_second.sql").write_text("SELECT 2")
        (tmp_path / "001_first.sql").write_text("SELECT 1")
        pool = MagicMock()

        run_migrations(pool, tmp_path)

        conn = pool.connection.return_value.__enter__.return_value
        assert [c[0][0] for c in conn.execute.call_args_list] == ["SELECT 1", "SELECT 2"]

    def test_failing_file_wrapped(self, tmp_path: Path) -> None:
        """A failing statement raises RuntimeError naming the file."""
        (tmp_path / "001_broken.sql").write_text("SELEC 1")
        pool = MagicMock()
        conn = pool.connection.return_value.__enter__.return_value
        conn.execute.side_effect = ValueError("syntax error")

        with pytest.raises(RuntimeError, match="001_broken.sql"):
            run_migrations(pool, tmp_path)
