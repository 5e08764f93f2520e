"""
Database connection and schema management.
"""

import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from config import settings

logger = logging.getLogger(__name__)


class Database:
    """SQLite database connection and schema management."""

    def __init__(
        self,
        db_path: str = None,
        migrations_dir: Optional[Path] = None,
        run_migrations: bool = True,
    ):
        self.db_path = db_path or settings.sqlite_db
        self.migrations_dir = migrations_dir or settings.resolved_migrations_dir()
        self._local = threading.local()
        if run_migrations:
            self._run_migrations()

    def get_connection(self) -> sqlite3.Connection:
        """Get database connection, creating it if necessary."""
        # Use thread-local storage for thread safety
        if (
            not hasattr(self._local, "connection")
            or self._local.connection is None
        ):
            self._local.connection = sqlite3.connect(
                self.db_path, check_same_thread=False
            )
            self._local.connection.row_factory = sqlite3.Row
            self._local.connection.execute("PRAGMA journal_mode=WAL")
            self._local.connection.execute("PRAGMA busy_timeout = 10000")
            self._local.connection.execute("PRAGMA foreign_keys = ON")
        return self._local.connection

    def close(self) -> None:
        """Close database connection."""
        if hasattr(self._local, "connection") and self._local.connection:
            try:
                self._local.connection.close()
            except sqlite3.Error as e:
                logger.warning(f"Error closing database connection: {e}")
            finally:
                self._local.connection = None

    def _run_migrations(self) -> None:
        """Run database migrations."""
        # Import here to avoid circular import
        from .migrations import MigrationRunner

        try:
            MigrationRunner(self, self.migrations_dir).run_migrations()
        except Exception as e:
            logger.error(f"Error running migrations: {e}")
            raise

    def execute_query(self, query: str, params: tuple = ()) -> list:
        """Execute a SELECT query and return results."""
        conn = self.get_connection()
        cursor = conn.execute(query, params)
        return cursor.fetchall()

    def execute_update(self, query: str, params: tuple = ()) -> int:
        """Execute an INSERT/UPDATE/DELETE query and return affected rows."""
        conn = self.get_connection()
        cursor = conn.execute(query, params)
        conn.commit()
        return cursor.rowcount

    def execute_update_in_transaction(
        self, query: str, params: tuple = ()
    ) -> int:
        """Execute an INSERT/UPDATE/DELETE query within a transaction."""
        conn = self.get_connection()
        cursor = conn.execute(query, params)
        return cursor.rowcount

    def execute_many_in_transaction(self, query: str, rows: list) -> int:
        """Execute one statement for every parameter tuple in rows."""
        conn = self.get_connection()
        cursor = conn.executemany(query, rows)
        return cursor.rowcount

    def begin_transaction(self) -> None:
        """Begin a database transaction."""
        conn = self.get_connection()
        conn.execute("BEGIN TRANSACTION")

    def commit_transaction(self) -> None:
        """Commit the current transaction."""
        conn = self.get_connection()
        conn.commit()

    def rollback_transaction(self) -> None:
        """Rollback the current transaction."""
        conn = self.get_connection()
        conn.rollback()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Run a block in one transaction; roll back if it raises."""
        self.begin_transaction()
        try:
            yield self.get_connection()
        except BaseException:
            self.rollback_transaction()
            raise
        else:
            self.commit_transaction()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
