"""Database migration system."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from adapters.db.database import Database

__all__ = ["MigrationRunner"]

logger = logging.getLogger(__name__)


class MigrationRunner:
    """Applies the SQL files of the migrations directory in order."""

    def __init__(self, db: "Database", migrations_dir: Path):
        self.db = db
        self.migrations_dir = Path(migrations_dir)

    def run_migrations(self) -> List[str]:
        """Run all pending migrations and return the applied filenames."""
        self._create_migrations_table()

        applied = []
        for migration_file in self._get_migration_files():
            if not self._is_migration_applied(migration_file):
                self._run_migration(migration_file)
                applied.append(migration_file)
        return applied

    def applied_migrations(self) -> List[str]:
        """Filenames already recorded as applied."""
        self._create_migrations_table()
        rows = self.db.execute_query(
            "SELECT filename FROM migrations ORDER BY filename"
        )
        return [row["filename"] for row in rows]

    def pending_migrations(self) -> List[str]:
        """Filenames not applied yet."""
        applied = set(self.applied_migrations())
        return [f for f in self._get_migration_files() if f not in applied]

    def rollback(self, version: str) -> bool:
        """Undo one migration using its <version>_undo.sql companion.

        Returns:
            bool: False when no undo file exists for the version
        """
        self._create_migrations_table()
        version = Path(version).stem
        undo_file = self.migrations_dir / f"{version}_undo.sql"
        if not undo_file.exists():
            logger.warning(f"Rollback file {undo_file} not found")
            return False

        statements = self._split_sql_statements(
            undo_file.read_text(encoding="utf-8")
        )
        with self.db.transaction():
            for stmt in statements:
                self.db.execute_update_in_transaction(stmt)
            self.db.execute_update_in_transaction(
                "DELETE FROM migrations WHERE filename = ?", (f"{version}.sql",)
            )
        logger.info(f"Rolled back migration: {version}")
        return True

    def _create_migrations_table(self) -> None:
        """Create migrations tracking table."""
        self.db.execute_update(
            """
            CREATE TABLE IF NOT EXISTS migrations (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                filename TEXT UNIQUE NOT NULL,
                applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """
        )

    def _get_migration_files(self) -> List[str]:
        """Get list of migration files in order."""
        if not self.migrations_dir.is_dir():
            logger.warning(
                f"Migrations directory not found: {self.migrations_dir}"
            )
            return []

        # Sort by filename (which starts with the version number)
        return sorted(
            path.name
            for path in self.migrations_dir.glob("*.sql")
            if not path.stem.endswith("_undo")
        )

    def _is_migration_applied(self, filename: str) -> bool:
        """Check if migration has been applied."""
        result = self.db.execute_query(
            "SELECT id FROM migrations WHERE filename = ?", (filename,)
        )
        return len(result) > 0

    def _run_migration(self, filename: str) -> None:
        """Run a single migration file inside one transaction."""
        migration_sql = (self.migrations_dir / filename).read_text(
            encoding="utf-8"
        )
        statements = self._split_sql_statements(migration_sql)

        try:
            with self.db.transaction():
                for stmt in statements:
                    self.db.execute_update_in_transaction(stmt)
                self.db.execute_update_in_transaction(
                    "INSERT INTO migrations (filename) VALUES (?)", (filename,)
                )
            logger.info(f"Applied migration: {filename}")
        except Exception as e:
            logger.error(f"Error applying migration {filename}: {e}")
            raise

    def _split_sql_statements(self, sql: str) -> List[str]:
        """Split SQL into individual statements."""
        # Drop comment lines, then split on semicolons outside quotes
        clean_lines = [
            line for line in sql.split("\n") if not line.strip().startswith("--")
        ]
        sql_clean = "\n".join(clean_lines)

        statements = []
        current_statement = ""
        in_string = False
        string_char = None

        for char in sql_clean:
            if char in ['"', "'"] and not in_string:
                in_string = True
                string_char = char
            elif char == string_char and in_string:
                in_string = False
                string_char = None
            elif char == ";" and not in_string:
                if current_statement.strip():
                    statements.append(current_statement.strip())
                current_statement = ""
                continue

            current_statement += char

        if current_statement.strip():
            statements.append(current_statement.strip())

        return statements
