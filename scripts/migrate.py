#!/usr/bin/env python3
"""
Database migration script.

Usage:
  python -m scripts.migrate                    # Apply all pending migrations
  python -m scripts.migrate --undo 0001       # Rollback migration 0001
  python -m scripts.migrate --status          # Show migration status
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from adapters.db import Database
from adapters.db.migrations import MigrationRunner
from config import settings


def show_status(runner: MigrationRunner, db_path: str) -> None:
    """Show migration status."""
    applied = runner.applied_migrations()
    pending = runner.pending_migrations()

    print(f"  Database: {db_path}")
    print(f"  Applied migrations: {len(applied)}")
    for filename in applied:
        print(f"    ✅ {filename}")

    print(f"  Pending migrations: {len(pending)}")
    for filename in pending:
        print(f"    ⏳ {filename}")


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Database migration tool")
    parser.add_argument("--db", default=settings.sqlite_db, help="SQLite database file")
    parser.add_argument("--undo", help="Rollback specific migration")
    parser.add_argument("--status", action="store_true", help="Show migration status")

    args = parser.parse_args(argv)

    with Database(args.db, run_migrations=False) as db:
        runner = MigrationRunner(db, db.migrations_dir)

        if args.status:
            show_status(runner, args.db)
        elif args.undo:
            if not runner.rollback(args.undo):
                print(f"  ❌ No rollback file for migration {args.undo}")
                return 1
            print(f"  ✅ Migration {args.undo} rolled back successfully")
        else:
            applied = runner.run_migrations()
            if not applied:
                print("  ✅ No pending migrations")
            for filename in applied:
                print(f"  ✅ Migration {filename} applied successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
