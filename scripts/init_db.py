#!/usr/bin/env python3
"""
Database initialization script.
Creates the database file and schema if it doesn't exist.
"""

import argparse
import os
import sqlite3
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from adapters.db import Database
from config import settings


def init_database(db_path: str = None, force_recreate: bool = False) -> bool:
    """Initialize database with schema."""
    db_path = db_path or settings.sqlite_db

    print(f"Initializing database at: {os.path.abspath(db_path)}")

    if Path(db_path).exists():
        if force_recreate:
            os.remove(db_path)
            print("Existing database removed (force recreate).")
        else:
            print(f"Database file already exists at: {db_path}")
            print("Schema will be validated/created if needed.")

    try:
        with Database(db_path) as db:
            conn = db.get_connection()
            print("Database schema validated/created successfully!")

            cursor = conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' "
                "AND name NOT LIKE 'sqlite_%'"
            )
            tables = cursor.fetchall()

            print(f"\nFound {len(tables)} tables:")
            for table in tables:
                print(f"  - {table['name']}")

            meal_count = conn.execute(
                "SELECT COUNT(*) AS count FROM meals"
            ).fetchone()["count"]
            plan_count = conn.execute(
                "SELECT COUNT(*) AS count FROM meal_planner"
            ).fetchone()["count"]

            print("\nDatabase status:")
            print(f"  - Meals: {meal_count}")
            print(f"  - Planned slots: {plan_count}")

        print(f"\nDatabase ready at: {os.path.abspath(db_path)}")

    except (sqlite3.Error, OSError) as e:
        print(f"Error initializing database: {e}")
        return False

    return True


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Initialize the meal planner database")
    parser.add_argument("--db", default=settings.sqlite_db, help="SQLite database file")
    parser.add_argument(
        "--force", action="store_true", help="Delete and recreate the database"
    )
    args = parser.parse_args(argv)

    return 0 if init_database(args.db, force_recreate=args.force) else 1


if __name__ == "__main__":
    sys.exit(main())
