"""Bring a trip store DB up to the current schema, or report what is pending."""

from __future__ import annotations

import argparse
import json
import sqlite3
from pathlib import Path

from dotenv import load_dotenv

from tripplanner.config.settings import resolve_db_path
from tripplanner.persistence.migration_runner import (
    applied_versions,
    apply_sqlite_migrations,
    describe_store,
    pending_migrations,
)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Apply trip store schema migrations")
    parser.add_argument("--db", default="", help="Trip store DB path (defaults to TRIP_STORE_DB)")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only list pending versions; exit 1 when any are pending",
    )
    args = parser.parse_args(argv)

    db_path = Path(args.db.strip()) if args.db.strip() else resolve_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(db_path)
    try:
        if args.check:
            pending = [migration.version for migration in pending_migrations(conn)]
            applied: list[str] = []
        else:
            applied = apply_sqlite_migrations(conn)
            pending = []
        report = {
            "db_path": str(db_path),
            "applied_count": len(applied),
            "applied_versions": applied,
            "pending_versions": pending,
            "schema_versions": list(applied_versions(conn)),
            "row_counts": describe_store(conn),
        }
    finally:
        conn.close()

    print(json.dumps(report, ensure_ascii=False, indent=2))
    return 1 if pending else 0


if __name__ == "__main__":
    raise SystemExit(main())
