"""Trip store schema migrations.

Each ``migrations/NNNN_name.sql`` file is one version. Versions are applied in
file-name order, each inside its own ``BEGIN IMMEDIATE`` transaction together
with its ``schema_migrations`` row, so a failing statement leaves neither the
partial schema change nor the version record behind. Applied versions are
checksummed; editing a migration after it shipped is an error.
"""

from __future__ import annotations

import hashlib
import sqlite3
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

_MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"
_STORE_TABLES = ("trips", "trip_segments")


@dataclass(frozen=True)
class Migration:
    version: str
    sql: str

    @property
    def checksum(self) -> str:
        return hashlib.sha256(self.sql.encode("utf-8")).hexdigest()

    def statements(self) -> list[str]:
        statements: list[str] = []
        buffer = ""
        for line in self.sql.splitlines(keepends=True):
            if not buffer and (not line.strip() or line.lstrip().startswith("--")):
                continue
            buffer += line
            if sqlite3.complete_statement(buffer):
                statements.append(buffer.strip())
                buffer = ""
        if buffer.strip():
            raise ValueError(f"migration {self.version} ends with an incomplete statement")
        return statements


def discover_migrations(directory: Path = _MIGRATIONS_DIR) -> list[Migration]:
    return [
        Migration(version=path.stem, sql=path.read_text(encoding="utf-8"))
        for path in sorted(directory.glob("*.sql"))
    ]


def _ensure_version_table(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS schema_migrations (
            version TEXT PRIMARY KEY,
            checksum TEXT NOT NULL,
            applied_at TEXT NOT NULL
        )
        """
    )


def applied_versions(conn: sqlite3.Connection) -> dict[str, str]:
    """Recorded ``version -> checksum`` pairs."""
    _ensure_version_table(conn)
    rows = conn.execute("SELECT version, checksum FROM schema_migrations ORDER BY version").fetchall()
    return {str(version): str(checksum) for version, checksum in rows}


def pending_migrations(
    conn: sqlite3.Connection,
    migrations: Sequence[Migration] | None = None,
) -> list[Migration]:
    """Migrations not yet applied; raises if an applied one was edited since."""
    known = discover_migrations() if migrations is None else list(migrations)
    applied = applied_versions(conn)
    pending: list[Migration] = []
    for migration in known:
        recorded = applied.get(migration.version)
        if recorded is None:
            pending.append(migration)
        elif recorded != migration.checksum:
            raise RuntimeError(f"migration checksum mismatch for version={migration.version}")
    return pending


def apply_sqlite_migrations(
    conn: sqlite3.Connection,
    migrations: Sequence[Migration] | None = None,
) -> list[str]:
    """Apply pending migrations in order; returns the versions applied now."""
    applied_now: list[str] = []
    for migration in pending_migrations(conn, migrations):
        conn.execute("BEGIN IMMEDIATE")
        try:
            for statement in migration.statements():
                conn.execute(statement)
            conn.execute(
                "INSERT INTO schema_migrations(version, checksum, applied_at) VALUES (?, ?, ?)",
                (
                    migration.version,
                    migration.checksum,
                    time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
                ),
            )
        except sqlite3.Error:
            conn.rollback()
            raise
        conn.commit()
        applied_now.append(migration.version)
    return applied_now


def describe_store(conn: sqlite3.Connection) -> dict[str, int | None]:
    """Row counts of the trip tables; ``None`` for a table that does not exist yet."""
    existing = {
        row[0]
        for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
    }
    counts: dict[str, int | None] = {}
    for table in _STORE_TABLES:
        if table not in existing:
            counts[table] = None
            continue
        counts[table] = int(conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0])
    return counts


__all__ = [
    "Migration",
    "applied_versions",
    "apply_sqlite_migrations",
    "describe_store",
    "discover_migrations",
    "pending_migrations",
]
