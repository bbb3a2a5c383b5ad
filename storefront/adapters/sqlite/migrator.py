"""
Schema migrations for the storefront database.

Each migrations/NNN_name.sql file holds the forward script, optionally
followed by a "-- Down" marker and the script that undoes it. Applied file
names are recorded in the schema_migrations table.
"""

import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
DOWN_MARKER = "-- Down"


@dataclass(frozen=True)
class Migration:
    name: str
    up: str
    down: str


def read_migration(path: Path) -> Migration:
    text = path.read_text(encoding="utf-8")
    up, _, down = text.partition(DOWN_MARKER)
    return Migration(name=path.name, up=up, down=down)


class SQLiteMigrator:
    def __init__(self, db_path: str, migrations_dir: str | Path = MIGRATIONS_DIR):
        self.db_path = db_path
        self.migrations_dir = Path(migrations_dir)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.execute("PRAGMA foreign_keys = ON;")
        conn.execute(
            "CREATE TABLE IF NOT EXISTS schema_migrations ("
            " name TEXT PRIMARY KEY,"
            " applied_at DATETIME DEFAULT CURRENT_TIMESTAMP)"
        )
        return conn

    def migrations(self) -> list[Migration]:
        return [read_migration(p) for p in sorted(self.migrations_dir.glob("*.sql"))]

    def applied(self) -> list[str]:
        conn = self._connect()
        try:
            rows = conn.execute("SELECT name FROM schema_migrations ORDER BY name").fetchall()
            return [r[0] for r in rows]
        finally:
            conn.close()

    def pending(self) -> list[Migration]:
        done = set(self.applied())
        return [m for m in self.migrations() if m.name not in done]

    def run_migrations(self) -> list[str]:
        """Apply every pending migration in name order. Returns the names applied."""
        names: list[str] = []
        conn = self._connect()
        try:
            for migration in self.pending():
                logger.info("Applying migration %s", migration.name)
                self._execute(conn, migration.name, migration.up)
                conn.execute("INSERT INTO schema_migrations (name) VALUES (?)", (migration.name,))
                conn.commit()
                names.append(migration.name)
        finally:
            conn.close()
        if names:
            logger.info("Applied %d migration(s)", len(names))
        return names

    def rollback_last(self) -> str | None:
        """Undo the most recently applied migration. Returns its name, or None."""
        applied = self.applied()
        if not applied:
            return None
        name = applied[-1]
        migration = read_migration(self.migrations_dir / name)
        if not migration.down.strip():
            raise RuntimeError(f"Migration {name} has no down script")

        conn = self._connect()
        try:
            logger.info("Rolling back migration %s", name)
            self._execute(conn, name, migration.down)
            conn.execute("DELETE FROM schema_migrations WHERE name = ?", (name,))
            conn.commit()
        finally:
            conn.close()
        return name

    def _execute(self, conn: sqlite3.Connection, name: str, script: str) -> None:
        try:
            conn.executescript(script)
        except sqlite3.Error as e:
            conn.rollback()
            raise RuntimeError(f"Migration {name} failed: {e}") from e
