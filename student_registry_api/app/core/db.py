"""
SQLite record store and simple migration system.

``StudentStore`` is the gateway to the ``students`` table.  One store is
opened per process when the application starts (see ``main.py``), kept
on ``app.state.store`` and handed to the service layer through the
``get_store`` dependency; it is never re-created per request.

The store exposes three typed operations: ``find_all`` (newest first),
``find_by_code`` and ``insert``.  Uniqueness of ``external_code`` is
enforced by a ``UNIQUE`` constraint in the schema; an insert that would
violate it raises ``DuplicateCodeError``.

Migrations are stored in the ``migrations`` table and applied in order
by ``init_db``.
"""

import logging
import sqlite3
from typing import List, Optional

from fastapi import Request

from ..schemas.student import StudentRead
from .config import resolve_project_path


logger = logging.getLogger(__name__)

# Timestamp expression evaluated by SQLite, e.g. ``2025-09-01T10:00:00.123Z``.
_NOW = "(strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))"

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: students table
    (
        1,
        f"""
        CREATE TABLE IF NOT EXISTS students (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            external_code TEXT NOT NULL UNIQUE,
            category TEXT NOT NULL,
            created_at TEXT NOT NULL DEFAULT {_NOW}
        );
        """,
    ),
    # Migration 2: index for newest-first listing
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_students_created_at ON students(created_at DESC, id DESC);
        """,
    ),
]


class DuplicateCodeError(Exception):
    """Raised when an insert violates the unique ``external_code`` constraint."""


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and ``:memory:`` are used as is; relative paths are
    resolved against the project root.
    """
    if database_url == ":memory:":
        return database_url
    return resolve_project_path(database_url)


def init_db(conn: sqlite3.Connection) -> None:
    """Apply pending migrations on ``conn``."""
    cursor = conn.cursor()
    try:
        cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                current_version = version
                logger.info("Applied migration %s", version)
        conn.commit()
    finally:
        cursor.close()


def _row_to_student(row: sqlite3.Row) -> StudentRead:
    return StudentRead(
        id=row["id"],
        name=row["name"],
        external_code=row["external_code"],
        category=row["category"],
        created_at=row["created_at"],
    )


class StudentStore:
    """Process-wide handle to the students table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    @classmethod
    def open(cls, database_url: str) -> "StudentStore":
        """Connect to the database, apply migrations and return a store.

        The connection is shared by every request and may be used from
        threads other than the one that opened it.
        """
        db_path = get_database_path(database_url)
        conn = sqlite3.connect(db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        init_db(conn)
        logger.info("Opened student store at %s", db_path)
        return cls(conn)

    def close(self) -> None:
        self._conn.close()

    def find_all(self) -> List[StudentRead]:
        """Return every record, most recently created first."""
        rows = self._conn.execute(
            "SELECT id, name, external_code, category, created_at FROM students"
            " ORDER BY created_at DESC, id DESC"
        ).fetchall()
        return [_row_to_student(row) for row in rows]

    def find_by_code(self, external_code: str) -> Optional[StudentRead]:
        row = self._conn.execute(
            "SELECT id, name, external_code, category, created_at FROM students WHERE external_code = ?",
            (external_code,),
        ).fetchone()
        if not row:
            return None
        return _row_to_student(row)

    def insert(self, name: str, external_code: str, category: str) -> StudentRead:
        """Insert a record and return it with its store-assigned fields."""
        try:
            cursor = self._conn.execute(
                "INSERT INTO students (name, external_code, category) VALUES (?, ?, ?)",
                (name, external_code, category),
            )
            self._conn.commit()
        except sqlite3.Error as e:
            self._conn.rollback()
            if isinstance(e, sqlite3.IntegrityError) and "external_code" in str(e):
                raise DuplicateCodeError(external_code) from e
            raise
        row = self._conn.execute(
            "SELECT id, name, external_code, category, created_at FROM students WHERE id = ?",
            (cursor.lastrowid,),
        ).fetchone()
        return _row_to_student(row)

    def count(self) -> int:
        row = self._conn.execute("SELECT COUNT(*) AS total FROM students").fetchone()
        return row["total"]


def get_store(request: Request) -> StudentStore:
    """FastAPI dependency returning the store opened at startup."""
    return request.app.state.store
