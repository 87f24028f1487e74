"""
SQLite persistence gateway and simple migration system.

``Database`` owns a single SQLite connection for the lifetime of the
application: it is opened by the application lifespan at startup,
handed to route handlers through the ``get_db`` dependency, and closed
at shutdown.  There is no module-level connection.

The gateway exposes the handful of operations the services need
(insert/find-by-id for users, insert/find-with-filter for exercises).
Each operation is a single attempt and commits on its own; nothing
spans two calls.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

from __future__ import annotations

import logging
import os
import secrets
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, List, Optional

from fastapi import Request

from .errors import ErrorKind, ServiceError

if TYPE_CHECKING:
    from ..services.log_service import LogFilter


logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            username TEXT NOT NULL UNIQUE,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        -- user_id is a plain reference; exercises are never cascaded.
        -- seq preserves insertion order for log queries.
        CREATE TABLE IF NOT EXISTS exercises (
            seq INTEGER PRIMARY KEY AUTOINCREMENT,
            id TEXT NOT NULL UNIQUE,
            user_id TEXT NOT NULL,
            description TEXT NOT NULL,
            duration INTEGER,
            date TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """,
    ),
    # Migration 2: index for per-user date range lookups
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_exercises_user_date ON exercises(user_id, date);
        """,
    ),
]


@dataclass
class UserRecord:
    id: str
    username: str


@dataclass
class ExerciseRecord:
    id: str
    user_id: str
    description: str
    duration: Optional[int]
    date: date


def new_object_id() -> str:
    """Return a fresh opaque identifier (24 lowercase hex characters)."""
    return secrets.token_hex(12)


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    ``:memory:`` and absolute paths are used as is.  Relative paths are
    resolved against the project root (the directory holding the
    ``exercise_tracker_api`` package).
    """
    if database_url == MEMORY_DATABASE or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class Database:
    """Explicitly opened SQLite gateway for users and exercises."""

    def __init__(self, database_url: str) -> None:
        self.path = get_database_path(database_url)
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    async def open(self) -> None:
        if self._conn is not None:
            return
        # Handlers may run on a different thread than the one that opened
        # the connection (e.g. under the test client's portal).
        conn = sqlite3.connect(self.path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        self._conn = conn
        logger.info("Connected to database %s", self.path)

    async def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Database connection closed")

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor; commit on success, roll back on error."""
        if self._conn is None:
            raise RuntimeError("Database is not open")
        cursor = self._conn.cursor()
        try:
            yield cursor
            self._conn.commit()
        except Exception:
            self._conn.rollback()
            raise
        finally:
            cursor.close()

    async def migrate(self) -> int:
        """Apply pending migrations and return the resulting schema version."""
        with self.cursor() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) as version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    current_version = version
        logger.info("Database schema at version %s", current_version)
        return current_version

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def insert_user(self, username: str) -> UserRecord:
        """Persist a new user.

        Raises ``ServiceError`` with ``DUPLICATE_KEY`` if the username is
        already taken.
        """
        user = UserRecord(id=new_object_id(), username=username)
        try:
            with self.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO users (id, username) VALUES (?, ?)",
                    (user.id, user.username),
                )
        except sqlite3.IntegrityError as e:
            raise ServiceError(
                ErrorKind.DUPLICATE_KEY, f"Username '{username}' already exists"
            ) from e
        return user

    async def get_user(self, user_id: str) -> Optional[UserRecord]:
        with self.cursor() as cursor:
            row = cursor.execute(
                "SELECT id, username FROM users WHERE id = ?", (user_id,)
            ).fetchone()
        if not row:
            return None
        return UserRecord(id=row["id"], username=row["username"])

    async def list_users(self) -> List[UserRecord]:
        with self.cursor() as cursor:
            rows = cursor.execute(
                "SELECT id, username FROM users ORDER BY rowid"
            ).fetchall()
        return [UserRecord(id=row["id"], username=row["username"]) for row in rows]

    # ------------------------------------------------------------------
    # Exercises
    # ------------------------------------------------------------------

    async def insert_exercise(
        self,
        user_id: str,
        description: str,
        duration: Optional[int],
        on: date,
    ) -> ExerciseRecord:
        exercise = ExerciseRecord(
            id=new_object_id(),
            user_id=user_id,
            description=description,
            duration=duration,
            date=on,
        )
        with self.cursor() as cursor:
            cursor.execute(
                """
                INSERT INTO exercises (id, user_id, description, duration, date)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    exercise.id,
                    exercise.user_id,
                    exercise.description,
                    exercise.duration,
                    exercise.date.isoformat(),
                ),
            )
        return exercise

    async def find_exercises(self, log_filter: LogFilter) -> List[ExerciseRecord]:
        """Return exercises matching ``log_filter`` in insertion order."""
        where, params = log_filter.where()
        query = (
            "SELECT id, user_id, description, duration, date FROM exercises"
            f" WHERE {where} ORDER BY seq"
        )
        if log_filter.limit is not None:
            query += " LIMIT ?"
            params.append(log_filter.limit)
        with self.cursor() as cursor:
            rows = cursor.execute(query, tuple(params)).fetchall()
        return [
            ExerciseRecord(
                id=row["id"],
                user_id=row["user_id"],
                description=row["description"],
                duration=row["duration"],
                date=date.fromisoformat(row["date"]),
            )
            for row in rows
        ]


def get_db(request: Request) -> Database:
    """FastAPI dependency returning the database opened at startup."""
    return request.app.state.db
