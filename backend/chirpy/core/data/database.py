"""Database module for user and chirp storage.

This module implements the persistence gateway on top of SQLite.
"""
import logging
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, List, Optional, Union
from uuid import UUID

from backend.chirpy.core.data.gateway import Chirp, ChirpGateway, User
from backend.chirpy.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

SQLITE_SCHEME = "sqlite:///"


def resolve_db_path(db_url: Union[str, Path]) -> Path:
    """Turn a database connection string into a SQLite file path.

    Accepts either a plain filesystem path or a ``sqlite:///`` URL
    (``sqlite:////abs/path`` for absolute paths).

    Args:
        db_url: Connection string or path

    Returns:
        Path to the SQLite database file

    Raises:
        ValueError: If the URL names a backend other than SQLite
    """
    url = str(db_url)
    if url.startswith(SQLITE_SCHEME):
        url = url[len(SQLITE_SCHEME):]
    elif "://" in url:
        scheme = url.split("://", 1)[0]
        raise ValueError(f"Unsupported database scheme: {scheme}")
    if not url or url == ":memory:":
        raise ValueError("A file-backed SQLite database is required")
    return Path(url)


class ChirpyDatabase(ChirpGateway):
    """Handles all database operations for users and chirps.

    A fresh connection is opened for every call so one instance can be shared
    across concurrently handled requests.
    """

    def __init__(self, db_url: Union[str, Path] = "data/chirpy.db"):
        """Initialize database and create tables if they don't exist.

        Args:
            db_url: Connection string or path to the SQLite database file
        """
        self._db_path = resolve_db_path(db_url)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self.__create_tables()

    @property
    def db_path(self) -> Path:
        return self._db_path

    @contextmanager
    def _connect(self, operation: str) -> Iterator[sqlite3.Connection]:
        """Open a connection, commit on success and wrap backend errors.

        Args:
            operation: Gateway operation name, reported on failure

        Raises:
            PersistenceError: If SQLite raises while the block runs
        """
        conn = None
        try:
            conn = sqlite3.connect(self._db_path)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            if conn is not None:
                conn.rollback()
            logger.error(f"Database error during {operation}: {e}")
            raise PersistenceError(
                f"Database operation failed: {operation}",
                operation=operation,
                original_error=e,
            )
        finally:
            if conn is not None:
                conn.close()

    def __create_tables(self):
        """Create necessary database tables if they don't exist."""
        with self._connect("create_tables") as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS users (
                    id TEXT PRIMARY KEY,
                    created_at TIMESTAMP NOT NULL,
                    updated_at TIMESTAMP NOT NULL,
                    email TEXT NOT NULL UNIQUE
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS chirps (
                    id TEXT PRIMARY KEY,
                    created_at TIMESTAMP NOT NULL,
                    updated_at TIMESTAMP NOT NULL,
                    body TEXT NOT NULL,
                    user_id TEXT NOT NULL,
                    FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
                )
            """)

    @staticmethod
    def _now() -> str:
        return datetime.now(timezone.utc).isoformat()

    def create_user(self, email: str) -> User:
        """Insert a new user.

        Args:
            email: Email address of the user

        Returns:
            User: The inserted user

        Raises:
            PersistenceError: On duplicate email or any other backend failure
        """
        now = self._now()
        user_id = str(uuid.uuid4())
        with self._connect("create_user") as conn:
            conn.execute("""
                INSERT INTO users (id, created_at, updated_at, email)
                VALUES (?, ?, ?, ?)
            """, (user_id, now, now, email))
        return User(id=user_id, created_at=now, updated_at=now, email=email)

    def create_chirp(self, body: str, user_id: UUID) -> Chirp:
        """Insert a new chirp.

        Args:
            body: Filtered chirp body
            user_id: Owning user's identifier; must reference an existing user

        Returns:
            Chirp: The inserted chirp

        Raises:
            PersistenceError: If the user does not exist or the insert fails
        """
        now = self._now()
        chirp_id = str(uuid.uuid4())
        with self._connect("create_chirp") as conn:
            conn.execute("""
                INSERT INTO chirps (id, created_at, updated_at, body, user_id)
                VALUES (?, ?, ?, ?, ?)
            """, (chirp_id, now, now, body, str(user_id)))
        return Chirp(id=chirp_id, created_at=now, updated_at=now, body=body, user_id=user_id)

    def list_chirps(self) -> List[Chirp]:
        with self._connect("list_chirps") as conn:
            rows = conn.execute("""
                SELECT id, created_at, updated_at, body, user_id
                FROM chirps
                ORDER BY created_at ASC, rowid ASC
            """).fetchall()
        return [Chirp(**dict(row)) for row in rows]

    def get_chirp(self, chirp_id: UUID) -> Optional[Chirp]:
        with self._connect("get_chirp") as conn:
            row = conn.execute("""
                SELECT id, created_at, updated_at, body, user_id
                FROM chirps WHERE id = ?
            """, (str(chirp_id),)).fetchone()
        return Chirp(**dict(row)) if row else None

    def delete_all_users(self) -> int:
        with self._connect("delete_all_users") as conn:
            deleted = conn.execute("SELECT COUNT(*) FROM users").fetchone()[0]
            conn.execute("DELETE FROM users")
        logger.info(f"Deleted {deleted} users")
        return deleted

    def count_users(self) -> int:
        """Get the total number of users."""
        with self._connect("count_users") as conn:
            return conn.execute("SELECT COUNT(*) FROM users").fetchone()[0]

    def count_chirps(self) -> int:
        """Get the total number of chirps."""
        with self._connect("count_chirps") as conn:
            return conn.execute("SELECT COUNT(*) FROM chirps").fetchone()[0]
