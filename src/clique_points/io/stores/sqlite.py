"""SQLite-backed message store.

Holds the same tables the collector writes: users (id, name) and messages
(id, guild, author, channel, reply_to, timestamp). Snowflakes are unsigned
64-bit but SQLite integers are signed, so IDs are stored two's-complement
wrapped and unwrapped on read.
"""

from __future__ import annotations

import sqlite3
from collections.abc import Generator, Iterable
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from threading import Lock
from typing import Any, List, Optional, Union

from ...core import (
    MAX_SNOWFLAKE,
    GuildID,
    Message,
    StoreUnavailableError,
    UserID,
    ensure_utc,
)
from ...observability import get_logger
from .base import MessageStore

logger = get_logger(__name__)

_U64 = 1 << 64
_I64_MAX = (1 << 63) - 1
_TS_FORMAT = "%Y-%m-%d %H:%M:%S.%f"
_TS_TAIL_FORMAT = "%m-%d %H:%M:%S.%f"

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS messages (
        id INTEGER PRIMARY KEY,
        guild INTEGER NOT NULL,
        author INTEGER NOT NULL,
        channel INTEGER NOT NULL,
        reply_to INTEGER,
        timestamp TEXT NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS messages_guild_timestamp ON messages (guild, timestamp)",
)


def _to_db_id(value: int) -> int:
    if not 0 <= value <= MAX_SNOWFLAKE:
        raise ValueError(f"ID out of unsigned 64-bit range: {value}")
    return value - _U64 if value > _I64_MAX else value


def _from_db_id(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    return value + _U64 if value < 0 else value


def _to_db_ts(ts: datetime) -> str:
    # Fixed-width UTC text compares in chronological order; strftime does
    # not pad years below 1000
    ts = ensure_utc(ts)
    return f"{ts.year:04d}-" + ts.strftime(_TS_TAIL_FORMAT)


def _from_db_ts(value: str) -> datetime:
    return ensure_utc(datetime.strptime(value, _TS_FORMAT))


class SqliteMessageStore(MessageStore):
    """
    Message store persisted in a single SQLite database.

    One connection is shared and guarded by a lock, so a store instance can
    serve concurrent readers. Tables are created on first use.
    """

    def __init__(self, db_path: Union[str, Path] = "clique.db"):
        self.db_path = str(db_path)
        self._lock = Lock()
        try:
            self._conn = sqlite3.connect(self.db_path, check_same_thread=False)
            with self._conn:
                for statement in _SCHEMA:
                    self._conn.execute(statement)
        except sqlite3.Error as e:
            logger.error("Failed to open message store %s: %s", self.db_path, e)
            raise StoreUnavailableError(f"Cannot open message store {self.db_path}: {e}") from e

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def __enter__(self) -> "SqliteMessageStore":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @contextmanager
    def _transaction(self, action: str) -> Generator[sqlite3.Connection, None, None]:
        """Run statements in one transaction, mapping storage failures."""
        with self._lock:
            try:
                with self._conn:
                    yield self._conn
            except sqlite3.IntegrityError:
                raise
            except sqlite3.Error as e:
                logger.error("Message store %s failed while %s: %s", self.db_path, action, e)
                raise StoreUnavailableError(f"Message store failed while {action}: {e}") from e

    def insert_user(self, user_id: UserID, name: str) -> None:
        """Insert a user, or update the stored name if the user exists."""
        with self._transaction("inserting a user") as conn:
            conn.execute(
                "INSERT INTO users (id, name) VALUES (?, ?) "
                "ON CONFLICT (id) DO UPDATE SET name = excluded.name",
                (_to_db_id(user_id), name),
            )

    def get_user(self, user_id: UserID) -> Optional[str]:
        """Get a user's name, or None if the user is unknown."""
        with self._transaction("reading a user") as conn:
            row = conn.execute(
                "SELECT name FROM users WHERE id = ?", (_to_db_id(user_id),)
            ).fetchone()
        return row[0] if row else None

    def insert_message(self, message: Message) -> None:
        """
        Insert a message.

        Raises:
            ValueError: If a message with the same ID is already stored
        """
        self.insert_messages([message])

    def insert_messages(self, messages: Iterable[Message]) -> int:
        """
        Insert messages in a single transaction.

        Returns:
            Number of messages inserted

        Raises:
            ValueError: If any message ID is already stored; nothing is inserted
        """
        rows = [
            (
                _to_db_id(m.id),
                _to_db_id(m.guild),
                _to_db_id(m.author),
                _to_db_id(m.channel),
                _to_db_id(m.reply_to) if m.reply_to is not None else None,
                _to_db_ts(m.timestamp),
            )
            for m in messages
        ]
        try:
            with self._transaction("inserting messages") as conn:
                conn.executemany(
                    "INSERT INTO messages (id, guild, author, channel, reply_to, timestamp) "
                    "VALUES (?, ?, ?, ?, ?, ?)",
                    rows,
                )
        except sqlite3.IntegrityError as e:
            raise ValueError(f"Message already stored: {e}") from e
        return len(rows)

    def fetch_messages(
        self,
        guild: Optional[GuildID] = None,
        after: Optional[datetime] = None,
        before: Optional[datetime] = None,
    ) -> List[Message]:
        """
        Read scoped messages with a single SELECT, which SQLite serves from
        one consistent snapshot of the database.
        """
        clauses = []
        params: List[Any] = []
        if guild is not None:
            clauses.append("guild = ?")
            params.append(_to_db_id(guild))
        if after is not None:
            clauses.append("timestamp > ?")
            params.append(_to_db_ts(after))
        if before is not None:
            clauses.append("timestamp < ?")
            params.append(_to_db_ts(before))

        query = "SELECT id, guild, author, channel, reply_to, timestamp FROM messages"
        if clauses:
            query += " WHERE " + " AND ".join(clauses)

        with self._transaction("reading messages") as conn:
            rows = conn.execute(query, params).fetchall()

        return [
            Message(
                id=_from_db_id(row[0]),
                guild=_from_db_id(row[1]),
                author=_from_db_id(row[2]),
                channel=_from_db_id(row[3]),
                reply_to=_from_db_id(row[4]),
                timestamp=_from_db_ts(row[5]),
            )
            for row in rows
        ]
