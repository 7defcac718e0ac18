"""Banned word lists per group and the record of users currently banned."""

from __future__ import annotations

import sqlite3
import threading
from datetime import timedelta

BAN_DURATION = timedelta(minutes=10)
GRACE = timedelta(minutes=1)
BAN_TABLE = "__bantime__"
NO_WORDS = "本群还没有违禁词~"

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_STRIPPED = str.maketrans("", "", "\n\r\t;")


def group_key(group_id: int) -> str:
    """Return the group id written in base 36, the name of the group's word table."""
    if group_id == 0:
        return "0"
    sign = "-" if group_id < 0 else ""
    value = abs(group_id)
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_DIGITS[rem])
    return sign + "".join(reversed(digits))


def clean_message(message: str) -> str:
    """Drop line breaks, tabs and semicolons before the message is checked."""
    return message.translate(_STRIPPED)


def _quote(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


class AntiAbuseDB:
    """SQLite store of banned words and of ban start times."""

    def __init__(self, path=":memory:"):
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.RLock()
        with self._lock, self._conn:
            self._conn.execute(
                f"CREATE TABLE IF NOT EXISTS {_quote(BAN_TABLE)} "
                "(id INTEGER PRIMARY KEY NOT NULL, time INTEGER)"
            )

    def __enter__(self) -> AntiAbuseDB:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        """Close the database."""
        with self._lock:
            self._conn.close()

    def _has_table(self, name: str) -> bool:
        row = self._conn.execute(
            "SELECT 1 FROM sqlite_master WHERE type='table' AND name=?", (name,)
        ).fetchone()
        return row is not None

    def contains_banned(self, group_id: int, message: str) -> bool:
        """Whether the message holds any of the group's banned words."""
        table = group_key(group_id)
        with self._lock:
            if not self._has_table(table):
                return False
            row = self._conn.execute(
                f"SELECT 1 FROM {_quote(table)} WHERE instr(?, word) > 0 LIMIT 1",
                (message,),
            ).fetchone()
        return row is not None

    def insert_word(self, group_id: int, word: str) -> None:
        """Add a banned word to the group."""
        table = _quote(group_key(group_id))
        with self._lock, self._conn:
            self._conn.execute(
                f"CREATE TABLE IF NOT EXISTS {table} (word TEXT PRIMARY KEY NOT NULL)"
            )
            self._conn.execute(f"INSERT OR REPLACE INTO {table} (word) VALUES (?)", (word,))

    def delete_word(self, group_id: int, word: str) -> None:
        """Remove a banned word; raises when the group has no words at all."""
        table = group_key(group_id)
        with self._lock, self._conn:
            count = 0
            if self._has_table(table):
                count = self._conn.execute(f"SELECT COUNT(*) FROM {_quote(table)}").fetchone()[0]
            if count == 0:
                raise LookupError(NO_WORDS)
            self._conn.execute(f"DELETE FROM {_quote(table)} WHERE word = ?", (word,))

    def list_words(self, group_id: int) -> str:
        """Return the group's words as ``[a | b]``; very short results read ``[]``."""
        table = group_key(group_id)
        with self._lock:
            words = []
            if self._has_table(table):
                words = [row[0] for row in self._conn.execute(f"SELECT word FROM {_quote(table)}")]
        body = "[" + " | ".join(words)
        if len(body.encode("utf-8")) <= 4:
            return "[]"
        return body + "]"

    def record_ban(self, user_id: int, timestamp: int) -> None:
        """Remember that a user was banned at a Unix time."""
        with self._lock, self._conn:
            self._conn.execute(
                f"INSERT OR REPLACE INTO {_quote(BAN_TABLE)} (id, time) VALUES (?, ?)",
                (user_id, int(timestamp)),
            )

    def remove_ban(self, user_id: int) -> None:
        """Forget a user's ban."""
        with self._lock, self._conn:
            self._conn.execute(f"DELETE FROM {_quote(BAN_TABLE)} WHERE id = ?", (user_id,))

    def active_bans(self, now: int) -> dict[int, int]:
        """Return remaining seconds per banned user at ``now``; purge bans nearly over.

        A ban with less than a minute left counts as over.
        """
        duration = int(BAN_DURATION.total_seconds())
        grace = int(GRACE.total_seconds())
        with self._lock, self._conn:
            rows = self._conn.execute(
                f"SELECT id, time FROM {_quote(BAN_TABLE)} ORDER BY id"
            ).fetchall()
            active = {}
            for user_id, start in rows:
                remaining = start + duration - now
                if remaining >= grace:
                    active[user_id] = remaining
            self._conn.execute(
                f"DELETE FROM {_quote(BAN_TABLE)} WHERE time <= ?",
                (now + grace - duration,),
            )
        return active