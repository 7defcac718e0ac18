"""Subscriptions of chats to live and dynamic pushes of video site uploaders."""

from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass

_FIELDS = ("live_disable", "dynamic_disable")


@dataclass
class Push:
    """One chat's subscription to one uploader; a disable flag of 0 means enabled."""

    id: int = 0
    bilibili_uid: int = 0
    group_id: int = 0
    live_disable: int = 0
    dynamic_disable: int = 0


class PushDB:
    """SQLite store of subscriptions and of uploader names."""

    def __init__(self, path=":memory:"):
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.RLock()
        with self._lock, self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS bilibili_push ("
                "id INTEGER PRIMARY KEY, bilibili_uid INTEGER, group_id INTEGER, "
                "live_disable INTEGER DEFAULT 0, dynamic_disable INTEGER DEFAULT 0)"
            )
            self._conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_buid_gid ON bilibili_push (bilibili_uid, group_id)"
            )
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS bilibili_up "
                "(bilibili_uid INTEGER PRIMARY KEY, name TEXT)"
            )

    def __enter__(self) -> PushDB:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        """Close the database."""
        with self._lock:
            self._conn.close()

    def upsert(self, bilibili_uid: int, group_id: int, **kwargs) -> None:
        """Create the subscription or update the given disable flags of an existing one."""
        unknown = set(kwargs) - set(_FIELDS)
        if unknown:
            raise TypeError(f"unknown fields: {', '.join(sorted(unknown))}")
        with self._lock, self._conn:
            row = self._conn.execute(
                "SELECT id FROM bilibili_push WHERE bilibili_uid = ? AND group_id = ? "
                "ORDER BY id LIMIT 1",
                (bilibili_uid, group_id),
            ).fetchone()
            if row is None:
                self._conn.execute(
                    "INSERT INTO bilibili_push "
                    "(bilibili_uid, group_id, live_disable, dynamic_disable) VALUES (?, ?, ?, ?)",
                    (
                        bilibili_uid,
                        group_id,
                        int(kwargs.get("live_disable", 0)),
                        int(kwargs.get("dynamic_disable", 0)),
                    ),
                )
            elif kwargs:
                names = [name for name in _FIELDS if name in kwargs]
                assignments = ", ".join(f"{name} = ?" for name in names)
                self._conn.execute(
                    f"UPDATE bilibili_push SET {assignments} "
                    "WHERE bilibili_uid = ? AND group_id = ?",
                    (*(int(kwargs[name]) for name in names), bilibili_uid, group_id),
                )

    def _distinct_uids(self, column: str) -> list[int]:
        with self._lock:
            rows = self._conn.execute(
                f"SELECT bilibili_uid FROM bilibili_push WHERE {column} = 0 ORDER BY id"
            ).fetchall()
        return list(dict.fromkeys(row[0] for row in rows))

    def _groups(self, bilibili_uid: int, column: str) -> list[int]:
        with self._lock:
            rows = self._conn.execute(
                f"SELECT group_id FROM bilibili_push WHERE bilibili_uid = ? AND {column} = 0 "
                "ORDER BY id",
                (bilibili_uid,),
            ).fetchall()
        return [row[0] for row in rows]

    def live_uids(self) -> list[int]:
        """Uploaders with at least one live subscription, in order of first subscription."""
        return self._distinct_uids("live_disable")

    def dynamic_uids(self) -> list[int]:
        """Uploaders with at least one dynamic subscription, in order of first subscription."""
        return self._distinct_uids("dynamic_disable")

    def groups_for_live(self, bilibili_uid: int) -> list[int]:
        """Chats subscribed to the uploader's live pushes."""
        return self._groups(bilibili_uid, "live_disable")

    def groups_for_dynamic(self, bilibili_uid: int) -> list[int]:
        """Chats subscribed to the uploader's dynamic pushes."""
        return self._groups(bilibili_uid, "dynamic_disable")

    def pushes_for_group(self, group_id: int) -> list[Push]:
        """Subscriptions of a chat with at least one push kind enabled."""
        with self._lock:
            rows = self._conn.execute(
                "SELECT id, bilibili_uid, group_id, live_disable, dynamic_disable "
                "FROM bilibili_push WHERE group_id = ? "
                "AND (live_disable = 0 OR dynamic_disable = 0) ORDER BY id",
                (group_id,),
            ).fetchall()
        return [Push(*row) for row in rows]

    def insert_up(self, bilibili_uid: int, name: str) -> None:
        """Remember an uploader's name; an already known uploader keeps the old one."""
        with self._lock, self._conn:
            self._conn.execute(
                "INSERT OR IGNORE INTO bilibili_up (bilibili_uid, name) VALUES (?, ?)",
                (bilibili_uid, name),
            )

    def up_names(self) -> dict[int, str]:
        """All known uploader names by uid."""
        with self._lock:
            rows = self._conn.execute("SELECT bilibili_uid, name FROM bilibili_up").fetchall()
        return dict(rows)