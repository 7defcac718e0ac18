"""Translate Chinese text into emoji by pronunciation."""

from __future__ import annotations

import sqlite3
import threading


class AbstractDictionary:
    """Pinyin and emoji tables stored in an SQLite database."""

    def __init__(self, path=":memory:"):
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.Lock()
        with self._lock, self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS pinyin (word TEXT, pronunciation TEXT)"
            )
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS emoji (pronunciation TEXT, emoji TEXT)"
            )

    def __enter__(self) -> AbstractDictionary:
        return self

    def __exit__(self, *exc) -> None:
        self._conn.close()

    def _lookup(self, query: str, key: str) -> str:
        with self._lock:
            row = self._conn.execute(query, (key,)).fetchone()
        return row[0] if row and row[0] is not None else ""

    def pinyin(self, word: str) -> str:
        """Return the pronunciation of a character, or an empty string."""
        return self._lookup("SELECT pronunciation FROM pinyin WHERE word = ? LIMIT 1", word)

    def emoji(self, pronunciation: str) -> str:
        """Return the emoji for a pronunciation, or an empty string."""
        return self._lookup(
            "SELECT emoji FROM emoji WHERE pronunciation = ? LIMIT 1", pronunciation
        )

    def translate(self, text: str) -> str:
        """Replace character pairs, then single characters, by matching emoji."""
        out: list[str] = []
        i = 0
        while i < len(text):
            if i < len(text) - 1:
                pair = self.emoji(self.pinyin(text[i]) + self.pinyin(text[i + 1]))
                if pair:
                    out.append(pair)
                    i += 2
                    continue
            single = self.emoji(self.pinyin(text[i]))
            out.append(single or text[i])
            i += 1
        return "".join(out)