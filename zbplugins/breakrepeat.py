"""Break up a run of repeated messages in a group."""

from __future__ import annotations

import random
import threading

THROTTLE = 3


class RepeatBreaker:
    """Counts identical consecutive messages per group and interrupts long runs."""

    def __init__(self, throttle: int = THROTTLE, rng=random):
        if not 0 <= throttle <= 9:
            raise ValueError("throttle must be between 0 and 9")
        self.throttle = throttle
        self._rng = rng
        self._state: dict[int, tuple[int, str]] = {}
        self._lock = threading.Lock()

    def feed(self, group_id: int, raw: str) -> str | None:
        """Record a message; return the text to send when the run is broken."""
        with self._lock:
            entry = self._state.get(group_id)
            if entry is None or not entry[1] or entry[1] != raw:
                self._state[group_id] = (0, raw)
                return None
            count = entry[0]
            if count < self.throttle:
                self._state[group_id] = (count + 1, raw)
                return None
            del self._state[group_id]
        if len(raw.encode("utf-8")) > 2:
            chars = list(raw)
            self._rng.shuffle(chars)
            return "".join(chars)
        return f"{count}: {raw}"