"""Basic chat reactions and the per-group air conditioner joke."""

from __future__ import annotations

import random
import threading

DEFAULT_TEMPERATURE = 26


def name_reply(nickname: str, rng=random) -> str:
    """Return a reply for when the bot is called by name."""
    replies = (
        nickname + "在此，有何贵干~",
        "(っ●ω●)っ在~",
        "这里是" + nickname + "(っ●ω●)っ",
        nickname + "不在呢~",
    )
    return replies[rng.randrange(len(replies))]


class AirConditioner:
    """Per-group air conditioner with a switch and a temperature."""

    def __init__(self):
        self._temperature: dict[int, int] = {}
        self._switch: dict[int, bool] = {}
        self._lock = threading.Lock()

    def turn_on(self, group_id: int) -> str:
        with self._lock:
            self._switch[group_id] = True
        return "❄️哔~"

    def turn_off(self, group_id: int) -> str:
        with self._lock:
            self._switch[group_id] = False
            self._temperature.pop(group_id, None)
        return "💤哔~"

    def set_temperature(self, group_id: int, value) -> str:
        """Set the temperature when switched on; return the status either way."""
        with self._lock:
            self._temperature.setdefault(group_id, DEFAULT_TEMPERATURE)
            if self._switch.get(group_id, False):
                try:
                    self._temperature[group_id] = int(value)
                except (TypeError, ValueError):
                    self._temperature[group_id] = 0
        return self.status(group_id)

    def status(self, group_id: int) -> str:
        with self._lock:
            temperature = self._temperature.setdefault(group_id, DEFAULT_TEMPERATURE)
            on = self._switch.get(group_id, False)
        head = "❄️风速中" if on else "💤"
        return f"{head}\n群温度 {temperature}℃"