"""Command parsing for the free-text Japanese speech synthesis voices."""

from __future__ import annotations

import re
import unicodedata
from string import ascii_letters

NAMES: tuple[str, ...] = tuple(
    sorted(
        (
            "伊織弓鶴", "紲星あかり", "結月ゆかり", "京町セイカ", "東北きりたん",
            "東北イタコ", "ついなちゃん標準語", "ついなちゃん関西弁", "音街ウナ",
            "琴葉茜", "吉田くん", "民安ともえ", "桜乃そら", "月読アイ", "琴葉葵",
            "東北ずん子", "月読ショウタ", "水奈瀬コウ",
        )
    )
)

MENU_PROMPT = "输入的音源为空, 请输入音源序号\n"
INVALID_INDEX = "序号非法!"
MAX_NAME_LENGTH = 10

_DIGITS = "0123456789"
_SPACES = "\t\n\f\r "
_RANGES = (
    (0x3005, 0x3005),
    (0x3040, 0x30FF),
    (0x4E00, 0x9FFF),
    (0xFF11, 0xFF19),
    (0xFF21, 0xFF3A),
    (0xFF41, 0xFF5A),
    (0xFF66, 0xFF9D),
)
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _allowed(ch: str) -> bool:
    if ch in ascii_letters or ch in _DIGITS or ch in _SPACES:
        return True
    code = ord(ch)
    if any(low <= code <= high for low, high in _RANGES):
        return True
    return unicodedata.category(ch).startswith("P")


def parse_command(message: str) -> tuple[str, str] | None:
    """Split ``使<name>说<text>`` into name and text; None when it does not match.

    The longest possible name is preferred, as with a greedy pattern.
    """
    if not message.startswith("使"):
        return None
    rest = message[1:]
    for length in range(min(MAX_NAME_LENGTH, len(rest) - 1), -1, -1):
        name = rest[:length]
        if "\n" in name or rest[length] != "说":
            continue
        spoken = rest[length + 1:]
        if spoken and all(_allowed(ch) for ch in spoken):
            return name, spoken
    return None


def is_known_name(name: str) -> bool:
    """Whether the name is one of the available voices."""
    return name in NAMES


def name_menu() -> str:
    """Return the prompt listing every voice with its number."""
    return MENU_PROMPT + "".join(f"{i}. {name}\n" for i, name in enumerate(NAMES))


def name_by_index(text: str) -> str:
    """Return the voice chosen by number; text that is not a number picks the first."""
    num = int(text) if _INTEGER.fullmatch(text) else 0
    if not 0 <= num < len(NAMES):
        raise ValueError(INVALID_INDEX)
    return NAMES[num]