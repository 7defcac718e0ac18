"""Turn English text upside down."""

from __future__ import annotations

import re

COMMAND = re.compile(r"^翻转\s*([A-Za-z\s]*)$")

_CHAR_MAP = {
    " ": " ",
    "a": "ɐ", "b": "q", "c": "ɔ", "d": "p", "e": "ǝ", "f": "ɟ", "g": "ƃ",
    "h": "ɥ", "i": "ᴉ", "j": "ɾ", "k": "ʞ", "l": "l", "m": "ɯ", "n": "u",
    "o": "o", "p": "d", "q": "b", "r": "ɹ", "s": "s", "t": "ʇ", "u": "n",
    "v": "ʌ", "w": "ʍ", "x": "x", "y": "ʎ", "z": "z",
    "A": "∀", "B": "ᗺ", "C": "Ɔ", "D": "ᗡ", "E": "Ǝ", "F": "Ⅎ", "G": "⅁",
    "H": "H", "I": "I", "J": "ſ", "K": "ʞ", "L": "˥", "M": "W", "N": "N",
    "O": "O", "P": "Ԁ", "Q": "Ò", "R": "ᴚ", "S": "S", "T": "⏊", "U": "∩",
    "V": "Λ", "W": "M", "X": "X", "Y": "⅄", "Z": "Z",
}


def flip(text: str) -> str:
    """Reverse the text and turn each letter upside down; unmapped characters become NUL."""
    return "".join(_CHAR_MAP.get(ch, "\x00") for ch in reversed(text))