"""Packing of reply and voice mode settings into per-group integers.

Group data layout: [4 bits mockingbird][4 bits baidu][8 bits tts][8 bits reply].
Default data layout: [4 bits mockingbird][4 bits baidu][8 bits tts].
"""

from __future__ import annotations

from collections.abc import Sequence

LAST_GENSHIN_INDEX = 63
BAIDU_INDEX = 64
MOCKINGBIRD_INDEX = 65
DEFAULT_TTS_INDEX_KEY = -2905

BAIDU = "百度"
MOCKINGBIRD = "拟声鸟"
REPLY_MODES = ("青云客", "小爱", "ChatGPT")


def format_list(items: Sequence[str], per_line: int) -> str:
    """Join items with `` | ``, breaking the line after every ``per_line`` items."""
    return "".join(
        item + ("\n" if (i + 1) % per_line == 0 else " | ") for i, item in enumerate(items)
    )


def reply_mode_index(name: str) -> int:
    """Return the index of a reply mode."""
    try:
        return REPLY_MODES.index(name)
    except ValueError:
        raise ValueError("no such mode") from None


def pack_reply_mode(data: int, index: int) -> int:
    """Store a reply mode index in the low byte of the data."""
    return (data & ~0xFF) | (index & 0xFF)


def unpack_reply_mode(data: int) -> str:
    """Return the reply mode stored in the data; unknown values use the first mode."""
    index = data & 0xFF
    return REPLY_MODES[index] if index < len(REPLY_MODES) else REPLY_MODES[0]


def sound_index(name: str, sound_list: Sequence[str]) -> int:
    """Return the voice index of a speaker name."""
    if name in sound_list:
        return list(sound_list).index(name)
    if name == BAIDU:
        return BAIDU_INDEX
    if name == MOCKINGBIRD:
        return MOCKINGBIRD_INDEX
    raise ValueError("不支持设置语音人物" + name)


def pack_sound_mode(data: int, index: int, baiduper: int, mockingsynt: int) -> int:
    """Store a voice index and its parameters in group data, keeping the reply byte."""
    return (
        (data & ~0xFFFF00)
        | ((index << 8) & 0xFF00)
        | ((baiduper << 16) & 0x0F0000)
        | ((mockingsynt << 20) & 0xF00000)
    )


def pack_default_sound_mode(index: int, baiduper: int, mockingsynt: int) -> int:
    """Pack the default voice setting."""
    return (index & 0xFF) | ((baiduper << 8) & 0x0F00) | ((mockingsynt << 12) & 0xF000)


def _valid(index: int, sound_list: Sequence[str]) -> bool:
    return index < len(sound_list) or index in (BAIDU_INDEX, MOCKINGBIRD_INDEX)


def _mode_name(index: int, sound_list: Sequence[str]) -> str:
    if index == BAIDU_INDEX:
        return BAIDU
    if index == MOCKINGBIRD_INDEX:
        return MOCKINGBIRD
    return sound_list[index]


def resolve_sound_mode(
    data: int, default: int, sound_list: Sequence[str]
) -> tuple[str, int, int, int]:
    """Return (speaker, index, baidu person, mockingbird synthesizer) for group data.

    An invalid voice in the group data falls back to the default setting.
    """
    setting = data >> 8
    index = setting & 0xFF
    if not _valid(index, sound_list):
        setting = default
        index = setting & 0xFF
        if not _valid(index, sound_list):
            raise ValueError("no valid speaker")
    return (
        _mode_name(index, sound_list),
        index,
        (setting & 0x0F00) >> 8,
        (setting & 0xF000) >> 12,
    )


def reset_sound_mode(data: int, default: int) -> int:
    """Return group data with its voice setting reset from the default, keeping the reply byte."""
    return (data & 0xFF) | ((default & ~0xFF) << 8)