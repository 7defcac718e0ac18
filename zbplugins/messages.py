"""Message segments in the shape the chat protocol expects."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Segment:
    """One piece of a chat message: a type name plus its string data."""

    type: str
    data: dict[str, str] = field(default_factory=dict)


def _sprint(args: tuple) -> str:
    """Join values, spacing two neighbours only when neither is a string."""
    parts: list[str] = []
    previous = None
    for index, value in enumerate(args):
        if index and not isinstance(value, str) and not isinstance(previous, str):
            parts.append(" ")
        parts.append(str(value))
        previous = value
    return "".join(parts)


def text(*args) -> Segment:
    """Build a text segment from any number of values."""
    return Segment("text", {"text": _sprint(args)})


def image(file: str) -> Segment:
    """Build an image segment pointing at a URL, path or base64 payload."""
    return Segment("image", {"file": file})


def record(file: str) -> Segment:
    """Build a voice record segment."""
    return Segment("record", {"file": file})


def at(user_id: int) -> Segment:
    """Build a segment that mentions a user."""
    return Segment("at", {"qq": str(user_id)})


def reply(message_id) -> Segment:
    """Build a segment that quotes an earlier message."""
    return Segment("reply", {"id": str(message_id)})


def plain_text(segments: Iterable[Segment]) -> str:
    """Return the concatenated text of all text segments."""
    return "".join(seg.data.get("text", "") for seg in segments if seg.type == "text")