"""Short couple stories with the two names filled in."""

from __future__ import annotations

from dataclasses import dataclass

GONG_MARK = "<攻>"
SHOU_MARK = "<受>"
NAME_SEPARATOR = " "
MISSING_NAMES = "请用空格分开两个人名"


@dataclass(frozen=True)
class CpStory:
    """A story template with the names of its original pair."""

    id: int = 0
    gong: str = ""
    shou: str = ""
    story: str = ""


def fill_story(story: CpStory, gong: str, shou: str) -> str:
    """Put the given names into the story.

    The placeholders take ``gong`` and ``shou``; the story's own names are both
    replaced with ``gong``, as the stories have always been told.
    """
    text = story.story.replace(GONG_MARK, gong)
    text = text.replace(SHOU_MARK, shou)
    text = text.replace(story.gong, gong)
    return text.replace(story.shou, gong)


def split_names(args: str) -> tuple[str, str]:
    """Split command arguments into two names separated by a space."""
    params = args.split(NAME_SEPARATOR)
    if len(params) < 2:
        raise ValueError(MISSING_NAMES)
    return params[0], params[1]