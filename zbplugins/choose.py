"""Pick one of several options for an undecided user."""

from __future__ import annotations

import random

SEPARATOR = "还是"


def split_options(args: str) -> list[str]:
    """Split the argument text into options."""
    return args.split(SEPARATOR)


def choose(args: str, nickname: str, rng=random) -> str:
    """Return the reply listing the options and the one picked."""
    options = split_options(args)
    numbered = "\n".join(f"{count}, {option}" for count, option in enumerate(options, 1))
    result = options[rng.randrange(len(options))]
    return f"> {nickname}\n你的选项有:\n{numbered}\n你最终会选: {result}"