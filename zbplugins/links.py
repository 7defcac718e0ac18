"""Link builders for simple lookup commands."""

from __future__ import annotations

import random
from urllib.parse import quote_plus

WAIFU_URL = "https://www.thiswaifudoesnotexist.net/example-%d.jpg"
ALIPAY_VOICE_URL = "https://mm.cqu.cc/share/zhifubaodaozhang/mp3/%s.mp3"
BAIDU_URL = "https://buhuibaidu.me/?s="


def waifu_url(rng=random) -> str:
    """Return the address of a random generated picture, numbered 1 to 100000."""
    return WAIFU_URL % (rng.randrange(100000) + 1)


def alipay_voice_url(args: str) -> str:
    """Return the address of the payment voice for an amount."""
    return ALIPAY_VOICE_URL % args.strip()


def baidu_url(query: str) -> str:
    """Return the search helper link for a query."""
    if not query:
        raise ValueError("empty query")
    return BAIDU_URL + quote_plus(query, safe="")