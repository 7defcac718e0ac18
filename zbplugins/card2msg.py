"""Turn video site dynamic, article, live room and video cards into chat messages.

Cards are the decoded JSON objects of the site's API. A dynamic card keeps its
inner card, and the optional vote of its extension, as JSON strings.
"""

from __future__ import annotations

import json
from datetime import datetime

from zbplugins.messages import Segment, image, text

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DYNAMIC_URL = "https://t.bilibili.com/"
ARTICLE_URL = "https://www.bilibili.com/read/cv"
LIVE_URL = "https://live.bilibili.com/"
VIDEO_URL = "https://www.bilibili.com/video/"

MSG_TYPE = {
    1: "转发了动态",
    2: "有图营业",
    4: "无图营业",
    8: "投稿了视频",
    16: "投稿了短视频",
    64: "投稿了文章",
    256: "投稿了音频",
    2048: "发布了简报",
    4200: "发布了直播",
    4308: "发布了直播",
}


def _get(obj, *keys, default=""):
    """Walk nested mappings; missing or null values give ``default``."""
    for key in keys:
        if not isinstance(obj, dict):
            return default
        obj = obj.get(key)
        if obj is None:
            return default
    return obj


def _int(obj, *keys) -> int:
    return int(_get(obj, *keys, default=0) or 0)


def _when(timestamp) -> str:
    return datetime.fromtimestamp(int(timestamp or 0)).strftime(TIME_FORMAT)


def _human_num(value) -> str:
    """Counts of ten thousand or more are written in units of 万."""
    value = int(value or 0)
    if abs(value) >= 10000:
        return f"{value / 10000:.2f}万"
    return str(value)


def _load(raw: str) -> dict:
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("card must be a JSON object")
    return data


def _render(dynamic_card: dict, card: dict, ctype: int, vote: dict) -> list[Segment]:
    msg: list[Segment] = []
    kind = MSG_TYPE.get(ctype, "")
    dynamic_id = _get(dynamic_card, "desc", "dynamic_id_str")
    if ctype == 1:
        msg.append(
            text(_get(card, "user", "uname"), kind, "\n",
                 _get(card, "item", "content"), "\n", "转发的内容: \n")
        )
        origin = _load(_get(card, "origin"))
        msg.extend(card_to_message(dynamic_card, origin, _int(card, "item", "orig_type")))
    elif ctype == 2:
        msg.append(
            text(_get(card, "user", "name"), "在", _when(_get(card, "item", "upload_time", default=0)),
                 kind, "\n", _get(card, "item", "description"))
        )
        msg.extend(image(pic.get("img_src", "")) for pic in _get(card, "item", "pictures", default=[]))
    elif ctype == 4:
        msg.append(
            text(_get(card, "user", "uname"), "在", _when(_get(card, "item", "timestamp", default=0)),
                 kind, "\n", _get(card, "item", "content"), "\n")
        )
        if _get(dynamic_card, "extension", "vote"):
            msg.append(
                text("【投票】", _get(vote, "desc"), "\n",
                     "截止日期: ", _when(_get(vote, "endtime", default=0)), "\n",
                     "参与人数: ", _human_num(_get(vote, "join_num", default=0)), "\n",
                     "投票选项( 最多选择", _int(vote, "choice_cnt"), "项 )\n")
            )
            for option in _get(vote, "options", default=[]):
                msg.append(text("- ", _int(option, "idx"), ". ", _get(option, "desc"), "\n"))
                if _get(option, "img_url"):
                    msg.append(image(_get(option, "img_url")))
    elif ctype == 8:
        msg.append(
            text(_get(card, "owner", "name"), "在", _when(_get(card, "pubdate", default=0)),
                 kind, "\n", _get(card, "title"))
        )
        msg.append(image(_get(card, "pic")))
        msg.append(
            text(_get(card, "desc"), "\n", _get(card, "share_subtitle"), "\n",
                 "视频链接: ", _get(card, "short_link"), "\n")
        )
    elif ctype == 16:
        msg.append(
            text(_get(card, "user", "name"), "在", _when(_get(card, "item", "upload_time", default=0)),
                 kind, "\n", _get(card, "item", "description"))
        )
        msg.append(image(_get(card, "item", "cover", "default")))
    elif ctype == 64:
        msg.append(
            text(_get(card, "author", "name"), "在", _when(_get(card, "publish_time", default=0)),
                 kind, "\n", _get(card, "title"), "\n", _get(card, "summary"))
        )
        msg.extend(image(url) for url in _get(card, "image_urls", default=[]))
        if _int(card, "id"):
            msg.append(text("文章链接: https://www.bilibili.com/read/cv", _int(card, "id"), "\n"))
    elif ctype == 256:
        msg.append(
            text(_get(card, "upper"), "在", _when(_get(card, "ctime", default=0)),
                 kind, "\n", _get(card, "title"))
        )
        msg.append(image(_get(card, "cover")))
        msg.append(text(_get(card, "intro"), "\n"))
        if _int(card, "id"):
            msg.append(text("音频链接: https://www.bilibili.com/audio/au", _int(card, "id"), "\n"))
    elif ctype == 2048:
        msg.append(
            text(_get(card, "user", "uname"), kind, "\n",
                 _get(card, "vest", "content"), "\n",
                 _get(card, "sketch", "title"), "\n",
                 _get(card, "sketch", "desc_text"), "\n")
        )
        msg.append(image(_get(card, "sketch", "cover_url")))
        msg.append(text("分享链接: ", _get(card, "sketch", "target_url"), "\n"))
    elif ctype == 4308:
        info = _get(card, "live_play_info", default={})
        uname = _get(dynamic_card, "desc", "user_profile", "info", "uname")
        if uname:
            msg.append(text(uname, kind, "\n"))
        msg.append(image(_get(info, "cover")))
        msg.append(
            text("\n", _get(info, "title"), "\n", "房间号: ", _int(info, "room_id"), "\n",
                 "分区: ", _get(info, "parent_area_name"))
        )
        if _get(info, "parent_area_name") != _get(info, "area_name"):
            msg.append(text("-", _get(info, "area_name")))
        if _int(info, "live_status") == 0:
            msg.append(text("未开播 \n"))
        else:
            msg.append(text("直播中 ", _get(info, "watched_show"), "\n"))
        msg.append(text("直播链接: ", _get(info, "link")))
    else:
        msg.append(text("动态id: ", dynamic_id, "未知动态类型: ", ctype, "\n"))
    if dynamic_id:
        msg.append(text("动态链接: ", DYNAMIC_URL, dynamic_id))
    return msg


def dynamic_card_to_message(dynamic_card: dict) -> list[Segment]:
    """Build the message of a dynamic; raises ValueError on malformed card JSON."""
    card = _load(_get(dynamic_card, "card"))
    vote_raw = _get(dynamic_card, "extension", "vote")
    vote = _load(vote_raw) if vote_raw else {}
    return _render(dynamic_card, card, _int(dynamic_card, "desc", "type"), vote)


def card_to_message(dynamic_card: dict, card: dict, ctype: int) -> list[Segment]:
    """Build the message of an inner card of the given type.

    A vote is never decoded here: when the dynamic carries one, its fields read empty.
    """
    return _render(dynamic_card, card, ctype, {})


def article_card_to_message(card: dict, default_id: str) -> list[Segment]:
    """Build the message of an article."""
    msg = [image(url) for url in _get(card, "origin_image_urls", default=[])]
    msg.append(
        text("\n", _get(card, "title"), "\n", "UP主: ", _get(card, "author_name"), "\n",
             "阅读: ", _human_num(_get(card, "stats", "view", default=0)),
             " 评论: ", _human_num(_get(card, "stats", "reply", default=0)), "\n",
             ARTICLE_URL, default_id)
    )
    return msg


def live_card_to_message(card: dict) -> list[Segment]:
    """Build the message of a live room."""
    room = _get(card, "room_info", default={})
    short_id = _int(room, "short_id")
    room_id = _int(room, "room_id")
    msg = [image(_get(room, "keyframe"))]
    msg.append(
        text("\n", _get(room, "title"), "\n",
             "主播: ", _get(card, "anchor_info", "base_info", "uname"), "\n",
             "房间号: ", room_id, "\n")
    )
    if short_id:
        msg.append(text("短号: ", short_id, "\n"))
    msg.append(text("分区: ", _get(room, "parent_area_name")))
    if _get(room, "parent_area_name") != _get(room, "area_name"):
        msg.append(text("-", _get(room, "area_name")))
    if _int(room, "live_status") == 0:
        msg.append(text("未开播 \n"))
    else:
        msg.append(text("直播中 ", _human_num(_get(room, "online", default=0)), "人气\n"))
    msg.append(text("直播间链接: ", LIVE_URL, short_id if short_id else room_id))
    return msg


def video_card_to_message(card: dict, fans: int) -> list[Segment]:
    """Build the message of a video; ``fans`` is the uploader's follower count."""
    msg = [text("标题: ", _get(card, "title"), "\n")]
    if _int(card, "rights", "is_cooperation") == 1:
        for staff in _get(card, "staff", default=[]):
            msg.append(
                text(_get(staff, "title"), ": ", _get(staff, "name"),
                     " 粉丝: ", _human_num(_get(staff, "follower", default=0)), "\n")
            )
    else:
        msg.append(text("UP主: ", _get(card, "owner", "name"), " 粉丝: ", _human_num(fans), "\n"))
    stat = _get(card, "stat", default={})
    msg.append(
        text("播放: ", _human_num(_get(stat, "view", default=0)),
             " 弹幕: ", _human_num(_get(stat, "danmaku", default=0)))
    )
    msg.append(image(_get(card, "pic")))
    msg.append(
        text("\n点赞: ", _human_num(_get(stat, "like", default=0)),
             " 投币: ", _human_num(_get(stat, "coin", default=0)), "\n",
             "收藏: ", _human_num(_get(stat, "favorite", default=0)),
             " 分享: ", _human_num(_get(stat, "share", default=0)), "\n",
             VIDEO_URL, _get(card, "bvid"))
    )
    return msg