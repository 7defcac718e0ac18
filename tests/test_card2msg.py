import json
from datetime import datetime

import pytest

from zbplugins.card2msg import (
    article_card_to_message,
    card_to_message,
    dynamic_card_to_message,
    live_card_to_message,
    video_card_to_message,
)
from zbplugins.messages import image, text

TS = 1600000000


def when(ts):
    return datetime.fromtimestamp(ts).strftime("%Y-%m-%d %H:%M:%S")


def dyn(card, ctype, dynamic_id="", vote=None, uname=""):
    return {
        "card": json.dumps(card),
        "desc": {"type": ctype, "dynamic_id_str": dynamic_id,
                 "user_profile": {"info": {"uname": uname}}},
        "extension": {"vote": json.dumps(vote) if vote else ""},
    }


def test_type_2_pictures():
    card = {"user": {"name": "alice"},
            "item": {"upload_time": TS, "description": "hi",
                     "pictures": [{"img_src": "a.jpg"}, {"img_src": "b.jpg"}]}}
    assert dynamic_card_to_message(dyn(card, 2, "42")) == [
        text(f"alice在{when(TS)}有图营业\nhi"),
        image("a.jpg"),
        image("b.jpg"),
        text("动态链接: https://t.bilibili.com/42"),
    ]


def test_type_1_forward_renders_origin():
    origin = {"user": {"uname": "carol"}, "item": {"timestamp": TS, "content": "orig"}}
    card = {"user": {"uname": "bob"}, "item": {"content": "look", "orig_type": 4},
            "origin": json.dumps(origin)}
    link = text("动态链接: https://t.bilibili.com/7")
    assert dynamic_card_to_message(dyn(card, 1, "7")) == [
        text("bob转发了动态\nlook\n转发的内容: \n"),
        text(f"carol在{when(TS)}无图营业\norig\n"),
        link,
        link,
    ]


def test_type_4_with_vote():
    vote = {"desc": "poll", "endtime": TS, "join_num": 25000, "choice_cnt": 2,
            "options": [{"idx": 1, "desc": "yes", "img_url": "y.png"},
                        {"idx": 2, "desc": "no", "img_url": ""}]}
    card = {"user": {"uname": "dan"}, "item": {"timestamp": TS, "content": "c"}}
    assert dynamic_card_to_message(dyn(card, 4, vote=vote)) == [
        text(f"dan在{when(TS)}无图营业\nc\n"),
        text(f"【投票】poll\n截止日期: {when(TS)}\n参与人数: 2.50万\n投票选项( 最多选择2项 )\n"),
        text("- 1. yes\n"),
        image("y.png"),
        text("- 2. no\n"),
    ]


def test_card_to_message_ignores_vote_contents():
    card = {"user": {"uname": "dan"}, "item": {"timestamp": TS, "content": "c"}}
    dc = dyn(card, 4, vote={"desc": "poll", "join_num": 3})
    result = card_to_message(dc, card, 4)
    assert result[1] == text(f"【投票】\n截止日期: {when(0)}\n参与人数: 0\n投票选项( 最多选择0项 )\n")
    assert len(result) == 2


def test_type_8_video():
    card = {"owner": {"name": "eve"}, "pubdate": TS, "title": "T", "pic": "p.jpg",
            "desc": "D", "share_subtitle": "S", "short_link": "L"}
    assert dynamic_card_to_message(dyn(card, 8)) == [
        text(f"eve在{when(TS)}投稿了视频\nT"),
        image("p.jpg"),
        text("D\nS\n视频链接: L\n"),
    ]


def test_type_16_short_video():
    card = {"user": {"name": "f"}, "item": {"upload_time": TS, "description": "d",
                                           "cover": {"default": "c.jpg"}}}
    assert dynamic_card_to_message(dyn(card, 16)) == [
        text(f"f在{when(TS)}投稿了短视频\nd"),
        image("c.jpg"),
    ]


@pytest.mark.parametrize("article_id, link", [(0, []), (5, [text("文章链接: https://www.bilibili.com/read/cv5\n")])])
def test_type_64_article(article_id, link):
    card = {"author": {"name": "g"}, "publish_time": TS, "title": "T", "summary": "S",
            "image_urls": ["i.jpg"], "id": article_id}
    assert dynamic_card_to_message(dyn(card, 64)) == [
        text(f"g在{when(TS)}投稿了文章\nT\nS"),
        image("i.jpg"),
        *link,
    ]


def test_type_256_audio():
    card = {"upper": "h", "ctime": TS, "title": "T", "cover": "c.jpg", "intro": "I", "id": 9}
    assert dynamic_card_to_message(dyn(card, 256)) == [
        text(f"h在{when(TS)}投稿了音频\nT"),
        image("c.jpg"),
        text("I\n"),
        text("音频链接: https://www.bilibili.com/audio/au9\n"),
    ]


def test_type_2048_sketch():
    card = {"user": {"uname": "i"}, "vest": {"content": "v"},
            "sketch": {"title": "t", "desc_text": "d", "cover_url": "c.jpg", "target_url": "u"}}
    assert dynamic_card_to_message(dyn(card, 2048)) == [
        text("i发布了简报\nv\nt\nd\n"),
        image("c.jpg"),
        text("分享链接: u\n"),
    ]


def test_type_4308_live():
    card = {"live_play_info": {"cover": "c.jpg", "title": "T", "room_id": 100,
                               "parent_area_name": "P", "area_name": "A",
                               "live_status": 1, "watched_show": "50人看过", "link": "L"}}
    assert dynamic_card_to_message(dyn(card, 4308, uname="j")) == [
        text("j发布了直播\n"),
        image("c.jpg"),
        text("\nT\n房间号: 100\n分区: P"),
        text("-A"),
        text("直播中 50人看过\n"),
        text("直播链接: L"),
    ]


def test_unknown_type():
    assert dynamic_card_to_message(dyn({}, 999, "9")) == [
        text("动态id: 9未知动态类型: 999\n"),
        text("动态链接: https://t.bilibili.com/9"),
    ]


@pytest.mark.parametrize("raw", ["", "not json", "[1]"])
def test_malformed_card_raises(raw):
    dc = {"card": raw, "desc": {"type": 2}, "extension": {"vote": ""}}
    with pytest.raises(ValueError):
        dynamic_card_to_message(dc)


def test_article_card():
    card = {"origin_image_urls": ["a.jpg"], "title": "T", "author_name": "A",
            "stats": {"view": 12, "reply": 30000}}
    assert article_card_to_message(card, "17279244") == [
        image("a.jpg"),
        text("\nT\nUP主: A\n阅读: 12 评论: 3.00万\nhttps://www.bilibili.com/read/cv17279244"),
    ]


def test_live_card_with_short_id_online():
    card = {"room_info": {"keyframe": "k.jpg", "title": "T", "room_id": 83171, "short_id": 5,
                          "parent_area_name": "P", "area_name": "P",
                          "live_status": 1, "online": 20000},
            "anchor_info": {"base_info": {"uname": "U"}}}
    assert live_card_to_message(card) == [
        image("k.jpg"),
        text("\nT\n主播: U\n房间号: 83171\n"),
        text("短号: 5\n"),
        text("分区: P"),
        text("直播中 2.00万人气\n"),
        text("直播间链接: https://live.bilibili.com/5"),
    ]


def test_live_card_offline_without_short_id():
    card = {"room_info": {"keyframe": "k.jpg", "title": "T", "room_id": 83171,
                          "parent_area_name": "P", "area_name": "A", "live_status": 0},
            "anchor_info": {"base_info": {"uname": "U"}}}
    result = live_card_to_message(card)
    assert result[-3:] == [
        text("-A"),
        text("未开播 \n"),
        text("直播间链接: https://live.bilibili.com/83171"),
    ]


def test_video_card_single_owner():
    card = {"title": "T", "owner": {"name": "O"}, "rights": {"is_cooperation": 0},
            "stat": {"view": 999, "danmaku": 10000, "like": 1, "coin": 2, "favorite": 3, "share": 4},
            "pic": "p.jpg", "bvid": "BV1xx411c7mD"}
    assert video_card_to_message(card, 20000) == [
        text("标题: T\n"),
        text("UP主: O 粉丝: 2.00万\n"),
        text("播放: 999 弹幕: 1.00万"),
        image("p.jpg"),
        text("\n点赞: 1 投币: 2\n收藏: 3 分享: 4\nhttps://www.bilibili.com/video/BV1xx411c7mD"),
    ]


def test_video_card_cooperation_lists_staff():
    card = {"title": "T", "rights": {"is_cooperation": 1},
            "staff": [{"title": "UP主", "name": "a", "follower": 5},
                      {"title": "参演", "name": "b", "follower": 40000}]}
    result = video_card_to_message(card, 0)
    assert result[1:3] == [text("UP主: a 粉丝: 5\n"), text("参演: b 粉丝: 4.00万\n")]
    assert len(result) == 6