import pytest

from zbplugins import ahsai


def test_parse_simple_command():
    assert ahsai.parse_command("使琴葉茜说こんにちは") == ("琴葉茜", "こんにちは")


def test_parse_prefers_longest_name():
    assert ahsai.parse_command("使A说B说c") == ("A说B", "c")


def test_parse_rejects_symbols_outside_punctuation():
    assert ahsai.parse_command("使a说abc$") is None


def test_parse_accepts_punctuation():
    assert ahsai.parse_command("使x说hello, world!") == ("x", "hello, world!")


def test_parse_requires_text_and_prefix():
    assert ahsai.parse_command("使琴葉茜说") is None
    assert ahsai.parse_command("琴葉茜说hi") is None


def test_parse_name_too_long():
    assert ahsai.parse_command("使" + "a" * 11 + "说hi") is None


def test_names_are_sorted_and_known():
    assert list(ahsai.NAMES) == sorted(ahsai.NAMES)
    assert all(ahsai.is_known_name(n) for n in ahsai.NAMES)
    assert not ahsai.is_known_name("nobody")


def test_menu_lists_every_name():
    menu = ahsai.name_menu()
    assert menu.startswith(ahsai.MENU_PROMPT)
    for i, name in enumerate(ahsai.NAMES):
        assert f"{i}. {name}\n" in menu


def test_name_by_index_round_trip():
    for i, name in enumerate(ahsai.NAMES):
        assert ahsai.name_by_index(str(i)) == name


def test_name_by_index_non_number_picks_first():
    assert ahsai.name_by_index("x") == ahsai.NAMES[0]


def test_name_by_index_out_of_range():
    with pytest.raises(ValueError):
        ahsai.name_by_index(str(len(ahsai.NAMES)))
    with pytest.raises(ValueError):
        ahsai.name_by_index("-1")