import pytest

from zbplugins.chrev import COMMAND, flip


def test_flip_sentence():
    assert flip("I love you") == "noʎ ǝʌol I"


def test_flip_reverses_order():
    assert flip("ab") == "qɐ"


@pytest.mark.parametrize("value", ["", "abc", "Hello World", "XYZ xyz"])
def test_length_kept(value):
    assert len(flip(value)) == len(value)


def test_spaces_stay_in_place_after_reversal():
    out = flip("a b c")
    assert [i for i, ch in enumerate(out) if ch == " "] == [1, 3]


def test_unmapped_character():
    assert flip("\t") == "\x00"


def test_command_pattern():
    match = COMMAND.match("翻转 Hi there")
    assert match is not None
    assert match.group(1) == "Hi there"
    assert COMMAND.match("翻转 123") is None