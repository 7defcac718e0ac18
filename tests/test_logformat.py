import logging

from zbplugins.logformat import (
    COLOR_DEBUG,
    COLOR_ERROR,
    COLOR_INFO,
    COLOR_RESET,
    COLOR_WARN,
    ColorFormatter,
    level_color,
)


def _record(level, msg, *args):
    return logging.LogRecord("t", level, __file__, 1, msg, args, None)


def test_warning_record_layout():
    out = ColorFormatter().format(_record(logging.WARNING, "hello"))
    assert out.startswith(COLOR_WARN)
    assert out.endswith(COLOR_RESET)
    assert out[len(COLOR_WARN):-len(COLOR_RESET)] == "[WARNING] hello \n"


def test_message_arguments_are_applied():
    out = ColorFormatter().format(_record(logging.INFO, "a %s b", "x"))
    assert "a x b" in out
    assert out.startswith(COLOR_INFO)


def test_level_colors():
    assert level_color(logging.ERROR) == COLOR_ERROR
    assert level_color(logging.DEBUG) == COLOR_DEBUG
    assert level_color(logging.INFO) == COLOR_INFO


def test_unknown_level_uses_info_color():
    assert level_color(12345) == COLOR_INFO


def test_works_with_handler_output():
    record = _record(logging.ERROR, "boom")
    out = ColorFormatter().format(record)
    assert "[ERROR] boom" in out
    assert out.count(COLOR_RESET) == 1