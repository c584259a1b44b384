import logging
import time

from s25util.mytime import current_tick, current_time, format_time

TIMESTAMP = 1_600_000_000


def test_current_time_close_to_system_time():
    assert abs(current_time() - time.time()) < 5


def test_current_tick_is_monotonic():
    first = current_tick()
    second = current_tick()
    assert second >= first


def test_format_date_and_time():
    local = time.localtime(TIMESTAMP)
    assert format_time("%Y-%m-%d", TIMESTAMP) == time.strftime("%Y-%m-%d", local)
    assert format_time("%H:%i:%s", TIMESTAMP) == time.strftime("%H:%M:%S", local)


def test_literal_text_and_percent():
    assert format_time("at 100%%", TIMESTAMP) == "at 100%"
    assert format_time("plain", TIMESTAMP) == "plain"


def test_invalid_specifier_keeps_character(caplog):
    with caplog.at_level(logging.WARNING):
        assert format_time("a%qb", TIMESTAMP) == "aqb"
    assert "Invalid format string" in caplog.text


def test_trailing_percent_is_dropped(caplog):
    with caplog.at_level(logging.WARNING):
        assert format_time("x%", TIMESTAMP) == "x"
    assert "Invalid format string" in caplog.text


def test_default_timestamp_is_now():
    assert format_time("%Y") == time.strftime("%Y")


def test_unrepresentable_timestamp_gives_empty_string():
    assert format_time("%Y", 10**30) == ""