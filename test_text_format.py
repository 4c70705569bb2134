"""Tests for iCalendar text escaping, folding and datetime formatting."""

from datetime import date, datetime

import pytest
import pytz

from icalfeed.core.text_format import (
    escape_text,
    format_datetime,
    format_text,
    wrap_lines,
)
from icalfeed.core.timezone_utils import to_utc
from icalfeed.exceptions import TimeConversionError


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Hello, World!", "Hello\\, World!"),
        ("Semi;colon", "Semi\\;colon"),
        ("Back\\slash", "Back\\\\slash"),
        ("\\,", "\\\\\\,"),
        ("a,b;c\\d", "a\\,b\\;c\\\\d"),
        ("Mixed's/Women's Doubles: final", "Mixed's/Women's Doubles: final"),
        ("", ""),
    ],
)
def test_escape_text(raw, expected) -> None:
    assert escape_text(raw) == expected


def test_escape_text_is_one_way() -> None:
    once = escape_text("a,b")
    assert once == "a\\,b"
    assert escape_text(once) == "a\\\\\\,b"


def test_format_text_short_value_unchanged() -> None:
    assert format_text("Room A") == "Room A"
    assert format_text("  padded  ") == "  padded  "


def test_format_text_none_is_empty() -> None:
    assert format_text(None) == ""


def test_format_text_keeps_literal_newline_escape() -> None:
    assert format_text("Line one\\nLine two") == "Line one\\n\r\n Line two"


def test_format_text_literal_newline_keeps_following_space() -> None:
    assert format_text("Line one\\n indented") == "Line one\\n\r\n  indented"


def test_format_text_escaped_backslash_before_n() -> None:
    # An escaped backslash followed by n is still a literal backslash-n
    assert format_text("C:\\\\new") == "C:\\\\\\n\r\n ew"


def test_format_text_folds_real_newlines() -> None:
    assert format_text("One\nTwo") == "One\r\n Two"
    assert format_text("One\r\nTwo") == "One\r\n Two"


@pytest.mark.parametrize("raw", ["First\n\n\nSecond", "First\r\n\r\n\r\nSecond", "First\n\r\n\nSecond"])
def test_format_text_collapses_blank_lines(raw) -> None:
    formatted = format_text(raw)
    assert formatted == "First\r\n Second"
    assert all(part.strip() for part in formatted.split("\r\n"))


def test_format_text_wraps_at_74_characters() -> None:
    raw = "The quick brown fox jumps over the lazy dog, again and again; " * 6
    formatted = format_text(raw)
    segments = formatted.split("\r\n ")

    assert len(segments) > 1
    for segment in segments:
        assert len(segment) <= 74
        assert not segment.startswith(" ")
    # Only whitespace was consumed by the wrap
    assert "".join(segments).replace(" ", "") == escape_text(raw).replace(" ", "")


def test_format_text_continuations_start_with_one_space() -> None:
    formatted = format_text("word " * 100)
    lines = formatted.split("\r\n")
    for line in lines[1:]:
        assert line.startswith(" ")
        assert not line.startswith("  ")


def test_format_text_never_breaks_long_words() -> None:
    long_word = "x" * 100
    formatted = format_text(f"before {long_word} after")
    assert formatted.split("\r\n ") == ["before", long_word, "after"]


def test_format_text_escape_inside_wrapped_value() -> None:
    formatted = format_text(("alpha, beta; " * 10).strip())
    unfolded = formatted.replace("\r\n ", " ")
    assert unfolded == ("alpha\\, beta\\; " * 10).strip()


def test_wrap_lines_custom_width() -> None:
    assert wrap_lines("aaa bbb ccc", width=7) == ["aaa bbb", "ccc"]
    assert wrap_lines("short\nlines", width=7) == ["short", "lines"]


def test_format_text_unicode() -> None:
    assert format_text("Café, Zürich") == "Café\\, Zürich"


@pytest.mark.parametrize(
    "value, expected",
    [
        (1710495000, "20240315T093000Z"),
        (1710495000.75, "20240315T093000Z"),
        ("1710495000", "20240315T093000Z"),
        (0, "19700101T000000Z"),
        (datetime(2024, 3, 15, 9, 30), "20240315T093000Z"),
        (pytz.timezone("America/New_York").localize(datetime(2024, 3, 15, 5, 30)), "20240315T093000Z"),
        ("2024-03-15T09:30:00+01:00", "20240315T083000Z"),
        ("2024-03-15 09:30", "20240315T093000Z"),
        (date(2024, 3, 15), "20240315T000000Z"),
        (datetime(999, 1, 2, 3, 4, 5), "09990102T030405Z"),
    ],
)
def test_format_datetime(value, expected) -> None:
    assert format_datetime(value) == expected


@pytest.mark.parametrize("value", ["not a date", True, None, [], 10 ** 20])
def test_to_utc_rejects_bad_values(value) -> None:
    with pytest.raises(TimeConversionError) as excinfo:
        to_utc(value)
    assert excinfo.value.value == value


def test_to_utc_returns_aware_utc() -> None:
    converted = to_utc(datetime(2024, 3, 15, 9, 30))
    assert converted.tzinfo is not None
    assert converted.utcoffset().total_seconds() == 0
