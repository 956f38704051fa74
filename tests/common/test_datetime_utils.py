import pytest

from src.driver_payroll.driver_payroll.common.datetime_utils import (
    format_seconds,
    parse_iso_date,
    parse_clock_seconds,
    parse_month,
    parse_seconds,
    try_parse_seconds,
)
from src.driver_payroll.driver_payroll.core.exceptions import InvalidFormatError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("8:00:00 am", 8 * 3600),
        ("12:00:00 am", 0),
        ("12:30:00 pm", 12 * 3600 + 30 * 60),
        ("5:00:00 pm", 17 * 3600),
        ("11:59:59 pm", 86399),
        ("  6:01:30 PM ", 18 * 3600 + 90),
        ("36:00:00", 36 * 3600),
        ("0:05:07", 307),
    ],
)
def test_parse_seconds(text, expected):
    assert parse_seconds(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "8:00 am", "8:61:00", "13:00:00 pm", "0:10:00 am", "8:00:00 xm", "8:00:00 am pm", "²:00:00", "8:٣0:00"])
def test_parse_seconds_rejects_malformed(text):
    result = try_parse_seconds(text)
    assert not result.ok
    with pytest.raises(InvalidFormatError):
        parse_seconds(text)


def test_try_parse_rejects_non_string():
    assert not try_parse_seconds(None).ok


def test_format_seconds():
    assert format_seconds(0) == "0:00:00"
    assert format_seconds(3661) == "1:01:01"
    assert format_seconds(-5) == "0:00:00"
    assert format_seconds(129600) == "36:00:00"


@pytest.mark.parametrize("text", ["8:00:00 am", "12:00:00 am", "11:05:09 PM", "172:00:00", "0:00:00"])
def test_codec_is_idempotent(text):
    once = format_seconds(parse_seconds(text))
    assert format_seconds(parse_seconds(once)) == once


def test_parse_month_accepts_int_and_strings():
    assert parse_month(3) == 3
    assert parse_month("03") == 3
    assert parse_month("12") == 12


@pytest.mark.parametrize("value", [0, 13, "abc", "003", True, "", "²"])
def test_parse_month_rejects(value):
    with pytest.raises(InvalidFormatError):
        parse_month(value)


def test_parse_iso_date_rejects_bad_date():
    with pytest.raises(InvalidFormatError):
        parse_iso_date("2025-13-01")


def test_parse_clock_seconds_stays_within_one_day():
    assert parse_clock_seconds("23:59:59") == 86399
    assert parse_clock_seconds("11:59:59 pm") == 86399
    for text in ("24:00:00", "30:00:00"):
        with pytest.raises(InvalidFormatError):
            parse_clock_seconds(text)
