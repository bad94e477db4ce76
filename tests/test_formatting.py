import pytest

from formatting import clamp, format_currency, format_percentage, parse_currency


def test_format_currency():
    assert format_currency(1234.4) == "$1,234"
    assert format_currency(0) == "$0"
    assert format_currency(-50) == "-$50"
    assert format_currency(1_000_000) == "$1,000,000"


def test_format_percentage():
    assert format_percentage(0.07) == "7%"
    assert format_percentage(0.5) == "50%"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("$1,234.50", 1234.5),
        ("100000", 100_000.0),
        (2500, 2500.0),
        ("-$20", -20.0),
        ("", None),
        (None, None),
        ("abc", None),
        ("1.2.3", 1.2),
        ("$3k", 3.0),
        ("12-5", 12.0),
        (".5", 0.5),
        ("--5", None),
        ("-", None),
    ],
)
def test_parse_currency(raw, expected):
    assert parse_currency(raw) == expected


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-5, 0, 10) == 0
    assert clamp(50, 0, 10) == 10
