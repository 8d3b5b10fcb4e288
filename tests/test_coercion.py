from datetime import date, datetime

import pytest

from options_by_example.coercion import (
    coerce_date,
    coerce_integer,
    coerce_time,
    coerce_value,
)
from options_by_example.specification import ValueKind


@pytest.mark.parametrize(
    "value, expected",
    [
        ("42", 42),
        ("-7", -7),
        ("010", 10),
        ("1_000", 1000),
        ("0x1f", 31),
        ("0b101", 5),
    ],
)
def test_coerce_integer(value, expected):
    assert coerce_integer(value) == expected


@pytest.mark.parametrize("value", ["", "foo", "4.2", "0xzz"])
def test_coerce_integer_invalid(value):
    with pytest.raises(ValueError):
        coerce_integer(value)


def test_coerce_date():
    assert coerce_date("1983-09-12") == date(1983, 9, 12)
    assert coerce_date("12 Sep 1983") == date(1983, 9, 12)

    with pytest.raises(ValueError, match="could not be parsed as a date"):
        coerce_date("someday")


def test_coerce_time():
    value = coerce_time("2024-03-01 14:41:05")

    assert value == datetime(2024, 3, 1, 14, 41, 5)

    with pytest.raises(ValueError, match="could not be parsed as a timestamp"):
        coerce_time("")


def test_coerce_value_dispatch():
    assert coerce_value("5", ValueKind.INTEGER) == 5
    assert coerce_value("5", ValueKind.PLAIN) == "5"
    assert coerce_value("1983-09-12", ValueKind.DATE) == date(1983, 9, 12)
    assert isinstance(coerce_value("14:41", ValueKind.TIME), datetime)


def test_value_kind_from_placeholder():
    assert ValueKind.from_placeholder("NUM") is ValueKind.INTEGER
    assert ValueKind.from_placeholder("DATE") is ValueKind.DATE
    assert ValueKind.from_placeholder("TIME") is ValueKind.TIME
    assert ValueKind.from_placeholder("num") is ValueKind.PLAIN
    assert ValueKind.INTEGER.description == "an integer value"
