# Options By Example - (c) 2025 rtj.dev LLC - MIT Licensed
"""
Contains value coercion utilities for typed option values.

Options whose placeholder is `NUM`, `DATE` or `TIME` have their value converted
before it is stored in the `MatchResult`. Date and time parsing is delegated to
`dateutil`, which accepts the common ISO and human formats.

Functions:
- coerce_integer: Convert a string to an int.
- coerce_date: Convert a string to a `datetime.date`.
- coerce_time: Convert a string to a `datetime.datetime` (today's date if omitted).
- coerce_value: Dispatch on a `ValueKind`.
"""
from datetime import date, datetime
from typing import Any

from dateutil import parser as date_parser

from options_by_example.specification import ValueKind


def coerce_integer(value: str) -> int:
    """
    Convert a string to an integer.

    Decimal is tried first so that `010` stays ten; prefixed literals such as
    `0x1f` and `0b101` are accepted as a fallback.

    Raises:
        ValueError: If the string is not an integer literal.
    """
    try:
        return int(value, 10)
    except ValueError:
        return int(value, 0)


def coerce_date(value: str) -> date:
    """
    Convert a string to a date.

    Raises:
        ValueError: If the string cannot be parsed as a date.
    """
    try:
        return date_parser.parse(value).date()
    except (ValueError, OverflowError) as error:
        raise ValueError(f"Value '{value}' could not be parsed as a date") from error


def coerce_time(value: str) -> datetime:
    """
    Convert a string to a timestamp.

    Missing date components default to today, so `14:41` is today at 14:41.

    Raises:
        ValueError: If the string cannot be parsed as a timestamp.
    """
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError) as error:
        raise ValueError(
            f"Value '{value}' could not be parsed as a timestamp"
        ) from error


def coerce_value(value: str, kind: ValueKind) -> Any:
    """
    Convert an option value according to its `ValueKind`.

    Plain values are returned unchanged.

    Raises:
        ValueError: If conversion fails.
    """
    if kind is ValueKind.INTEGER:
        return coerce_integer(value)
    if kind is ValueKind.DATE:
        return coerce_date(value)
    if kind is ValueKind.TIME:
        return coerce_time(value)
    return value
