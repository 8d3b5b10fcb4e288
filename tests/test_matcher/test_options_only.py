import pytest

from options_by_example import ArgumentMatcher, ShowUsage, UsageGrammar
from options_by_example.exceptions import (
    TooManyArgumentsError,
    UnexpectedArgumentsBeforeOptionError,
    UnknownOptionError,
)


@pytest.fixture
def matcher():
    return ArgumentMatcher(UsageGrammar().parse("Usage: $0 [--foo] [--bar ARG]"))


def test_empty_command_line(matcher):
    result = matcher.parse([])

    assert result.options == {}
    assert result.arguments == {}


def test_both_options(matcher):
    result = matcher.parse(["--foo", "--bar", "5309"])

    assert set(result.options) == {"foo", "bar"}
    assert result.arguments == {"bar": "5309"}


def test_one_option(matcher):
    result = matcher.parse(["--foo"])

    assert result.options == {"foo": True}
    assert result.arguments == {}


def test_unexpected_argument(matcher):
    with pytest.raises(TooManyArgumentsError, match="Expected 0 arguments, but received too many"):
        matcher.parse(["lorem"])


def test_unexpected_leading_argument(matcher):
    with pytest.raises(UnexpectedArgumentsBeforeOptionError) as info:
        matcher.parse(["gibberish", "--foo"])

    assert str(info.value) == (
        "Unexpected arguments found before option '--foo', "
        "please provide all options before arguments"
    )


def test_unexpected_intermediate_argument(matcher):
    with pytest.raises(UnexpectedArgumentsBeforeOptionError, match="option '--bar'"):
        matcher.parse(["--foo", "lorem", "--bar"])


def test_unexpected_trailing_argument(matcher):
    with pytest.raises(TooManyArgumentsError, match="Expected 0 arguments"):
        matcher.parse(["--foo", "lorem"])


def test_unknown_option_reported_first(matcher):
    with pytest.raises(UnknownOptionError, match="'--qux'"):
        matcher.parse(["--foo", "--qux", "--bar"])


def test_help_option(matcher):
    with pytest.raises(ShowUsage):
        matcher.parse(["--foo", "--help", "--bar"])


def test_short_help_option(matcher):
    with pytest.raises(ShowUsage):
        matcher.parse(["-h"])
