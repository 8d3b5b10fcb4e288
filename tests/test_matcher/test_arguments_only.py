import pytest

from options_by_example import ArgumentMatcher, ShowUsage, UsageGrammar
from options_by_example.exceptions import (
    TooFewArgumentsError,
    TooManyArgumentsError,
    UnknownOptionError,
)


def matcher_for(text):
    return ArgumentMatcher(UsageGrammar().parse(text))


@pytest.fixture
def matcher():
    return matcher_for("Usage: $0 source dest")


def test_example_arguments(matcher):
    result = matcher.parse(["80", "443"])

    assert result.options == {}
    assert result.arguments == {"source": "80", "dest": "443"}


def test_help_after_unknown_options(matcher):
    with pytest.raises(ShowUsage):
        matcher.parse(["--foo", "--bar", "whatever", "--help"])


@pytest.mark.parametrize(
    "argv, message",
    [
        ([], "Expected 2 required arguments, but received none"),
        (["80"], "Expected 2 required arguments, but received only one"),
    ],
)
def test_too_few_arguments(matcher, argv, message):
    with pytest.raises(TooFewArgumentsError) as info:
        matcher.parse(argv)

    assert str(info.value) == message
    assert info.value.token is None


def test_too_few_of_many():
    with pytest.raises(TooFewArgumentsError) as info:
        matcher_for("Usage: $0 a b c d").parse(["1", "2"])

    assert str(info.value) == "Expected 4 required arguments, but received too few"


def test_too_many_arguments(matcher):
    with pytest.raises(TooManyArgumentsError) as info:
        matcher.parse(["80", "443", "5309"])

    assert str(info.value) == "Expected 2 arguments, but received too many"
    assert (info.value.minimum, info.value.maximum) == (2, 2)


@pytest.mark.parametrize("argv", [["--verbose", "80", "443"], ["80", "443", "--verbose"]])
def test_unknown_option(matcher, argv):
    with pytest.raises(UnknownOptionError, match="Found unknown option '--verbose'"):
        matcher.parse(argv)


def test_lone_dash_is_an_unknown_option(matcher):
    with pytest.raises(UnknownOptionError, match="Found unknown option '-'"):
        matcher.parse(["-", "443"])


def test_optional_arguments_fill_from_the_front():
    matcher = matcher_for("Usage: $0 [first] [second] last")

    assert matcher.parse(["z"]).arguments == {"last": "z"}
    assert matcher.parse(["x", "z"]).arguments == {"first": "x", "last": "z"}
    assert matcher.parse(["x", "y", "z"]).arguments == {
        "first": "x",
        "second": "y",
        "last": "z",
    }


def test_required_arguments_take_the_tail_in_declared_order():
    matcher = matcher_for("Usage: $0 host [mode] port")

    result = matcher.parse(["passive", "example.com", "21"])

    assert result.arguments == {"mode": "passive", "host": "example.com", "port": "21"}
