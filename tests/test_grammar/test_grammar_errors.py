import pytest

from options_by_example import ErrorKind, UsageError, UsageGrammar
from options_by_example.exceptions import (
    AmbiguousArityError,
    InvalidTokenError,
    MissingUsageLineError,
    MultipleVarargsError,
)


def parse_spec(text):
    return UsageGrammar().parse(text)


def test_missing_usage_line():
    with pytest.raises(MissingUsageLineError, match="Expected usage string, got none") as info:
        parse_spec("Options:\n  -v, --verbose   Talk more\n")

    assert info.value.kind is ErrorKind.MISSING_USAGE_LINE


def test_usage_line_without_program():
    with pytest.raises(MissingUsageLineError):
        parse_spec("Usage:   \n")


@pytest.mark.parametrize(
    "text, token",
    [
        ("Usage: command arg ^^^ arg", "^^^"),
        ("Usage: command [foo bar]", "[foo bar]"),
        ("Usage: command [--foo", "[--foo"),
        ("Usage: command host,port", "host,port"),
        ("Usage: command ... files", "..."),
    ],
)
def test_invalid_tokens(text, token):
    with pytest.raises(InvalidTokenError) as info:
        parse_spec(text)

    assert info.value.token == token
    assert str(info.value) == f"Found invalid usage token '{token}'"
    assert isinstance(info.value, UsageError)


@pytest.mark.parametrize(
    "text, token",
    [
        ("Usage: $0 src src", "src"),
        ("Usage: $0 src-dir src_dir", "src_dir"),
        ("Usage: $0 [mode] Mode", "Mode"),
    ],
)
def test_duplicate_argument_names(text, token):
    with pytest.raises(InvalidTokenError) as info:
        parse_spec(text)

    assert info.value.token == token


def test_multiple_dotted_arguments():
    with pytest.raises(MultipleVarargsError, match="Found more than one dotted argument"):
        parse_spec("Usage: merge sources... files...")

    with pytest.raises(MultipleVarargsError):
        parse_spec("Usage: merge sources ... files...")


def test_optional_and_dotted_arguments():
    with pytest.raises(
        AmbiguousArityError, match="Found both optional and dotted arguments"
    ) as info:
        parse_spec("Usage: copy [mode] files... dest")

    assert info.value.kind is ErrorKind.AMBIGUOUS_ARITY
    assert info.value.token == "[mode]"
