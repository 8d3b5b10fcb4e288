# Options By Example - (c) 2025 rtj.dev LLC - MIT Licensed
"""
Tokenizers for the two line shapes found in a usage text.

The usage line:

    Usage: connect [options] [-q] [mode] host port files...

and option declaration lines:

    -r, --retries NUM   Number of connection retries (default 3)

Each tokenizer is a single regular expression of named alternatives walked with
`re.finditer`; the name of the alternative that matched becomes the token kind.
Nothing is inferred from capture groups beyond the token's own text and value.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

WORD = r"\w[\w-]*"


class TokenKind(Enum):
    """Kinds of tokens produced by the lexers."""

    # usage line
    OPTIONS_PLACEHOLDER = "options_placeholder"
    OPTION_GROUP = "option_group"
    OPTIONAL = "optional"
    VARARG = "vararg"
    ELLIPSIS = "ellipsis"
    WORD = "word"
    INVALID = "invalid"
    # option line
    FLAG = "flag"
    COMMA = "comma"
    DEFAULT = "default"
    TEXT = "text"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """
    A lexed token.

    Attributes:
        kind (TokenKind): What the token is.
        text (str): The token exactly as written.
        value (str): The meaningful part, e.g. `mode` for `[mode]`,
            `files` for `files...`, `3` for `(default 3)`.
    """

    kind: TokenKind
    text: str
    value: str


_USAGE_LINE = re.compile(
    rf"""
    (?P<options_placeholder>\[options\](?=\s|$))
    |(?P<option_group>\[--?\w[^\]]*\](?=\s|$))
    |(?P<optional>\[{WORD}\](?=\s|$))
    |(?P<vararg>{WORD}\.\.\.(?=\s|$))
    |(?P<ellipsis>\.\.\.(?=\s|$))
    |(?P<word>{WORD}(?=\s|$))
    |(?P<invalid>\[[^\]]*\]\S*|\S+)
    """,
    re.VERBOSE,
)

_OPTION_LINE = re.compile(
    rf"""
    (?P<flag>--?\w[\w-]*(?:\ \w+)?(?=[\s,]|$))
    |(?P<comma>,)
    |(?P<default>\(default:?\ [^)\s]+\))
    |(?P<text>\S+)
    """,
    re.VERBOSE,
)

_DEFAULT_VALUE = re.compile(r"^\(default:? ([^)\s]+)\)$")


def _usage_value(kind: TokenKind, text: str) -> str:
    if kind in (TokenKind.OPTIONAL, TokenKind.OPTION_GROUP):
        return text[1:-1]
    if kind is TokenKind.VARARG:
        return text[:-3]
    return text


def tokenize_usage_line(line: str) -> list[Token]:
    """
    Split the part of a usage line after `Usage:` into tokens.

    The first token is the program name and is always returned as a `WORD`
    (it may be `$0` or any other non-blank text).
    """
    tokens: list[Token] = []
    for match in _USAGE_LINE.finditer(line):
        text = match.group()
        kind = TokenKind(match.lastgroup)
        if not tokens:
            kind = TokenKind.WORD
        tokens.append(Token(kind, text, _usage_value(kind, text)))
    return tokens


def tokenize_option_line(line: str) -> list[Token]:
    """
    Split an option declaration line into flag, comma, default and text tokens.

    A flag token swallows a placeholder only when exactly one space separates
    them (`--retries NUM`); descriptions are expected to be set apart by two
    or more spaces.
    """
    tokens: list[Token] = []
    for match in _OPTION_LINE.finditer(line.strip()):
        text = match.group()
        kind = TokenKind(match.lastgroup)
        value = text
        if kind is TokenKind.DEFAULT:
            default = _DEFAULT_VALUE.match(text)
            assert default is not None, "default token must match its own pattern"
            value = default.group(1)
        tokens.append(Token(kind, text, value))
    return tokens
