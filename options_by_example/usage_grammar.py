# Options By Example - (c) 2025 rtj.dev LLC - MIT Licensed
"""
This module implements `UsageGrammar`, which turns a human-readable usage text
into a `Specification`.

The usage text is the same text a program prints for `--help`, for example:

    Establishes network connection to designated host and port.

    Usage: connect [options] [mode] host port

    Options:
      -s, --secure        Establish a secure connection (SSL/TSL)
      -v, --verbose       Enable verbose output for detailed information
      -r, --retries NUM   Number of connection retries (default 3)
      -t, --timeout NUM   Set connection timeout in seconds

Two things are extracted:

1. Positional arguments from the `Usage:` line. `[mode]` is optional, `host`
   is required, `files...` (or `files ...`) collects a run of tokens.
2. Options from every line that starts with a flag, plus bracketed flags on
   the usage line itself (`Usage: $0 [--foo] [--bar NUM]`). A word right after
   the last flag names the option's value; `(default VALUE)` anywhere later on
   the line sets its default.

Usage:
    spec = UsageGrammar().parse(text)
"""
from __future__ import annotations

import re

from options_by_example.exceptions import (
    AmbiguousArityError,
    InvalidTokenError,
    MissingUsageLineError,
    MultipleVarargsError,
)
from options_by_example.lexer import (
    Token,
    TokenKind,
    tokenize_option_line,
    tokenize_usage_line,
)
from options_by_example.logger import logger
from options_by_example.specification import (
    ArgumentArity,
    OptionBinding,
    Specification,
)
from options_by_example.utils import canonical_name

USAGE_MARKER = "Usage:"

_OPTION_LINE = re.compile(r"^\s*--?\w")
_SHORT_FLAG = re.compile(r"^-(\w)$")
_LONG_FLAG = re.compile(r"^--([\w-]+)$")


class UsageGrammar:
    """
    Parser for usage texts.

    A `UsageGrammar` holds no state between calls; `parse()` builds a new
    `Specification` every time and never mutates it afterwards.
    """

    def parse(self, text: str) -> Specification:
        """
        Parse a usage text into a `Specification`.

        Raises:
            MissingUsageLineError: No `Usage:` line, or no program name on it.
            InvalidTokenError: A usage line token matches no known shape.
            MultipleVarargsError: More than one dotted argument.
            AmbiguousArityError: Optional and dotted arguments together.
        """
        tokens = self._usage_tokens(text)
        positionals, inline_options = self._classify(tokens)

        options: dict[str, OptionBinding] = {}
        defaults: dict[str, str] = {}
        declarations = inline_options + [
            line for line in text.splitlines() if _OPTION_LINE.match(line)
        ]
        for declaration in declarations:
            self._declare_option(declaration, options, defaults)

        spec = Specification(
            message=text,
            positionals=tuple(positionals.items()),
            options=options,
            defaults=defaults,
        )
        logger.debug("Parsed usage text into %s", spec)
        return spec

    def _usage_tokens(self, text: str) -> list[Token]:
        for line in text.splitlines():
            if USAGE_MARKER in line:
                _, _, rest = line.partition(USAGE_MARKER)
                tokens = tokenize_usage_line(rest)
                if not tokens:
                    break
                tokens.pop(0)
                if tokens and tokens[0].kind is TokenKind.OPTIONS_PLACEHOLDER:
                    tokens.pop(0)
                return tokens
        raise MissingUsageLineError()

    def _classify(
        self, tokens: list[Token]
    ) -> tuple[dict[str, ArgumentArity], list[str]]:
        positionals: dict[str, ArgumentArity] = {}
        inline_options: list[str] = []
        vararg_token: str | None = None
        optional_token: str | None = None

        for index, token in enumerate(tokens):
            following = tokens[index + 1] if index + 1 < len(tokens) else None
            if token.kind is TokenKind.OPTION_GROUP:
                inline_options.append(token.value)
                continue
            if token.kind is TokenKind.ELLIPSIS:
                previous = tokens[index - 1] if index > 0 else None
                if previous is None or previous.kind is not TokenKind.WORD:
                    raise InvalidTokenError(token.text)
                continue

            if token.kind is TokenKind.OPTIONAL:
                arity = ArgumentArity.OPTIONAL
                optional_token = optional_token or token.text
            elif token.kind is TokenKind.VARARG or (
                token.kind is TokenKind.WORD
                and following is not None
                and following.kind is TokenKind.ELLIPSIS
            ):
                arity = ArgumentArity.VARARG
                if vararg_token is not None:
                    raise MultipleVarargsError(token.text)
                vararg_token = token.text
            elif token.kind is TokenKind.WORD:
                arity = ArgumentArity.REQUIRED
            else:
                raise InvalidTokenError(token.text)

            name = canonical_name(token.value)
            if name in positionals:
                raise InvalidTokenError(token.text)
            positionals[name] = arity

        if vararg_token is not None and optional_token is not None:
            raise AmbiguousArityError(optional_token)
        return positionals, inline_options

    def _declare_option(
        self,
        declaration: str,
        options: dict[str, OptionBinding],
        defaults: dict[str, str],
    ) -> None:
        tokens = tokenize_option_line(declaration)
        flags: list[str] = []
        placeholder: str | None = None

        def take_flag(pattern: re.Pattern) -> bool:
            nonlocal placeholder
            if not tokens or tokens[0].kind is not TokenKind.FLAG:
                return False
            flag, _, value = tokens[0].text.partition(" ")
            if not pattern.match(flag):
                return False
            tokens.pop(0)
            flags.append(flag)
            placeholder = value or placeholder
            return True

        if take_flag(_SHORT_FLAG) and tokens and tokens[0].kind is TokenKind.COMMA:
            tokens.pop(0)
        take_flag(_LONG_FLAG)

        if not flags:
            logger.debug("Ignoring line without option flags: %r", declaration)
            return

        name = canonical_name(flags[-1].lstrip("-"))
        binding = OptionBinding(name, placeholder)
        for flag in flags:
            options[flag] = binding

        default = next(
            (token.value for token in tokens if token.kind is TokenKind.DEFAULT), None
        )
        if default is not None:
            defaults[name] = default
        logger.debug("Declared option %s for flags %s", binding, flags)
