# Options By Example - (c) 2025 rtj.dev LLC - MIT Licensed
"""
This module implements `ArgumentMatcher`, which matches an argument list
against a `Specification` and produces a `MatchResult`.

Matching is a fixed sequence of stages. Each stage either hands its output to
the next one or raises, so the first violated constraint is the one reported:

1. Split the argument list into chunks, one per token starting with `-`.
2. Raise `ShowUsage` if any chunk starts with `-h` or `--help`.
3. Expand combined shorthands, `-svt 60` → `-s`, `-v`, `-t 60`.
4. Expand dash numbers, `-15` → `-n 15`, when `-n` is declared.
5. Reject unknown options.
6. Mark options present and consume (and coerce) their values.
7. Check the number of remaining positional tokens.
8. Bind the positional tokens to their names.

All options must come before all positional arguments. Tokens found before an
option, or left over after an option's value, are reported as unexpected
arguments rather than as a wrong argument count.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Sequence

from options_by_example.coercion import coerce_value
from options_by_example.exceptions import (
    InternalInconsistencyError,
    InvalidTypedValueError,
    MissingOptionValueError,
    TooFewArgumentsError,
    TooManyArgumentsError,
    UnexpectedArgumentsBeforeOptionError,
    UnknownOptionError,
    UnknownShorthandInGroupError,
)
from options_by_example.logger import logger
from options_by_example.result import MatchResult
from options_by_example.signals import ShowUsage
from options_by_example.specification import ArgumentArity, Specification

HELP_FLAGS = ("-h", "--help")
DASH_NUMBER_FLAG = "-n"

_SHORTHAND_GROUP = re.compile(r"^-([a-zA-Z]{2,})$")
_DASH_NUMBER = re.compile(r"^-(\d+)$")


@dataclass
class Chunk:
    """An option token followed by the tokens up to the next option."""

    option: str
    values: list[str] = field(default_factory=list)


class ArgumentMatcher:
    """
    Matches argument lists against one `Specification`.

    The matcher keeps no state between calls, so one instance (and one
    specification) can serve any number of `parse()` calls.
    """

    def __init__(self, specification: Specification) -> None:
        self.specification = specification

    def parse(self, argv: Sequence[str]) -> MatchResult:
        """
        Match `argv` (without the program name) against the specification.

        Raises:
            ShowUsage: `-h` or `--help` was given.
            ParseError: The first constraint the argument list violates.
            InternalInconsistencyError: Tokens were left unbound; a bug.
        """
        logger.debug("Matching arguments: %s", list(argv))
        result = MatchResult(
            specification=self.specification,
            arguments=dict(self.specification.defaults),
        )

        leading, chunks = self._partition(argv)
        self._raise_if_help(chunks)
        chunks = self._expand_shorthand_groups(chunks)
        chunks = self._expand_dash_numbers(chunks)
        self._raise_if_unknown(chunks)
        remainder, value_option = self._consume_options(leading, chunks, result)

        self._validate_count(remainder, value_option)
        remainder = self._bind_arguments(remainder, result)
        if remainder:
            raise InternalInconsistencyError(
                f"Internal error: unreachable state, unbound arguments {remainder}"
            )

        logger.debug("Matched options=%s arguments=%s", result.options, result.arguments)
        return result

    def _partition(self, argv: Sequence[str]) -> tuple[list[str], list[Chunk]]:
        leading: list[str] = []
        chunks: list[Chunk] = []
        for token in argv:
            if token.startswith("-"):
                chunks.append(Chunk(token))
            elif chunks:
                chunks[-1].values.append(token)
            else:
                leading.append(token)
        return leading, chunks

    def _raise_if_help(self, chunks: list[Chunk]) -> None:
        if any(chunk.option in HELP_FLAGS for chunk in chunks):
            raise ShowUsage(self.specification.message)

    def _expand_shorthand_groups(self, chunks: list[Chunk]) -> list[Chunk]:
        options = self.specification.options
        expanded: list[Chunk] = []
        for chunk in chunks:
            group = _SHORTHAND_GROUP.match(chunk.option)
            if not group:
                expanded.append(chunk)
                continue

            shorthands = [f"-{letter}" for letter in group.group(1)]
            for shorthand in shorthands:
                if shorthand not in options:
                    long_form = f"-{chunk.option}"
                    suggestion = long_form if long_form in options else None
                    raise UnknownShorthandInGroupError(shorthand, chunk.option, suggestion)

            expanded.extend(Chunk(shorthand) for shorthand in shorthands)
            expanded[-1].values.extend(chunk.values)
            logger.debug("Expanded '%s' into %s", chunk.option, shorthands)
        return expanded

    def _expand_dash_numbers(self, chunks: list[Chunk]) -> list[Chunk]:
        binding = self.specification.options.get(DASH_NUMBER_FLAG)
        if binding is None or not binding.takes_value:
            return chunks
        expanded: list[Chunk] = []
        for chunk in chunks:
            number = _DASH_NUMBER.match(chunk.option)
            if number:
                chunk = Chunk(DASH_NUMBER_FLAG, [number.group(1), *chunk.values])
            expanded.append(chunk)
        return expanded

    def _raise_if_unknown(self, chunks: list[Chunk]) -> None:
        for chunk in chunks:
            if chunk.option not in self.specification.options:
                raise UnknownOptionError(chunk.option)

    def _consume_options(
        self, leading: list[str], chunks: list[Chunk], result: MatchResult
    ) -> tuple[list[str], str | None]:
        """
        Mark options present and store their values.

        Returns the positional tokens that follow the last option and the last
        option that consumed a value (if the last option did), which is used to
        explain a shortfall of positional arguments.
        """
        remainder = list(leading)
        value_option: str | None = None
        for chunk in chunks:
            if remainder:
                raise UnexpectedArgumentsBeforeOptionError(chunk.option)

            binding = self.specification.options[chunk.option]
            result.options[binding.name] = True
            values = list(chunk.values)

            if binding.kind is not None:
                if not values:
                    raise MissingOptionValueError(chunk.option)
                value = values.pop(0)
                try:
                    result.arguments[binding.name] = coerce_value(value, binding.kind)
                except ValueError as error:
                    raise InvalidTypedValueError(
                        value, chunk.option, binding.kind.description
                    ) from error
                value_option = chunk.option
            else:
                value_option = None

            remainder = values
        return remainder, value_option

    def _validate_count(self, remainder: list[str], value_option: str | None) -> None:
        minimum = self.specification.minimum_arguments
        maximum = self.specification.maximum_arguments

        if maximum is not None and len(remainder) > maximum:
            raise TooManyArgumentsError(minimum, maximum, remainder[maximum])
        if len(remainder) < minimum:
            raise TooFewArgumentsError(minimum, len(remainder), value_option)

    def _bind_arguments(self, remainder: list[str], result: MatchResult) -> list[str]:
        """Bind positional tokens to names and return whatever is left over."""
        remainder = list(remainder)
        positionals = self.specification.positionals

        if self.specification.vararg_name is not None:
            for index, (name, arity) in enumerate(positionals):
                still_needed = len(positionals) - index - 1
                if arity is ArgumentArity.REQUIRED:
                    if not remainder:
                        raise InternalInconsistencyError()
                    result.arguments[name] = remainder.pop(0)
                elif arity is ArgumentArity.VARARG:
                    count = len(remainder) - still_needed
                    result.arguments[name] = remainder[:count]
                    del remainder[:count]
                else:
                    raise InternalInconsistencyError(
                        f"Internal error: optional argument '{name}' next to a vararg"
                    )
            return remainder

        required = self.specification.required_names
        if len(remainder) < len(required):
            raise InternalInconsistencyError()
        tail = remainder[len(remainder) - len(required) :]
        del remainder[len(remainder) - len(required) :]
        for name, value in zip(required, tail):
            result.arguments[name] = value

        for name in self.specification.optional_names:
            if not remainder:
                break
            result.arguments[name] = remainder.pop(0)
        return remainder
