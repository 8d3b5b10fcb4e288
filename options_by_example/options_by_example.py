# Options By Example - (c) 2025 rtj.dev LLC - MIT Licensed
"""
Main class for options_by_example.

`OptionsByExample` ties the usage grammar and the argument matcher together and
adds the behavior a script wants from `--help` handling: print the usage text
and exit 0, or print `ERROR: <message>` and exit 1.

Example:
    USAGE = '''
    Establishes network connection to designated host and port.

    Usage: $0 [options] [mode] host port

    Options:
      -s, --secure        Establish a secure connection (SSL/TSL)
      -r, --retries NUM   Number of connection retries (default 3)
    '''

    options = OptionsByExample(USAGE).parse()
    if options.include("secure"):
        ...
    connect(options.argument("host"), options.argument("port", int))
"""
from __future__ import annotations

import sys
import textwrap
from typing import Any, Sequence, TextIO

from rich.console import Console
from rich.markup import escape

from options_by_example.console import console as default_console
from options_by_example.exceptions import ParseError
from options_by_example.logger import logger
from options_by_example.matcher import ArgumentMatcher
from options_by_example.result import MatchResult
from options_by_example.signals import ShowUsage
from options_by_example.specification import Specification
from options_by_example.usage_grammar import UsageGrammar
from options_by_example.utils import get_program_invocation


class OptionsByExample:
    """
    Command-line parser built from a usage text.

    The usage text is parsed once, when the instance is created. Every call to
    `parse()` or `parse_without_exit()` matches a fresh argument list against
    it and remembers the outcome in `options` and `arguments`.

    Args:
        text (str): The usage text, including a `Usage:` line.
        program (str | None): Name substituted for `$0` in the printed usage
            message. Defaults to the current program's invocation name.
        console (Console | None): Rich console used for output.

    Raises:
        UsageError: If the usage text cannot be parsed.
    """

    def __init__(
        self,
        text: str,
        program: str | None = None,
        console: Console | None = None,
    ) -> None:
        self.specification: Specification = UsageGrammar().parse(text)
        self.matcher: ArgumentMatcher = ArgumentMatcher(self.specification)
        self.program: str = program or get_program_invocation()
        self.console: Console = console or default_console
        self.result: MatchResult | None = None

    @classmethod
    def read(cls, stream: TextIO, **kwargs: Any) -> OptionsByExample:
        """Build a parser from a file-like object holding the usage text."""
        return cls(stream.read(), **kwargs)

    @property
    def usage_message(self) -> str:
        """The usage text as printed for `--help`, with `$0` replaced."""
        text = textwrap.dedent(self.specification.message.replace("$0", self.program))
        return text.strip("\n") + "\n"

    @property
    def options(self) -> dict[str, bool]:
        return self.result.options if self.result else {}

    @property
    def arguments(self) -> dict[str, Any]:
        return self.result.arguments if self.result else {}

    def parse_without_exit(self, argv: Sequence[str]) -> MatchResult:
        """
        Match `argv` and return the result.

        Raises:
            ShowUsage: `-h` or `--help` was given.
            ParseError: The argument list does not match the usage text.
        """
        self.result = self.matcher.parse(argv)
        return self.result

    def parse(
        self, argv: Sequence[str] | None = None, exit_on_error: bool = True
    ) -> MatchResult:
        """
        Match `argv` (default `sys.argv[1:]`) and return the result.

        With `exit_on_error`, a help request prints the usage message and exits
        with status 0, and a parse error prints `ERROR: <message>` and exits
        with status 1. Without it, `ShowUsage` and `ParseError` propagate.
        """
        if argv is None:
            argv = sys.argv[1:]
        try:
            return self.parse_without_exit(argv)
        except ShowUsage:
            if not exit_on_error:
                raise
            self.print_usage()
            sys.exit(0)
        except ParseError as error:
            if not exit_on_error:
                raise
            logger.debug("Parse error %s: %s", error.kind, error.message)
            self.print_error(error)
            sys.exit(1)

    def print_usage(self) -> None:
        self.console.print(
            self.usage_message, markup=False, highlight=False, soft_wrap=True
        )

    def print_error(self, error: ParseError) -> None:
        self.console.print(
            f"[bold red]ERROR:[/] {escape(error.message)}",
            highlight=False,
            soft_wrap=True,
        )

    def __str__(self) -> str:
        return f"OptionsByExample(program={self.program!r}, {self.specification})"

    def __repr__(self) -> str:
        return str(self)
