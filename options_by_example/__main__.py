"""
Options By Example

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from rich.markup import escape
from rich.table import Table

from options_by_example.console import console
from options_by_example.exceptions import ParseError, UsageError
from options_by_example.logger import logger
from options_by_example.options_by_example import OptionsByExample
from options_by_example.result import MatchResult
from options_by_example.signals import ShowUsage
from options_by_example.utils import setup_logging

USAGE = """
Checks a command line against the usage text of another program and shows
the options and arguments that program would receive.

Usage: $0 [options] usage_file

Options:
  -j, --json            Print the result as JSON
  -l, --log-mode MODE   Log output, either cli or json
  -v, --verbose         Show debug log messages

Arguments:
  usage_file            File holding the usage text, or - for stdin

Everything after a literal -- is matched against the usage text.
"""

SEPARATOR = "--"
STDIN_ARGUMENT = "-"
# A bare "-" would be read as an option, so it is swapped for this name first.
STDIN = "<stdin>"


def split_argv(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """
    Split the program's own arguments from the ones to check at `--`.

    A bare `-` among the program's own arguments becomes `STDIN`.
    """
    argv = list(argv)
    own, checked = argv, []
    if SEPARATOR in argv:
        index = argv.index(SEPARATOR)
        own, checked = argv[:index], argv[index + 1 :]
    return [STDIN if token == STDIN_ARGUMENT else token for token in own], checked


def read_usage(path: str) -> str:
    if path == STDIN:
        return sys.stdin.read()
    return Path(path).read_text(encoding="UTF-8")


def render_result(result: MatchResult) -> Table:
    table = Table(title="Match result")
    table.add_column("Name", style="bold")
    table.add_column("Kind")
    table.add_column("Value")
    for name in result.specification.option_names:
        table.add_row(name, "option", str(result.options.get(name, False)))
    for name in result.argument_names:
        kind = "argument" if name in result.specification.argument_names else "value"
        table.add_row(name, kind, escape(repr(result.arguments.get(name))))
    return table


def print_json(payload: dict[str, Any]) -> None:
    console.print(
        json.dumps(payload, default=str),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def print_error(message: str) -> None:
    console.print(f"[bold red]ERROR:[/] {escape(message)}", highlight=False, soft_wrap=True)


def main(argv: Sequence[str] | None = None) -> Any:
    own_argv, checked_argv = split_argv(sys.argv[1:] if argv is None else argv)
    cli = OptionsByExample(USAGE, program="options-by-example").parse(own_argv)

    try:
        setup_logging(
            mode=cli.argument("log_mode"),
            console_log_level=logging.DEBUG if cli.include("verbose") else logging.WARNING,
        )
    except ValueError as error:
        print_error(str(error))
        sys.exit(2)

    try:
        target = OptionsByExample(read_usage(cli.argument("usage_file")))
    except OSError as error:
        print_error(str(error))
        sys.exit(2)
    except UsageError as error:
        logger.debug("Invalid usage text: %r", error)
        print_error(error.message)
        sys.exit(2)

    try:
        result = target.parse_without_exit(checked_argv)
    except ShowUsage:
        target.print_usage()
        sys.exit(0)
    except ParseError as error:
        if cli.include("json"):
            print_json({"error": error.message, "kind": str(error.kind), "token": error.token})
        else:
            target.print_error(error)
        sys.exit(1)

    if cli.include("json"):
        print_json({"options": result.options, "arguments": result.arguments})
    else:
        console.print(render_result(result))
    return result


if __name__ == "__main__":
    main()
