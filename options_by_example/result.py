# Options By Example - (c) 2025 rtj.dev LLC - MIT Licensed
"""
Defines `MatchResult`, the outcome of matching one argument list.

A result has two mappings:
- `options`: canonical option name → True for every option that was given.
- `arguments`: canonical name → value for positional arguments, option values
  and defaults. Vararg arguments hold a list of strings; `NUM`, `DATE` and
  `TIME` option values hold an int, a date and a datetime.

Lookups are checked against the specification, so a misspelled name raises
`KeyError` instead of quietly returning None.

Example:
    result = ArgumentMatcher(spec).parse(["--secure", "example.com", "443"])
    result.include("secure")    # True
    result.argument("host")     # "example.com"
    result["port"]              # "443"
    "verbose" in result         # False
"""
from __future__ import annotations

from argparse import Namespace
from dataclasses import dataclass, field
from typing import Any, Callable

from options_by_example.specification import Specification


@dataclass
class MatchResult:
    """Options and argument values produced by `ArgumentMatcher.parse()`."""

    specification: Specification = field(repr=False)
    options: dict[str, bool] = field(default_factory=dict)
    arguments: dict[str, Any] = field(default_factory=dict)

    @property
    def argument_names(self) -> list[str]:
        """Names that `argument()` accepts: positionals first, then option values."""
        names = self.specification.argument_names + self.specification.value_option_names
        return list(dict.fromkeys(names))

    def argument(self, name: str, transform: Callable[[Any], Any] | None = None) -> Any:
        """
        Return the value bound to `name`, or None if it was not given.

        If `transform` is provided and a value is bound, the value is passed
        through it, e.g. `result.argument("port", int)`.
        """
        if name not in self.argument_names:
            raise KeyError(f"No argument named '{name}'")
        value = self.arguments.get(name)
        if value is not None and transform is not None:
            return transform(value)
        return value

    def include(self, name: str) -> bool:
        """Return True if the option `name` was given on the command line."""
        if name not in self.specification.option_names:
            raise KeyError(f"No option named '{name}'")
        return self.options.get(name, False)

    def __getitem__(self, name: str) -> Any:
        return self.argument(name)

    def __contains__(self, name: object) -> bool:
        return name in self.options

    def to_dict(self) -> dict[str, Any]:
        """Return every declared name mapped to its value (or presence flag)."""
        values: dict[str, Any] = {
            name: self.options.get(name, False)
            for name in self.specification.option_names
        }
        values.update({name: self.arguments.get(name) for name in self.argument_names})
        return values

    def to_namespace(self) -> Namespace:
        """Return the result as an `argparse.Namespace`, like `to_dict()`."""
        return Namespace(**self.to_dict())
