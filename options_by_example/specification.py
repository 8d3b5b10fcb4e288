# Options By Example - (c) 2025 rtj.dev LLC - MIT Licensed
"""
Defines the immutable data model produced by `UsageGrammar`.

Contents:
- `ArgumentArity`: cardinality of a positional argument (required, optional, vararg).
- `ValueKind`: what an option's value is coerced to, inferred from its placeholder.
- `OptionBinding`: canonical name and value placeholder shared by all flags of one option.
- `Specification`: the frozen aggregate consumed by `ArgumentMatcher`.

Example:
    Usage: connect [options] [mode] host port

    positionals == (("mode", OPTIONAL), ("host", REQUIRED), ("port", REQUIRED))
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ArgumentArity(Enum):
    """
    Cardinality of a positional argument.

    Members:
        REQUIRED: exactly one token (`host`).
        OPTIONAL: zero or one token (`[mode]`).
        VARARG: a run of one or more tokens (`files...`).

    Aliases:
        - "repeated" → "vararg"
        - "dotted" → "vararg"
    """

    REQUIRED = "required"
    OPTIONAL = "optional"
    VARARG = "vararg"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "repeated": "vararg",
            "dotted": "vararg",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentArity:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        alias = cls._get_alias(value.strip().lower())
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


class ValueKind(Enum):
    """
    How an option value is interpreted.

    The kind is inferred from the placeholder written after the flag in the
    usage text: `NUM`, `DATE` and `TIME` are typed, anything else is plain text.
    """

    PLAIN = "plain"
    INTEGER = "integer"
    DATE = "date"
    TIME = "time"

    @classmethod
    def from_placeholder(cls, placeholder: str) -> ValueKind:
        return {
            "NUM": cls.INTEGER,
            "DATE": cls.DATE,
            "TIME": cls.TIME,
        }.get(placeholder, cls.PLAIN)

    @property
    def description(self) -> str:
        """Describe the expected value for error messages."""
        return {
            ValueKind.PLAIN: "a value",
            ValueKind.INTEGER: "an integer value",
            ValueKind.DATE: "a date (e.g. YYYY-MM-DD)",
            ValueKind.TIME: "a timestamp (e.g. HH:MM:SS)",
        }[self]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OptionBinding:
    """
    What a flag token resolves to.

    Attributes:
        name (str): Canonical option name, shared by the short and long form.
        placeholder (str | None): Value name from the usage text (`NUM`), or
            None for a boolean flag.
    """

    name: str
    placeholder: str | None = None

    @property
    def takes_value(self) -> bool:
        return self.placeholder is not None

    @property
    def kind(self) -> ValueKind | None:
        if self.placeholder is None:
            return None
        return ValueKind.from_placeholder(self.placeholder)


def _freeze(mapping: Mapping | None) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class Specification:
    """
    Everything `ArgumentMatcher` needs to know about a command line.

    Attributes:
        message (str): The usage text exactly as given.
        positionals (tuple[tuple[str, ArgumentArity], ...]): Declared positional
            arguments in order.
        options (Mapping[str, OptionBinding]): Flag token to binding, e.g.
            `-r` and `--retries` both map to `OptionBinding("retries", "NUM")`.
        defaults (Mapping[str, str]): Canonical option name to raw default value.
    """

    message: str
    positionals: tuple[tuple[str, ArgumentArity], ...] = ()
    options: Mapping[str, OptionBinding] = field(default_factory=dict)
    defaults: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "positionals", tuple(self.positionals))
        object.__setattr__(self, "options", _freeze(self.options))
        object.__setattr__(self, "defaults", _freeze(self.defaults))

    def __hash__(self) -> int:
        return hash(
            (
                self.message,
                self.positionals,
                tuple(self.options.items()),
                tuple(self.defaults.items()),
            )
        )

    def _names(self, arity: ArgumentArity) -> list[str]:
        return [name for name, each in self.positionals if each is arity]

    @property
    def argument_names(self) -> list[str]:
        return [name for name, _ in self.positionals]

    @property
    def required_names(self) -> list[str]:
        return self._names(ArgumentArity.REQUIRED)

    @property
    def optional_names(self) -> list[str]:
        return self._names(ArgumentArity.OPTIONAL)

    @property
    def vararg_name(self) -> str | None:
        names = self._names(ArgumentArity.VARARG)
        return names[0] if names else None

    @property
    def minimum_arguments(self) -> int:
        """Fewest positional tokens an invocation may carry."""
        return len(self.required_names) + len(self._names(ArgumentArity.VARARG))

    @property
    def maximum_arguments(self) -> int | None:
        """Most positional tokens an invocation may carry, None if unbounded."""
        if self.vararg_name is not None:
            return None
        return len(self.required_names) + len(self.optional_names)

    @property
    def option_names(self) -> list[str]:
        """Canonical option names in declaration order, without duplicates."""
        return list(dict.fromkeys(binding.name for binding in self.options.values()))

    @property
    def value_option_names(self) -> list[str]:
        return list(
            dict.fromkeys(
                binding.name for binding in self.options.values() if binding.takes_value
            )
        )

    def flags_for(self, name: str) -> list[str]:
        """Return every flag token bound to the canonical option `name`."""
        return [flag for flag, binding in self.options.items() if binding.name == name]

    def __str__(self) -> str:
        return (
            f"Specification(arguments={len(self.positionals)}, "
            f"flags={len(self.options)}, options={len(self.option_names)}, "
            f"defaults={len(self.defaults)})"
        )
