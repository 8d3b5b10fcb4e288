# Options By Example - (c) 2025 rtj.dev LLC - MIT Licensed
"""
Defines all custom exception classes used by options_by_example.

Errors fall in two families. `UsageError` subclasses are raised while a usage
text is turned into a `Specification` and point at a mistake in the usage text
itself. `ParseError` subclasses are raised while an argument list is matched
against a specification and are meant to be shown to the end user.

Every error carries an `ErrorKind`, the offending token (if any) and the
human-readable message, so callers can either print `str(error)` or branch on
`error.kind`.

Exception Hierarchy:
- OptionsByExampleError
    ├── UsageError
    │   ├── MissingUsageLineError
    │   ├── InvalidTokenError
    │   ├── MultipleVarargsError
    │   └── AmbiguousArityError
    └── ParseError
        ├── UnexpectedArgumentsBeforeOptionError
        ├── UnknownShorthandInGroupError
        ├── UnknownOptionError
        ├── MissingOptionValueError
        ├── InvalidTypedValueError
        ├── TooManyArgumentsError
        └── TooFewArgumentsError

`InternalInconsistencyError` is deliberately outside this hierarchy: it marks a
bug in the matcher, not a user mistake, and must not be caught by handlers for
`ParseError`.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Names every failure the grammar and the matcher can report."""

    MISSING_USAGE_LINE = "missing_usage_line"
    INVALID_TOKEN = "invalid_token"
    MULTIPLE_VARARGS = "multiple_varargs"
    AMBIGUOUS_ARITY = "ambiguous_arity"
    UNEXPECTED_ARGUMENTS_BEFORE_OPTION = "unexpected_arguments_before_option"
    UNKNOWN_SHORTHAND_IN_GROUP = "unknown_shorthand_in_group"
    UNKNOWN_OPTION = "unknown_option"
    MISSING_OPTION_VALUE = "missing_option_value"
    INVALID_TYPED_VALUE = "invalid_typed_value"
    TOO_MANY_ARGUMENTS = "too_many_arguments"
    TOO_FEW_ARGUMENTS = "too_few_arguments"
    INTERNAL_INCONSISTENCY = "internal_inconsistency"

    def __str__(self) -> str:
        return self.value


class OptionsByExampleError(Exception):
    """Base exception for options_by_example."""

    kind: ErrorKind

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.token = token

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind}, token={self.token!r})"


class UsageError(OptionsByExampleError):
    """Exception raised when a usage text cannot be turned into a specification."""


class MissingUsageLineError(UsageError):
    """Exception raised when the usage text has no `Usage:` line."""

    kind = ErrorKind.MISSING_USAGE_LINE

    def __init__(self) -> None:
        super().__init__("Expected usage string, got none")


class InvalidTokenError(UsageError):
    """Exception raised when a usage line token matches no known shape."""

    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, token: str) -> None:
        super().__init__(f"Found invalid usage token '{token}'", token)


class MultipleVarargsError(UsageError):
    """Exception raised when more than one dotted argument is declared."""

    kind = ErrorKind.MULTIPLE_VARARGS

    def __init__(self, token: str) -> None:
        super().__init__("Found more than one dotted argument", token)


class AmbiguousArityError(UsageError):
    """Exception raised when optional and dotted arguments are both declared."""

    kind = ErrorKind.AMBIGUOUS_ARITY

    def __init__(self, token: str) -> None:
        super().__init__("Found both optional and dotted arguments", token)


class ParseError(OptionsByExampleError):
    """Exception raised when an argument list does not match the specification."""


class UnexpectedArgumentsBeforeOptionError(ParseError):
    kind = ErrorKind.UNEXPECTED_ARGUMENTS_BEFORE_OPTION

    def __init__(self, option: str) -> None:
        super().__init__(
            f"Unexpected arguments found before option '{option}', "
            "please provide all options before arguments",
            option,
        )


class UnknownShorthandInGroupError(ParseError):
    kind = ErrorKind.UNKNOWN_SHORTHAND_IN_GROUP

    def __init__(self, shorthand: str, group: str, suggestion: str | None = None) -> None:
        message = f"Found unknown option {shorthand} inside '{group}'"
        if suggestion:
            message += f", did you mean '{suggestion}'?"
        super().__init__(message, shorthand)
        self.group = group
        self.suggestion = suggestion


class UnknownOptionError(ParseError):
    kind = ErrorKind.UNKNOWN_OPTION

    def __init__(self, option: str) -> None:
        super().__init__(f"Found unknown option '{option}'", option)


class MissingOptionValueError(ParseError):
    kind = ErrorKind.MISSING_OPTION_VALUE

    def __init__(self, option: str) -> None:
        super().__init__(f"Expected argument for option '{option}', got none", option)


class InvalidTypedValueError(ParseError):
    kind = ErrorKind.INVALID_TYPED_VALUE

    def __init__(self, value: str, option: str, expected: str) -> None:
        super().__init__(
            f'Invalid argument "{value}" for option \'{option}\', please provide {expected}',
            value,
        )
        self.option = option
        self.expected = expected


class TooManyArgumentsError(ParseError):
    kind = ErrorKind.TOO_MANY_ARGUMENTS

    def __init__(self, minimum: int, maximum: int, token: str | None = None) -> None:
        expected = str(minimum) if minimum == maximum else f"{minimum}-{maximum}"
        super().__init__(f"Expected {expected} arguments, but received too many", token)
        self.minimum = minimum
        self.maximum = maximum


class TooFewArgumentsError(ParseError):
    kind = ErrorKind.TOO_FEW_ARGUMENTS

    def __init__(
        self, minimum: int, received: int, value_option: str | None = None
    ) -> None:
        if received == 0:
            too_few = "none"
        elif received == 1:
            too_few = "only one"
        else:
            too_few = "too few"
        message = f"Expected {minimum} required arguments, but received {too_few}"
        if value_option:
            message += f" (considering {value_option} takes an argument)"
        super().__init__(message, value_option)
        self.minimum = minimum
        self.received = received


class InternalInconsistencyError(RuntimeError):
    """Exception raised when the matcher reaches a state it should never reach."""

    kind = ErrorKind.INTERNAL_INCONSISTENCY

    def __init__(self, message: str = "Internal error: unreachable state") -> None:
        super().__init__(message)
        self.message = message
