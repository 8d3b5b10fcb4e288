# Options By Example - (c) 2025 rtj.dev LLC - MIT Licensed
"""
Defines flow control signals raised by the argument matcher.

Signals interrupt parsing without being errors. They inherit from `FlowSignal`,
a subclass of `BaseException`, so that generic `except Exception` blocks in
calling code do not swallow them.

Signals:
- ShowUsage: the user asked for help; print the usage message and stop.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in options_by_example.

    These are not errors. They tell the caller to stop parsing and do
    something else, like printing the usage message.
    """


class ShowUsage(FlowSignal):
    """Raised when `-h` or `--help` is found in the argument list."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or "Show usage signal received.")
        self.message = message
