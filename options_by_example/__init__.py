"""
Options By Example

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    ErrorKind,
    InternalInconsistencyError,
    OptionsByExampleError,
    ParseError,
    UsageError,
)
from .matcher import ArgumentMatcher
from .options_by_example import OptionsByExample
from .result import MatchResult
from .signals import ShowUsage
from .specification import ArgumentArity, OptionBinding, Specification, ValueKind
from .usage_grammar import UsageGrammar
from .version import __version__

__all__ = [
    "OptionsByExample",
    "UsageGrammar",
    "ArgumentMatcher",
    "Specification",
    "ArgumentArity",
    "OptionBinding",
    "ValueKind",
    "MatchResult",
    "ShowUsage",
    "ErrorKind",
    "OptionsByExampleError",
    "UsageError",
    "ParseError",
    "InternalInconsistencyError",
    "__version__",
]
