# Options By Example - (c) 2025 rtj.dev LLC - MIT Licensed
"""Global logger instance for options_by_example."""
import logging

logger: logging.Logger = logging.getLogger("options_by_example")
