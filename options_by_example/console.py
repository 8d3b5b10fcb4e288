# Options By Example - (c) 2025 rtj.dev LLC - MIT Licensed
"""Global console instance for options_by_example output."""
from rich.console import Console

console = Console()
