# Options By Example - (c) 2025 rtj.dev LLC - MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import re
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODE_ENV = "OPTIONS_BY_EXAMPLE_LOG_MODE"

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]+")


def canonical_name(text: str) -> str:
    """
    Turn a declared argument or flag name into a stable identifier.

    Runs of characters outside `[A-Za-z0-9]` collapse to a single underscore
    and the result is lower-cased, e.g. `enable-feature` -> `enable_feature`.
    """
    return _NON_ALPHANUMERIC.sub("_", text).lower()


def get_program_invocation() -> str:
    """Name substituted for `$0` when the caller gives no program name."""
    script = sys.argv[0]
    installed = shutil.which(script)
    if installed:
        return os.path.basename(installed)
    if os.path.basename(sys.executable).startswith("python"):
        return f"python {script}"
    return script


CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


LOG_MODES = ("cli", "json")
_JSON_FIELDS = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Route log records from the root logger to the console and, optionally, a file.

    The library never calls this. The `options-by-example` program does, and
    applications embedding the parser may use it for the same output.

    Args:
        mode (str | None):
            "cli" for Rich console records or "json" for one JSON object per
            record. Falls back to `OPTIONS_BY_EXAMPLE_LOG_MODE`, then to "json"
            inside a container and "cli" elsewhere.
        log_filename (str | None):
            Also append records to this file.
        json_log_to_file (bool):
            Write the file records as JSON instead of plain lines.
        file_log_level (int):
            Threshold for the file handler.
        console_log_level (int):
            Threshold for the console handler.

    Raises:
        ValueError: If `mode` is not one of `LOG_MODES`. Existing handlers are
            left in place.
    """
    if not mode:
        mode = os.getenv(LOG_MODE_ENV) or ("json" if running_in_container() else "cli")
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")

    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            show_path=False,
            markup=False,
            log_time_format="[%H:%M:%S]",
        )
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(_JSON_FIELDS))
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(_JSON_FIELDS)
            if json_log_to_file
            else logging.Formatter("%(asctime)s [%(name)s] [%(levelname)s] %(message)s")
        )
        root.addHandler(file_handler)

    logging.getLogger("options_by_example").debug("Logging set up in '%s' mode", mode)
