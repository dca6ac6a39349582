"""Logging setup for the northstar-mods application.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here, once, by the application entry point.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path


ROOT_LOGGER = "northstar_mods"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
VERBOSE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(funcName)s | %(message)s"
DEFAULT_LOG_FILE = Path("logs.log")

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def parse_level(name: str) -> int:
    """Map a CLI level name to a ``logging`` level."""
    try:
        return _LEVELS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown log level {name!r}; expected one of {', '.join(_LEVELS)}"
        ) from None


def setup_logging(
    level: int = logging.DEBUG,
    log_file: Path | None = DEFAULT_LOG_FILE,
    verbose: bool = False,
    console_output: bool = False,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Minimum level to capture.
        log_file: File to append records to, or None to skip the file handler.
        verbose: Use the format with line numbers and function names.
        console_output: Also write records to stderr.
    """
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        VERBOSE_FORMAT if verbose else DEFAULT_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    root_logger.debug("Logging initialized - level %s", logging.getLevelName(level))
    return root_logger
