"""Logging configuration for skillsync."""

import logging
import sys

_console_handler: logging.Handler | None = None


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging for skillsync.

    Logs go to stderr only. Nothing is written under the destination
    directory besides the installed documents.

    Args:
        verbose: Log at DEBUG instead of WARNING
    """
    global _console_handler

    console_format = "%(levelname)s - %(name)s - %(message)s"
    console_formatter = logging.Formatter(console_format)

    root_logger = logging.getLogger("skillsync")
    level = logging.DEBUG if verbose else logging.WARNING
    root_logger.setLevel(level)

    if _console_handler is not None and _console_handler in root_logger.handlers:
        root_logger.removeHandler(_console_handler)

    # Bound to whatever sys.stderr is at setup time
    _console_handler = logging.StreamHandler(sys.stderr)
    _console_handler.setFormatter(console_formatter)
    _console_handler.setLevel(level)
    root_logger.addHandler(_console_handler)
