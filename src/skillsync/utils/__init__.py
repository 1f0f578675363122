"""Utilities package."""

from skillsync.utils.config import Config
from skillsync.utils.logging import setup_logging

__all__ = [
    "Config",
    "setup_logging",
]
