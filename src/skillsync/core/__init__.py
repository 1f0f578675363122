"""Core install functionality."""

from .documents import (
    CommandDefinition,
    SkillDocument,
    discover_skills,
    load_command,
    load_skill,
    parse_frontmatter,
)
from .exceptions import DestinationWriteError, SourceMissingError, SyncError
from .synchronizer import SyncResult, Synchronizer

__all__ = [
    "CommandDefinition",
    "SkillDocument",
    "discover_skills",
    "load_command",
    "load_skill",
    "parse_frontmatter",
    "SyncError",
    "SourceMissingError",
    "DestinationWriteError",
    "SyncResult",
    "Synchronizer",
]
