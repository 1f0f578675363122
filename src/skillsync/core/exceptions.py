"""Custom exceptions for skillsync."""

from pathlib import Path


class SyncError(Exception):
    """Base error for a failed install run."""

    pass


class SourceMissingError(SyncError):
    """A required source file or directory is absent or unreadable."""

    def __init__(self, kind: str, path: Path, reason: str = "not found"):
        super().__init__(f"{kind.capitalize()} {reason}: {path}")
        self.kind = kind
        self.path = path
        self.reason = reason


class DestinationWriteError(SyncError):
    """Creating a destination directory or copying a file failed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = path
        self.reason = reason
