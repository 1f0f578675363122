"""Copy command and skill documents into the user's Claude directory."""

import logging
import os
import shutil
from pathlib import Path

from pydantic import BaseModel, Field

from skillsync.core.exceptions import DestinationWriteError, SourceMissingError
from skillsync.utils.config import Config

logger = logging.getLogger(__name__)


class SyncResult(BaseModel):
    """Outcome of a successful install run."""

    command_path: Path
    copied_skills: list[Path] = Field(default_factory=list)
    installed_skills: list[str] = Field(default_factory=list)


def copy_file(src: Path, dst_dir: Path) -> Path:
    """Copy src into dst_dir, replacing any file of the same name.

    Raises:
        SourceMissingError: If src can't be read
        DestinationWriteError: If dst can't be written
    """
    dst = dst_dir / src.name
    try:
        shutil.copyfile(src, dst)
    except OSError as e:
        if not os.access(src, os.R_OK):
            raise SourceMissingError("source file", src, "is not readable") from e
        raise DestinationWriteError(dst, e.strerror or str(e)) from e
    logger.debug(f"Copied {src} -> {dst}")
    return dst


class BaseStep:
    """Base class for install steps."""

    def __init__(self, config: Config):
        self.config = config

    def run(self, state: dict) -> None:
        """Execute step. Raise SyncError to abort the run."""
        raise NotImplementedError


class CheckSourceStep(BaseStep):
    """Make sure the command file, skills directory and skill files are readable."""

    def run(self, state: dict) -> None:
        command = self.config.source_commands_path / self.config.command_file
        if not command.is_file():
            raise SourceMissingError("command definition", command)
        if not os.access(command, os.R_OK):
            raise SourceMissingError("command definition", command, "is not readable")

        skills_dir = self.config.source_skills_path
        if not skills_dir.is_dir():
            raise SourceMissingError("skills directory", skills_dir)
        if not os.access(skills_dir, os.R_OK | os.X_OK):
            raise SourceMissingError("skills directory", skills_dir, "is not readable")

        skills = sorted(
            p for p in skills_dir.glob(self.config.skill_pattern) if p.is_file()
        )
        for skill in skills:
            if not os.access(skill, os.R_OK):
                raise SourceMissingError("skill", skill, "is not readable")

        state["command_source"] = command
        state["skill_sources"] = skills


class SetupDestinationStep(BaseStep):
    """Create destination directories."""

    def run(self, state: dict) -> None:
        for path in (self.config.dest_commands_path, self.config.dest_skills_path):
            try:
                path.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise DestinationWriteError(path, e.strerror or str(e)) from e


class CopyCommandStep(BaseStep):
    """Install the slash command."""

    def run(self, state: dict) -> None:
        state["command_path"] = copy_file(
            state["command_source"], self.config.dest_commands_path
        )


class CopySkillsStep(BaseStep):
    """Install every skill document, overwriting existing copies."""

    def run(self, state: dict) -> None:
        copied = state.setdefault("copied_skills", [])
        for src in state["skill_sources"]:
            copied.append(copy_file(src, self.config.dest_skills_path))


def list_installed_skills(skills_dir: Path) -> list[str]:
    """Filenames present in the destination skills directory, sorted."""
    if not skills_dir.is_dir():
        return []
    return sorted(p.name for p in skills_dir.iterdir())


class Synchronizer:
    """Runs the install steps in order. The first failure aborts the run."""

    STEPS: list[type[BaseStep]] = [
        CheckSourceStep,
        SetupDestinationStep,
        CopyCommandStep,
        CopySkillsStep,
    ]

    def __init__(self, config: Config):
        self.config = config

    def run(self) -> SyncResult:
        """
        Copy the command and skill documents into the destination.

        Files already copied when a step fails are left in place; re-running
        is always safe since every copy overwrites.

        Returns:
            SyncResult with the listing of the destination skills directory

        Raises:
            SourceMissingError: If a required source is absent
            DestinationWriteError: If a directory or file can't be written
        """
        state: dict = {}
        logger.info(f"Installing from {self.config.source} to {self.config.destination}")

        for step_cls in self.STEPS:
            step = step_cls(self.config)
            logger.debug(f"Running {step_cls.__name__}")
            step.run(state)

        return SyncResult(
            command_path=state["command_path"],
            copied_skills=state.get("copied_skills", []),
            installed_skills=list_installed_skills(self.config.dest_skills_path),
        )
