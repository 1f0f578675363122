"""Shared test fixtures for skillsync test suite."""

import logging
from pathlib import Path

import pytest

from skillsync.utils.config import Config


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Repository checkout with the command and two skills."""
    source = tmp_path / "repo"
    (source / "commands").mkdir(parents=True)
    (source / "skills").mkdir()
    (source / "commands" / "initialize-project.md").write_text(
        "# /initialize-project\n\nSet up the project.\n"
    )
    (source / "skills" / "base.md").write_text("# Base\n\nBase rules.\n")
    (source / "skills" / "typescript.md").write_text(
        "---\nname: TypeScript\ndependencies: [base]\n---\n\n# TypeScript\n"
    )
    return source


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Empty user home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def test_config(source_dir: Path, home_dir: Path) -> Config:
    """Config reading from source_dir and installing under home_dir."""
    return Config.load(source=source_dir, home=home_dir)


@pytest.fixture(autouse=True)
def reset_skillsync_logger():
    """Drop handlers bound to streams a CliRunner has since closed."""
    logger = logging.getLogger("skillsync")
    saved = list(logger.handlers)
    yield
    logger.handlers = saved
    logger.setLevel(logging.NOTSET)
