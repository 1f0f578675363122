"""Skill and command document models and discovery."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from skillsync.core.exceptions import SourceMissingError

logger = logging.getLogger(__name__)


class CommandDefinition(BaseModel):
    """Slash-command document."""

    model_config = ConfigDict(extra="forbid")

    id: str
    name: str
    description: str = ""
    path: Path


class SkillDocument(BaseModel):
    """Skill document, identified by its filename stem."""

    model_config = ConfigDict(extra="forbid")

    id: str
    name: str
    description: str = ""
    dependencies: list[str] = Field(default_factory=list)
    path: Path


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """
    Split optional YAML frontmatter from a markdown body.

    Args:
        content: Raw file content

    Returns:
        (frontmatter, body). Frontmatter is ``{}`` when absent.

    Raises:
        yaml.YAMLError: If the frontmatter block is not valid YAML
    """
    if not content.startswith("---\n"):
        return {}, content

    end_delimiter = content.find("\n---\n", 4)
    if end_delimiter == -1:
        return {}, content

    frontmatter_text = content[4:end_delimiter]
    body = content[end_delimiter + 5 :]

    raw = yaml.safe_load(frontmatter_text)
    if not isinstance(raw, dict):
        return {}, body
    return raw, body


def _read_frontmatter(path: Path) -> dict[str, Any]:
    """Frontmatter of a document, or {} if it can't be read or parsed."""
    try:
        frontmatter, _ = parse_frontmatter(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.warning(f"Failed to parse frontmatter of {path.name}: {e}")
        return {}
    return frontmatter


def _as_str_list(value: Any) -> list[str]:
    if isinstance(value, str):
        return [v.strip() for v in value.split(",") if v.strip()]
    if isinstance(value, list):
        return [str(v) for v in value]
    return []


def load_command(path: Path) -> CommandDefinition:
    """Load a command definition.

    Raises:
        SourceMissingError: If the file doesn't exist
    """
    if not path.is_file():
        raise SourceMissingError("command definition", path)

    frontmatter = _read_frontmatter(path)
    return CommandDefinition(
        id=path.stem,
        name=str(frontmatter.get("name") or path.stem),
        description=str(frontmatter.get("description") or ""),
        path=path,
    )


def load_skill(path: Path) -> SkillDocument:
    """Load a skill document.

    Frontmatter is informational: missing or malformed fields fall back to
    the filename stem and empty values.

    Raises:
        SourceMissingError: If the file doesn't exist
    """
    if not path.is_file():
        raise SourceMissingError("skill", path)

    frontmatter = _read_frontmatter(path)
    return SkillDocument(
        id=path.stem,
        name=str(frontmatter.get("name") or path.stem),
        description=str(frontmatter.get("description") or ""),
        dependencies=_as_str_list(frontmatter.get("dependencies")),
        path=path,
    )


def discover_skills(path: Path, pattern: str = "*.md") -> list[SkillDocument]:
    """
    Scan a directory for skill documents.

    Args:
        path: Skills directory
        pattern: Glob for skill files

    Returns:
        SkillDocuments sorted by filename. Empty if the directory is missing.
    """
    if not path.is_dir():
        logger.debug(f"Skills directory not found: {path}")
        return []

    return [load_skill(p) for p in sorted(path.glob(pattern)) if p.is_file()]
