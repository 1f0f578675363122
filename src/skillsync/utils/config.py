"""Configuration management for skillsync."""

from importlib.resources import files
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

# Repository checkout, when running from source or an editable install
CHECKOUT_DIR = Path(__file__).parent.parent.parent.parent


def default_source(checkout: Path = CHECKOUT_DIR) -> Path:
    """
    Locate the directory holding commands/ and skills/.

    A source checkout wins. Otherwise the copies bundled into the wheel
    under ``skillsync/data`` are used.
    """
    if (checkout / "commands").is_dir():
        return checkout
    return Path(str(files("skillsync") / "data"))


class Config(BaseModel):
    """
    Source and destination layout for an install run.

    Nothing is read from disk or the environment beyond the home directory:
    the source defaults to the repository checkout (or the documents bundled
    with the package) and the destination is
    always ``<home>/.claude``.
    """

    source: Path = Field(default_factory=default_source)
    home: Path = Field(default_factory=Path.home)
    claude_dir: Path = Field(default=Path(".claude"))
    commands_path: Path = Field(default=Path("commands"))
    skills_path: Path = Field(default=Path("skills"))
    command_file: str = "initialize-project.md"
    skill_pattern: str = "*.md"

    @model_validator(mode="after")
    def check_relative_paths(self) -> "Config":
        """Subdirectory fields are joined onto source and home, so must be relative."""
        for field_name in ("claude_dir", "commands_path", "skills_path"):
            path = getattr(self, field_name)
            if path.is_absolute():
                raise ValueError(f"{field_name} must be relative, got: {path}")
        return self

    @classmethod
    def load(cls, source: Path | None = None, home: Path | None = None) -> "Config":
        """
        Build the install configuration.

        Args:
            source: Directory with commands/ and skills/. Defaults to default_source().
            home: User home directory. Defaults to ``Path.home()``.

        Returns:
            Validated Config instance
        """
        config_data: dict = {}
        if source is not None:
            config_data["source"] = source
        if home is not None:
            config_data["home"] = home
        return cls.model_validate(config_data)

    @property
    def destination(self) -> Path:
        return self.home / self.claude_dir

    @property
    def source_commands_path(self) -> Path:
        return self.source / self.commands_path

    @property
    def source_skills_path(self) -> Path:
        return self.source / self.skills_path

    @property
    def dest_commands_path(self) -> Path:
        return self.destination / self.commands_path

    @property
    def dest_skills_path(self) -> Path:
        return self.destination / self.skills_path

    @property
    def command_name(self) -> str:
        """Slash-command name, e.g. ``initialize-project``."""
        return Path(self.command_file).stem
