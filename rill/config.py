"""Persistent CLI display settings."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

log = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("~/.rill/config.json")


class Settings(BaseModel):
    """Display settings stored as JSON in ~/.rill/config.json."""

    show_full_tool_output: bool = False
    min_priority: float = 0.0
    show_thinking: bool = False

    config_file: Path = Field(default_factory=lambda: DEFAULT_CONFIG_FILE.expanduser(), exclude=True)

    @classmethod
    def load(cls, path: Path | None = None) -> Settings:
        """Load settings, falling back to defaults if the file is missing or bad."""
        path = path if path is not None else DEFAULT_CONFIG_FILE.expanduser()
        if not path.exists():
            return cls(config_file=path)
        try:
            settings = cls.model_validate_json(path.read_text())
        except (OSError, ValueError) as e:
            log.warning("ignoring unreadable settings file %s: %s", path, e)
            return cls(config_file=path)
        settings.config_file = path
        return settings

    def save(self) -> bool:
        """Write settings to disk. Returns False if the write failed."""
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            self.config_file.write_text(self.model_dump_json(indent=2))
        except OSError as e:
            log.warning("failed to save settings to %s: %s", self.config_file, e)
            return False
        return True

    def toggle_full_tool_output(self) -> bool:
        """Flip the full-output toggle and persist it."""
        self.show_full_tool_output = not self.show_full_tool_output
        self.save()
        return self.show_full_tool_output
