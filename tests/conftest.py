"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from rill.config import Settings
from rill.ui.output import SessionOutput


@pytest.fixture
def console_factory():
    """Build consoles that write plain text into a StringIO."""

    def _make(width: int = 80, terminal: bool = False) -> Console:
        return Console(
            file=io.StringIO(),
            force_terminal=terminal,
            width=width,
            color_system=None,
            legacy_windows=False,
        )

    return _make


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings stored under a temporary directory."""
    return Settings(config_file=tmp_path / "config.json")


@pytest.fixture
def output(settings, console_factory) -> SessionOutput:
    """SessionOutput on a non-terminal console."""
    return SessionOutput(console=console_factory(), settings=settings)
