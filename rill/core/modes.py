"""Display mode: whether long values are truncated."""

from __future__ import annotations

from enum import Enum


class DisplayMode(Enum):
    """COMPACT truncates to the terminal width; FULL never does."""

    COMPACT = "compact"
    FULL = "full"

    @classmethod
    def resolve(cls, full: bool, debug: bool) -> DisplayMode:
        """Combine the persisted full-output toggle with the debug flag."""
        return cls.FULL if full or debug else cls.COMPACT

    @property
    def truncates(self) -> bool:
        return self is DisplayMode.COMPACT
