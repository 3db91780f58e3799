"""Path shortening for compact tool-call display."""

from __future__ import annotations

import os
from pathlib import PurePosixPath

MAX_PATH_LEN = 40


def _replace_home(path: str, home: str | None) -> str:
    """Swap a leading home directory for ~/ (whole components only)."""
    if not home:
        return path
    p = PurePosixPath(path)
    if not p.is_relative_to(home):
        return path
    rel = p.relative_to(home)
    return "~/" if rel == PurePosixPath(".") else f"~/{rel}"


def shorten_path(path: str, debug: bool, home: str | None = None) -> str:
    """Shorten a path for display.

    The home directory becomes ``~``. Paths still longer than 40 characters
    keep their last two components and collapse everything in between to its
    first character, e.g. ``/v/l/p/w/m/components/file.txt``. In debug mode the
    path is returned untouched.
    """
    if debug:
        return path

    if home is None:
        home = os.environ.get("HOME")
    display = _replace_home(path, home)
    if len(display) <= MAX_PATH_LEN:
        return display

    parts = PurePosixPath(display).parts
    if display.startswith("./"):
        # keep a leading "." component, which parts normalises away
        parts = (".",) + parts
    if len(parts) <= 3:
        return display

    rooted = display.startswith("/")
    last = len(parts) - 1
    out = []
    for i, part in enumerate(parts):
        if i == 0 and rooted:
            out.append("")
        elif i >= last - 1:
            out.append(part)
        else:
            out.append(part[:1])
    return "/".join(out)
