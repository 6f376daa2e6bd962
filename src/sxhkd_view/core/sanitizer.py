"""Drop blank and comment lines from a raw config stream."""

from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import Iterable, TextIO

from .errors import LineReadError

COMMENT_PREFIX = "#"


def clean_lines(lines: Iterable[str], path: Path | None = None) -> deque[str]:
    """Return the trimmed, non-blank, non-comment lines of `lines` in order.

    Only whole-line comments are dropped; a `#` later in a line is kept.
    A failing read is raised as LineReadError, never skipped.
    """
    cleaned: deque[str] = deque()
    try:
        for line in lines:
            stripped = line.strip()
            if not stripped or stripped.startswith(COMMENT_PREFIX):
                continue
            cleaned.append(stripped)
    except (OSError, UnicodeDecodeError) as e:
        where = f" {path}" if path is not None else ""
        raise LineReadError(f"Failed to read sxhkd config{where}: {e}", path) from e
    return cleaned


def clean_config_file(handle: TextIO) -> deque[str]:
    """Drain an open config handle through `clean_lines` and close it."""
    name = getattr(handle, "name", None)
    path = Path(name) if isinstance(name, str) else None
    with handle:
        return clean_lines(handle, path)
