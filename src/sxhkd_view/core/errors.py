"""Error types raised by the parsing core."""

from __future__ import annotations

from pathlib import Path


class SxhkdViewError(Exception):
    """Base class for every error the core reports."""


class ConfigLocateError(SxhkdViewError):
    """The config file could not be located or opened."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class LineReadError(SxhkdViewError):
    """Reading a line from an already opened config failed."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class MalformedConfigError(SxhkdViewError):
    """A hotkey line was not followed by a command."""

    def __init__(self, hotkey: str):
        super().__init__(f"malformed configuration: missing command for hotkey `{hotkey}`")
        self.hotkey = hotkey
