"""Record types produced by the parsing pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HotkeyCommand:
    """One keybinding from an sxhkd config.

    Attributes:
        hotkey: The raw key-chord definition line, unparsed
        command: The assembled shell command, continuation lines joined
            with a single space and their trailing backslashes removed
    """

    hotkey: str
    command: str
