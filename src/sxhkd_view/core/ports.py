"""Core ports (interfaces) for sxhkd-view.

The parsing core only knows the presentation layer through this protocol,
so a terminal table, a GUI list or a test double can consume the records.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from .models import HotkeyCommand


@runtime_checkable
class RecordView(Protocol):
    """Displays assembled keybindings."""

    def show(self, records: Sequence["HotkeyCommand"]) -> None:
        """Display records in the given order."""

    def error(self, message: str) -> None:
        """Report a failure to the user."""
