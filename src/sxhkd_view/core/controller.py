"""Core orchestration for sxhkd-view.

Keeps the locate -> sanitize -> assemble pipeline in one place and hands
the result to a RecordView port, decoupled from how it is displayed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .assembler import assemble_records
from .errors import SxhkdViewError
from .locator import open_config, resolve_config_path
from .models import HotkeyCommand
from .ports import RecordView
from .sanitizer import clean_config_file

logger = logging.getLogger(__name__)


def load_hotkeys(
    config_path: str | Path | None = None, home: str | None = None
) -> tuple[HotkeyCommand, ...]:
    """Read the sxhkd config and return its keybindings in file order.

    Args:
        config_path: Explicit config file; overrides the default location.
        home: Home directory used for the default location. Read from the
            environment by the caller, never here.
    """
    path = resolve_config_path(config_path, home)
    logger.debug("Reading sxhkd config from %s", path)

    lines = clean_config_file(open_config(path))
    logger.debug("%d config lines after removing blanks and comments", len(lines))

    records = assemble_records(lines)
    logger.debug("Assembled %d keybindings", len(records))
    return records


class KeybindingController:
    """Loads keybindings once and passes them to a view."""

    def __init__(self, view: RecordView):
        self._view = view

    def show(self, config_path: str | Path | None = None, home: str | None = None) -> bool:
        """Load and display keybindings; returns False if nothing was shown."""
        try:
            records = load_hotkeys(config_path, home)
        except SxhkdViewError as e:
            # The view reports the message; keep the traceback for --debug
            logger.debug("Loading keybindings failed", exc_info=True)
            self._view.error(str(e))
            return False

        self._view.show(records)
        return True
