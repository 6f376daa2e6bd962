"""Terminal presentation: keybindings as a two-column table."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from ..config import config
from ..core.models import HotkeyCommand

ELLIPSIS = "…"
COLUMN_GAP = "  "


def _fit(line: str, width: int | None) -> str:
    if width is None or len(line) <= width:
        return line
    if width <= len(ELLIPSIS):
        return line[:width]
    return line[: width - len(ELLIPSIS)] + ELLIPSIS


def format_table(
    records: Sequence[HotkeyCommand],
    width: int | None = None,
    title: str = config.TITLE,
) -> list[str]:
    """Render records as lines: title, header, rule, then one row per record.

    The hotkey column is padded to its widest entry. With `width` set, every
    line is cut to fit instead of wrapping.
    """
    headers = (config.HOTKEY_COLUMN, config.COMMAND_COLUMN)
    key_width = max([len(headers[0])] + [len(r.hotkey) for r in records])

    rows = [f"{headers[0]:<{key_width}}{COLUMN_GAP}{headers[1]}"]
    rows.append(f"{'-' * key_width}{COLUMN_GAP}{'-' * len(headers[1])}")
    rows.extend(f"{r.hotkey:<{key_width}}{COLUMN_GAP}{r.command}" for r in records)

    return [_fit(line.expandtabs().rstrip(), width) for line in [title] + rows]


class TerminalTableView:
    """RecordView printing to a text stream."""

    def __init__(
        self,
        stream: TextIO | None = None,
        err_stream: TextIO | None = None,
        width: int | None = None,
    ):
        self._stream = stream
        self._err_stream = err_stream
        self._width = width

    def show(self, records: Sequence[HotkeyCommand]) -> None:
        out = self._stream or sys.stdout
        for line in format_table(records, width=self._width):
            print(line, file=out)

    def error(self, message: str) -> None:
        print(f"sxhkd-view: {message}", file=self._err_stream or sys.stderr)
