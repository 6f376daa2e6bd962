"""Group cleaned config lines into hotkey/command records."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from .errors import MalformedConfigError
from .models import HotkeyCommand

CONTINUATION = "\\"


def assemble_records(lines: Iterable[str]) -> tuple[HotkeyCommand, ...]:
    """Pair each hotkey line with the command lines that follow it.

    A command line ending in a backslash continues on the next line. The
    backslashes and any whitespace before them are stripped, and fragments
    are joined with exactly one space. The input is copied, never consumed
    in place.

    Raises:
        MalformedConfigError: a hotkey is the last line or is followed only
            by continuation lines
    """
    pending = deque(lines)
    records: list[HotkeyCommand] = []

    while pending:
        hotkey = pending.popleft()
        fragments: list[str] = []
        while True:
            if not pending:
                raise MalformedConfigError(hotkey)
            fragment = pending.popleft()
            if not fragment.endswith(CONTINUATION):
                fragments.append(fragment)
                break
            # A bare "\" line only continues; it adds no text
            remainder = fragment.rstrip(CONTINUATION).rstrip()
            if remainder:
                fragments.append(remainder)
        records.append(HotkeyCommand(hotkey=hotkey, command=" ".join(fragments)))

    return tuple(records)
