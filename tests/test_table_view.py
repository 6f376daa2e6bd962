import io

from sxhkd_view.adapters.table_view import TerminalTableView, format_table
from sxhkd_view.core.models import HotkeyCommand

RECORDS = (
    HotkeyCommand("super + Return", "alacritty"),
    HotkeyCommand("super + w", "bspc node -c"),
)


def test_format_table_pads_hotkey_column():
    assert format_table(RECORDS) == [
        "KEYBINDINGS",
        "Hotkey          Command",
        "--------------  -------",
        "super + Return  alacritty",
        "super + w       bspc node -c",
    ]


def test_format_table_empty():
    assert format_table(()) == ["KEYBINDINGS", "Hotkey  Command", "------  -------"]


def test_format_table_cuts_to_width():
    lines = format_table(RECORDS, width=10)
    assert lines[3] == "super + R…"
    assert all(len(line) <= 10 for line in lines)


def test_view_prints_rows_in_order():
    out = io.StringIO()
    TerminalTableView(stream=out).show(RECORDS)

    lines = out.getvalue().splitlines()
    assert lines[-2].startswith("super + Return")
    assert lines[-1].startswith("super + w")


def test_view_error_goes_to_error_stream():
    out, err = io.StringIO(), io.StringIO()
    TerminalTableView(stream=out, err_stream=err).error("boom")

    assert out.getvalue() == ""
    assert err.getvalue() == "sxhkd-view: boom\n"


def test_format_table_counts_tabs_as_columns():
    lines = format_table((HotkeyCommand("k", "a\t\tb c d e f"),), width=12)
    assert all("\t" not in line for line in lines)
    assert all(len(line) <= 12 for line in lines)
