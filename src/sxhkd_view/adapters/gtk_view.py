"""GTK presentation: keybindings in a scrollable two-column list."""

from __future__ import annotations

import sys
from typing import Sequence

import gi

gi.require_version("Gtk", "3.0")
from gi.repository import Gdk, Gtk

from ..config import config
from ..core.models import HotkeyCommand

HOTKEY_COL = 0
COMMAND_COL = 1


def create_model(records: Sequence[HotkeyCommand]) -> Gtk.ListStore:
    """Build a two-string-column store, one row per record in input order."""
    store = Gtk.ListStore(str, str)
    for record in records:
        store.append([record.hotkey, record.command])
    return store


def add_columns(treeview: Gtk.TreeView) -> None:
    for title, index in ((config.HOTKEY_COLUMN, HOTKEY_COL), (config.COMMAND_COLUMN, COMMAND_COL)):
        renderer = Gtk.CellRendererText()
        column = Gtk.TreeViewColumn(title, renderer, text=index)
        treeview.append_column(column)


class KeybindingsWindow(Gtk.Window):
    """Read-only dialog listing hotkeys; scrolls vertically only."""

    def __init__(self, records: Sequence[HotkeyCommand]):
        super().__init__(title=config.WINDOW_TITLE)
        self.set_border_width(10)
        self.set_default_size(*config.WINDOW_SIZE)
        self.set_position(Gtk.WindowPosition.CENTER)
        self.set_type_hint(Gdk.WindowTypeHint.DIALOG)

        vbox = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=8)
        self.add(vbox)
        vbox.add(Gtk.Label(label=config.TITLE))

        scrolled = Gtk.ScrolledWindow()
        scrolled.set_shadow_type(Gtk.ShadowType.ETCHED_IN)
        scrolled.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        vbox.add(scrolled)

        treeview = Gtk.TreeView(model=create_model(records))
        treeview.set_vexpand(True)
        add_columns(treeview)
        scrolled.add(treeview)

        self.connect("key-press-event", self.on_key_press)

    def on_key_press(self, widget, event):
        if event.keyval == Gdk.KEY_Escape:
            self.destroy()


class GtkListView:
    """RecordView opening a window and blocking until it is closed."""

    def show(self, records: Sequence[HotkeyCommand]) -> None:
        win = KeybindingsWindow(records)
        win.connect("destroy", Gtk.main_quit)
        win.show_all()
        Gtk.main()

    def error(self, message: str) -> None:
        print(f"sxhkd-view: {message}", file=sys.stderr)
