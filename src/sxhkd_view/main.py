#!/usr/bin/env python3
"""sxhkd-view: list the keybindings of an sxhkd config"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys

from . import __version__
from .adapters.config_env import load_app_config
from .adapters.table_view import TerminalTableView
from .core.controller import KeybindingController


def parse_args(argv=None):
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="sxhkd-view",
        description="Show the hotkeys and commands of an sxhkd config.",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to the sxhkd config (default: $HOME/.config/sxhkd/sxhkdrc).",
    )
    parser.add_argument(
        "--gui", action="store_true", help="Show the keybindings in a GTK window instead of the terminal."
    )
    parser.add_argument("--debug", action="store_true", default=None, help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def _terminal_width() -> int | None:
    if not sys.stdout.isatty():
        return None
    return shutil.get_terminal_size().columns


def _gtk_view():
    """Import the GTK adapter on demand so the CLI runs without PyGObject."""
    from .adapters.gtk_view import GtkListView

    return GtkListView()


def main(argv=None) -> int:
    args = parse_args(argv)
    app_config = load_app_config(config_path=args.config, debug=args.debug)

    logging.basicConfig(
        level=logging.DEBUG if app_config.debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    view = TerminalTableView(width=_terminal_width())
    if args.gui:
        try:
            view = _gtk_view()
        except (ImportError, ValueError) as e:
            # ValueError: gi is installed but the Gtk 3.0 typelib is not
            view.error(f"GTK view unavailable ({e}); install it with pip install 'sxhkd-view[gui]'")
            return 1

    controller = KeybindingController(view)
    ok = controller.show(app_config.config_path, home=app_config.home)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
