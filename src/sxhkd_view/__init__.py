"""sxhkd-view - Show sxhkd keybindings as a two-column list"""

__version__ = "1.0.0"
__description__ = "Show sxhkd keybindings as a two-column list"

__all__ = ["load_hotkeys", "HotkeyCommand", "__version__"]


def __getattr__(name: str):
    """Lazy import so the parsing core loads without the CLI layer.

    The CLI pulls in the dotenv-backed config, which reads `.env` from
    disk; code embedding the parser should not pay for that.
    """
    if name == "load_hotkeys":
        from .core.controller import load_hotkeys

        return load_hotkeys
    if name == "HotkeyCommand":
        from .core.models import HotkeyCommand

        return HotkeyCommand
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
