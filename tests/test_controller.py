import pytest

from sxhkd_view.core.controller import KeybindingController, load_hotkeys
from sxhkd_view.core.errors import ConfigLocateError, MalformedConfigError
from sxhkd_view.core.models import HotkeyCommand
from sxhkd_view.core.ports import RecordView

SXHKDRC = """\
# terminal emulator
super + Return
\turxvt

# program launcher
super + @space
    dmenu_run \\
        -fn monospace
"""


class _View(RecordView):
    def __init__(self):
        self.shown = []
        self.errors = []

    def show(self, records) -> None:
        self.shown.append(records)

    def error(self, message: str) -> None:
        self.errors.append(message)


def _write_default_config(home, text=SXHKDRC):
    path = home / ".config" / "sxhkd" / "sxhkdrc"
    path.parent.mkdir(parents=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_load_hotkeys_from_explicit_path(tmp_path):
    path = tmp_path / "sxhkdrc"
    path.write_text(SXHKDRC, encoding="utf-8")

    assert load_hotkeys(path) == (
        HotkeyCommand("super + Return", "urxvt"),
        HotkeyCommand("super + @space", "dmenu_run -fn monospace"),
    )


def test_load_hotkeys_from_home(tmp_path):
    _write_default_config(tmp_path)
    assert len(load_hotkeys(home=str(tmp_path))) == 2


def test_load_hotkeys_without_home_or_path():
    with pytest.raises(ConfigLocateError):
        load_hotkeys()


def test_controller_happy_path(tmp_path):
    _write_default_config(tmp_path)
    view = _View()

    assert KeybindingController(view).show(home=str(tmp_path)) is True
    assert view.shown == [load_hotkeys(home=str(tmp_path))]
    assert view.errors == []


def test_controller_missing_file(tmp_path):
    view = _View()
    path = tmp_path / "sxhkdrc"

    assert KeybindingController(view).show(path) is False
    assert view.shown == []
    assert len(view.errors) == 1
    assert str(path) in view.errors[0]


def test_controller_malformed_config_shows_nothing(tmp_path):
    path = tmp_path / "sxhkdrc"
    path.write_text("super + a\n    echo a\nsuper + b\n", encoding="utf-8")
    view = _View()

    assert KeybindingController(view).show(path) is False
    assert view.shown == []
    assert view.errors == ["malformed configuration: missing command for hotkey `super + b`"]


def test_empty_config_shows_empty_list(tmp_path):
    path = tmp_path / "sxhkdrc"
    path.write_text("# nothing bound yet\n\n", encoding="utf-8")
    view = _View()

    assert KeybindingController(view).show(path) is True
    assert view.shown == [()]


def test_carriage_return_inside_line_leaves_hotkey_without_command(tmp_path):
    path = tmp_path / "sxhkdrc"
    path.write_bytes(b"super + a\recho a\n")

    with pytest.raises(MalformedConfigError):
        load_hotkeys(path)
