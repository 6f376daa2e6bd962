"""Locate and open the sxhkd config file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from .errors import ConfigLocateError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_RELPATH = Path(".config") / "sxhkd" / "sxhkdrc"


def resolve_config_path(config_path: str | Path | None = None, home: str | None = None) -> Path:
    """Return the config path to read.

    An explicit path is used verbatim (no `~` expansion, no existence check).
    Without one, the default lives under `home`, which must be set.

    Raises:
        ConfigLocateError: no explicit path was given and `home` is unset
    """
    if config_path is not None:
        return Path(config_path)
    if not home:
        raise ConfigLocateError("Cannot locate sxhkd config: HOME is not set")
    return Path(home) / DEFAULT_CONFIG_RELPATH


def open_config(path: str | Path) -> TextIO:
    """Open `path` for line-by-line reading.

    The caller owns the returned handle; `clean_config_file` closes it.
    """
    path = Path(path)
    try:
        # Split on "\n" only, as sxhkd does; strip() drops the "\r" of CRLF
        handle = open(path, encoding="utf-8", newline="\n")
    except OSError as e:
        raise ConfigLocateError(f"Cannot open sxhkd config {path}: {e.strerror or e}", path) from e
    logger.debug("Opened sxhkd config %s", path)
    return handle
