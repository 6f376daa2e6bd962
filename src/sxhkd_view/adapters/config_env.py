"""Env configuration adapter producing a structured AppConfig."""

from __future__ import annotations

import os

from ..config import config as env_config
from ..core.config_model import AppConfig


def load_app_config(config_path: str | None = None, debug: bool | None = None) -> AppConfig:
    return AppConfig(
        home=os.environ.get("HOME") or None,
        config_path=config_path,
        debug=env_config.DEBUG if debug is None else debug,
    )
