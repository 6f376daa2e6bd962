"""Configuration for sxhkd-view"""

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Minimal configuration"""

    # Presentation
    TITLE = "KEYBINDINGS"
    WINDOW_TITLE = "SXHKD Keybindings"
    WINDOW_SIZE = (400, 850)
    HOTKEY_COLUMN = "Hotkey"
    COMMAND_COLUMN = "Command"

    DEBUG = os.getenv("DEBUG", "false").lower() == "true"


config = Config()
