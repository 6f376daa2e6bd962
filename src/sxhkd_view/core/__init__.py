"""Parsing core: locate, sanitize and assemble sxhkd keybindings."""
