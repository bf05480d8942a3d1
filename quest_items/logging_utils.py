"""Logging setup driven by the config logging section."""
from __future__ import annotations

import logging

from quest_items.config import AppConfig

_CONFIGURED = False


def configure_logging(cfg: AppConfig, *, force: bool = False) -> None:
    """Apply the configured level and format to the root logger once."""
    global _CONFIGURED
    if _CONFIGURED and not force:
        return
    level = logging.getLevelName(cfg.logging.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {cfg.logging.level}")
    logging.basicConfig(level=level, format=cfg.logging.fmt, force=force)
    _CONFIGURED = True
