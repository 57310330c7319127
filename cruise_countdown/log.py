"""Logging setup shared by the preview scripts."""

from __future__ import annotations

import logging
from pathlib import Path

from cruise_countdown.config import LoggingConfig

LOG_FILE_NAME = "countdown.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
HANDLER_NAMES = ("cruise_countdown.console", "cruise_countdown.file")


def configure_logging(config: LoggingConfig) -> Path:
    """Attach console and file handlers to the root logger; returns the log file path."""
    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(config.level.upper())
    # Reconfiguring replaces our handlers instead of stacking duplicates.
    for handler in list(root.handlers):
        if handler.get_name() in HANDLER_NAMES:
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    console = logging.StreamHandler()
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    for name, handler in zip(HANDLER_NAMES, (console, file_handler)):
        handler.set_name(name)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return log_path


__all__ = ["configure_logging"]
