"""Logging helper shared by the percolation modules."""

from __future__ import annotations

import logging
from pathlib import Path

_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_logger(name: str, file_path: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """Return configured logger, attaching ``file_path`` handler if provided."""

    logger = logging.getLogger(name)
    formatter = logging.Formatter(_FORMAT)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if file_path and not any(
        isinstance(h, logging.FileHandler) and Path(h.baseFilename) == Path(file_path).resolve()
        for h in logger.handlers
    ):
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        f_handler = logging.FileHandler(file_path, encoding="utf-8")
        f_handler.setFormatter(formatter)
        logger.addHandler(f_handler)
    logger.setLevel(level)
    return logger


def set_log_level(level: int, prefix: str = "percolation") -> None:
    """Apply ``level`` to every logger created under ``prefix``."""
    for name, obj in logging.Logger.manager.loggerDict.items():
        if name.startswith(prefix) and isinstance(obj, logging.Logger):
            obj.setLevel(level)


__all__ = ["get_logger", "set_log_level"]
