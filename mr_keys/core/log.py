"""Logger configuration bootstrap."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

ROOT_LOGGER_NAME = "mr_keys"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: int = logging.INFO,
    log_file: str | Path | None = None,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Attach console (and optional rotating file) handlers to the package logger."""

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(min(level, file_level) if log_file is not None else level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved = Path(log_file).expanduser().resolve()
        os.makedirs(resolved.parent, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            resolved,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
