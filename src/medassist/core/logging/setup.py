from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from medassist.core.config import Settings

from .json_formatter import JSONFormatter

_LOGGER_NAME = "medassist"
_HANDLER_ATTR = "_medassist_handler"


def _owned(logger: logging.Logger, role: str) -> list[logging.Handler]:
    return [handler for handler in logger.handlers if getattr(handler, _HANDLER_ATTR, None) == role]


def _file_handler(settings: Settings, formatter: logging.Formatter) -> RotatingFileHandler:
    settings.log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=settings.log_path,
        maxBytes=settings.log_max_bytes,
        backupCount=settings.log_backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_ATTR, "file")
    return handler


def configure_logging(settings: Settings) -> logging.Logger:
    """Point the ``medassist`` logger at stdout, and at a rotating file when enabled.

    Safe to call again with new settings: the level is re-applied and the file
    handler is swapped when the path or rotation limits change, or dropped when
    file logging is turned off.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(settings.log_level)
    logger.propagate = False

    formatter = JSONFormatter()

    if not _owned(logger, "stdout"):
        stdout_handler = logging.StreamHandler(stream=sys.stdout)
        stdout_handler.setFormatter(formatter)
        setattr(stdout_handler, _HANDLER_ATTR, "stdout")
        logger.addHandler(stdout_handler)

    for handler in _owned(logger, "file"):
        keep = (
            settings.log_to_file
            and isinstance(handler, RotatingFileHandler)
            and handler.baseFilename == str(settings.log_path.resolve())
            and handler.maxBytes == settings.log_max_bytes
            and handler.backupCount == settings.log_backup_count
        )
        if not keep:
            logger.removeHandler(handler)
            handler.close()

    if settings.log_to_file and not _owned(logger, "file"):
        logger.addHandler(_file_handler(settings, formatter))

    return logger
