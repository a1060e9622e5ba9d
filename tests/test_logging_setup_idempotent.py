from __future__ import annotations

import logging

from medassist.core.config import Settings
from medassist.core.logging.setup import configure_logging


def test_configure_logging_is_idempotent(tmp_path) -> None:
    logger = logging.getLogger("medassist")
    logger.handlers = []

    configure_logging(Settings(state_dir=tmp_path))
    first_count = len(logger.handlers)

    configure_logging(Settings(state_dir=tmp_path))
    assert len(logger.handlers) == first_count


def test_repeat_call_applies_the_new_level(tmp_path) -> None:
    logger = logging.getLogger("medassist")
    logger.handlers = []

    configure_logging(Settings(state_dir=tmp_path, log_level="warning"))
    assert logger.level == logging.WARNING

    configure_logging(Settings(state_dir=tmp_path, log_level="DEBUG"))
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    logger.handlers = []
