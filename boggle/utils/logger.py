"""Logging utilities for the Boggle game core."""

from __future__ import annotations

import logging
from typing import Optional, TextIO, Union

ROOT_LOGGER_NAME = "boggle"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def parse_level(level: Union[int, str], default: int = logging.INFO) -> int:
    """Map ``"debug"``/``"WARNING"``/``20`` style values to a logging level."""

    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else default


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Install a single stream handler on the root logger.

    Game transitions fire at input speed, so selection-level chatter stays at
    DEBUG and only lifecycle events are emitted at INFO. Embedders that
    already configure logging can skip this call entirely.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(parse_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``boggle`` namespace, configuring defaults once."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or ROOT_LOGGER_NAME)
