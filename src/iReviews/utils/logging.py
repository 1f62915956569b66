"""Logging helpers for iReviews."""

from __future__ import annotations

import logging
import os
from typing import Optional

PACKAGE_LOGGER_NAME = "iReviews"
LEVEL_ENV_VAR = "IREVIEWS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_ROOT: Optional[logging.Logger] = None


def _configured_level() -> int:
    name = os.environ.get(LEVEL_ENV_VAR, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or the child logger called *name*.

    The package logger gets a single stream handler on first use; its level
    comes from ``IREVIEWS_LOG_LEVEL`` and defaults to ``INFO``.
    """

    global _ROOT
    if _ROOT is None:
        _ROOT = logging.getLogger(PACKAGE_LOGGER_NAME)
        if not _ROOT.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            _ROOT.addHandler(handler)
        _ROOT.setLevel(_configured_level())
    if name:
        return _ROOT.getChild(name)
    return _ROOT


logger = get_logger()
