"""
Fundify — loguru sink configuration.
Library modules only import ``logger`` from loguru; entrypoints call
``configure_logging`` once at startup.
"""
from __future__ import annotations

import sys
from typing import Optional

from loguru import logger

from backend.config import settings

_CONFIGURED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Replace loguru's default sink with a single stderr sink (idempotent)."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or settings.LOG_LEVEL).upper(),
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} - {message}",
        backtrace=settings.DEBUG,
        diagnose=False,
    )
    _CONFIGURED = True
    logger.debug("Logging configured level={}", level or settings.LOG_LEVEL)
