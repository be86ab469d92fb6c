"""Logging setup."""

from __future__ import annotations

from typing import Optional

import structlog

from hal_resources.config.settings import settings


def configure_logging(log_level: Optional[str] = None) -> None:
    """Configure structlog with the given level, or ``HAL_LOG_LEVEL`` when omitted."""
    level = (log_level or settings.LOG_LEVEL).lower()
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(min_level=level))
