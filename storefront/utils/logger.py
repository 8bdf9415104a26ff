"""Centralized logger configuration.

Usage:
    from storefront.utils.logger import get_logger
    logger = get_logger(__name__)

This avoids sprinkling basicConfig calls throughout the codebase. The level
comes from Settings.log_level (SF_LOG_LEVEL) unless one is passed in.
"""
import logging
from typing import Optional

from storefront.config import get_settings


def setup_logging(level: Optional[str] = None) -> None:
    level = level or get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
