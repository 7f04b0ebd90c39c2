"""
Logging for the cart core.

Only the "storefront" logger tree is configured, so an embedding app keeps
control of the root logger. Records still propagate to it.

Usage:
    from storefront.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

PACKAGE_LOGGER = "storefront"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a stdout handler to the package logger once.

    Level comes from the argument, then LOG_LEVEL, then INFO. Production
    (STOREFRONT_ENV=production) gets the compact format.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    package_logger.setLevel(getattr(logging, level_name, logging.INFO))

    if not any(getattr(h, "_storefront", False) for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler._storefront = True
        is_production = os.environ.get("STOREFRONT_ENV") == "production"
        handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if is_production else LOG_FORMAT))
        package_logger.addHandler(handler)

    return package_logger


configure_logging()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Neutralize control characters in user-supplied ids and variants (CWE-117) and truncate."""
    if not value:
        return "N/A"
    safe_value = str(value).replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t").replace("\x00", "")
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "configure_logging",
    "get_logger",
    "sanitize_string_for_logging",
]
