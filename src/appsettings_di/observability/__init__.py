"""Structured logging.

Usage:
    >>> from appsettings_di.observability.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Bound settings section", section="MyAppSettings")

Configuration:
    - APPSETTINGS_LOG_LEVEL=DEBUG (logging level, default WARNING)
"""

from .logging import StructuredLogger, get_logger, setup_logging

__all__ = ["StructuredLogger", "get_logger", "setup_logging"]
