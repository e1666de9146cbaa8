"""
Observability module.

Provides logging configuration, correlation ID tracking and request
logging middleware.
"""

from qaboard.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from qaboard.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
]
