"""
Logging setup for wws_api.

This module provides structured or colored console logging, rotating log
files, and masking of access tokens in log output.
"""

from .filters import ComponentFilter, SensitiveDataFilter
from .formatters import ColoredFormatter, StructuredFormatter
from .manager import LoggingManager, cleanup_logging, get_logger, setup_logging

__all__ = [
    "LoggingManager",
    "setup_logging",
    "get_logger",
    "cleanup_logging",
    "StructuredFormatter",
    "ColoredFormatter",
    "SensitiveDataFilter",
    "ComponentFilter",
]
