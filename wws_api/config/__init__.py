"""
Configuration management for wws_api.

This module provides the client and logging configuration models and the
loader reading them from files and environment variables.
"""

from .loader import ConfigLoader, load_config
from .models import DEFAULT_ENDPOINT, LoggingConfig, LogLevel, WWSConfig

__all__ = [
    "ConfigLoader",
    "load_config",
    "WWSConfig",
    "LoggingConfig",
    "LogLevel",
    "DEFAULT_ENDPOINT",
]
