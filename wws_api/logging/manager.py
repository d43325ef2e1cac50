"""
Logging manager for wws_api.

Installs the handlers described by a LoggingConfig on the root logger and
removes exactly those handlers again on cleanup, so an application's own
logging setup is left alone.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Optional

from ..config.models import LoggingConfig, LogLevel
from .filters import ComponentFilter, SensitiveDataFilter
from .formatters import ColoredFormatter, StructuredFormatter


def _level(level: LogLevel) -> int:
    return getattr(logging, LogLevel(level).value)


def _formatter(config: LoggingConfig, colored: bool) -> logging.Formatter:
    if config.enable_structured:
        return StructuredFormatter()
    if colored:
        return ColoredFormatter(config.format)
    return logging.Formatter(config.format)


class LoggingManager:
    """Owns the handlers wws_api adds to the root logger."""

    def __init__(self) -> None:
        self._configured = False
        self._handlers: Dict[str, logging.Handler] = {}

    def setup_logging(self, config: LoggingConfig) -> None:
        """
        Configure logging, replacing anything a previous call installed.

        Every handler masks access tokens and secrets before output.

        Args:
            config: Logging configuration
        """
        if self._configured:
            self.cleanup()

        level = _level(config.level)
        logging.getLogger().setLevel(level)

        if config.enable_console:
            console = logging.StreamHandler(sys.stdout)
            console.setFormatter(_formatter(config, colored=True))
            self._install("console", console, level)

        if config.enable_file and config.file_path:
            log_path = Path(str(config.file_path))
            log_path.parent.mkdir(parents=True, exist_ok=True)
            rotating = logging.handlers.RotatingFileHandler(
                filename=str(log_path),
                maxBytes=config.max_file_size,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
            rotating.setFormatter(_formatter(config, colored=False))
            self._install("file", rotating, level)

        for component, component_level in config.component_levels.items():
            logging.getLogger(component).setLevel(_level(component_level))

        self._configured = True
        logging.getLogger(__name__).debug(
            "Logging configured with handlers: %s", ", ".join(self._handlers) or "none"
        )

    def _install(self, name: str, handler: logging.Handler, level: int) -> None:
        handler.setLevel(level)
        handler.addFilter(SensitiveDataFilter())
        self.add_handler(name, handler)

    def add_component_handler(self, component: str, handler: logging.Handler) -> None:
        """
        Attach a handler that only receives one component's records.

        Args:
            component: Logger name prefix, e.g. ``wws_api.graphql``
            handler: Logging handler
        """
        handler.addFilter(ComponentFilter(component))
        self.add_handler(f"component:{component}", handler)

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)

    def set_level(self, level: LogLevel, component: Optional[str] = None) -> None:
        """Change the level of one component, or of the root logger and our handlers."""
        if component:
            logging.getLogger(component).setLevel(_level(level))
            return

        logging.getLogger().setLevel(_level(level))
        for handler in self._handlers.values():
            handler.setLevel(_level(level))

    def add_handler(self, name: str, handler: logging.Handler) -> None:
        logging.getLogger().addHandler(handler)
        self._handlers[name] = handler

    def remove_handler(self, name: str) -> None:
        handler = self._handlers.pop(name, None)
        if handler is not None:
            logging.getLogger().removeHandler(handler)
            handler.close()

    def cleanup(self) -> None:
        """Remove and close every handler this manager installed."""
        for name in list(self._handlers):
            self.remove_handler(name)
        self._configured = False

    def is_configured(self) -> bool:
        return self._configured


_logging_manager = LoggingManager()


def setup_logging(config: LoggingConfig) -> LoggingManager:
    """
    Configure wws_api logging through the shared manager.

    Args:
        config: Logging configuration, usually ``WWSConfig().logging``

    Returns:
        The shared logging manager
    """
    _logging_manager.setup_logging(config)
    return _logging_manager


def get_logger(name: str) -> logging.Logger:
    return _logging_manager.get_logger(name)


def cleanup_logging() -> None:
    _logging_manager.cleanup()
