"""
Log formatters for wws_api: one JSON object per record, or colored text.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# LogRecord attributes that are not ``extra=`` fields
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


class StructuredFormatter(logging.Formatter):
    """
    Render each record as a single JSON line.

    Values passed through ``extra=`` (for example ``operation_name``) become
    top-level keys.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        entry.update(
            (key, value) for key, value in vars(record).items() if key not in _RESERVED_ATTRS
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


class ColoredFormatter(logging.Formatter):
    """Text formatter that colors the level name on terminals."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        use_colors: Optional[bool] = None,
    ):
        """
        Args:
            fmt: Log format string
            datefmt: Date format string
            use_colors: Force colors on or off; detected from stdout when None
        """
        super().__init__(fmt, datefmt)
        if use_colors is None:
            use_colors = sys.platform != "win32" and getattr(sys.stdout, "isatty", lambda: False)()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = self.COLORS.get(record.levelname) if self.use_colors else None
        if not color:
            return text
        return text.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)
