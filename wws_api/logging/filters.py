"""
Logging filters for wws_api.

SensitiveDataFilter keeps access tokens, app secrets and user emails out of
log output; ComponentFilter limits a handler to one part of the package.
"""

import logging
import re
from typing import Iterable, List, Optional, Pattern, Tuple

MASK = "***MASKED***"

_RULES: List[Tuple[Pattern[str], str]] = [
    # Authorization headers; JWTs contain dots and dashes
    (re.compile(r"(bearer\s+)[A-Za-z0-9\-_.+/=]{8,}", re.IGNORECASE), rf"\1{MASK}"),
    (
        re.compile(
            r'((?:access[_-]?token|app[_-]?secret|client[_-]?secret|token|secret)'
            r'["\']?\s*[:=]\s*["\']?)[^\s"\',}]+',
            re.IGNORECASE,
        ),
        rf"\1{MASK}",
    ),
    # user:password@host
    (re.compile(r"(https?://[^:/\s]+):[^@\s]+@", re.IGNORECASE), rf"\1:{MASK}@"),
    (re.compile(r"\b[a-zA-Z0-9._%+-]+@([a-zA-Z0-9.-]+\.[a-zA-Z]{2,})\b"), r"***@\1"),
]


class SensitiveDataFilter(logging.Filter):
    """Mask credentials and email addresses in formatted log messages."""

    def __init__(self) -> None:
        super().__init__()
        self.rules = list(_RULES)

    def mask(self, message: str) -> str:
        for pattern, replacement in self.rules:
            message = pattern.sub(replacement, message)
        return message

    def filter(self, record: logging.LogRecord) -> bool:
        # Arguments are merged first so masked values cannot be reinserted
        record.msg = self.mask(record.getMessage())
        record.args = ()
        return True


class ComponentFilter(logging.Filter):
    """Pass only records from loggers under ``component`` at the allowed levels."""

    ALL_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    def __init__(self, component: str, allowed_levels: Optional[Iterable[str]] = None) -> None:
        super().__init__(component)
        self.component = component
        self.allowed_levels = frozenset(allowed_levels or self.ALL_LEVELS)

    def filter(self, record: logging.LogRecord) -> bool:
        return super().filter(record) and record.levelname in self.allowed_levels
