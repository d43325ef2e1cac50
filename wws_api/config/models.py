"""
Configuration models for wws_api.

WWSConfig holds everything the GraphQL client needs besides the access
token; LoggingConfig describes the handlers ``setup_logging`` installs.
"""

from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from .. import __version__

DEFAULT_ENDPOINT = "https://api.watsonwork.ibm.com/graphql"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseModel):
    """Console and file logging settings."""

    level: LogLevel = LogLevel.INFO
    format: str = DEFAULT_LOG_FORMAT
    enable_console: bool = True
    enable_structured: bool = Field(
        default=False, description="Emit JSON lines instead of colored text"
    )

    enable_file: bool = False
    file_path: Optional[Path] = None
    max_file_size: int = Field(default=10 * 1024 * 1024, gt=0, description="Bytes before rotation")
    backup_count: int = Field(default=5, ge=0, description="Rotated files kept")

    component_levels: Dict[str, LogLevel] = Field(
        default_factory=dict,
        description="Levels for individual loggers, e.g. {'wws_api.graphql': 'DEBUG'}",
    )


class WWSConfig(BaseModel):
    """Configuration for the Watson Workspace GraphQL client."""

    endpoint: HttpUrl = Field(
        default=DEFAULT_ENDPOINT,
        validate_default=True,
        description="Workspace GraphQL endpoint",
    )

    timeout: float = Field(default=30.0, ge=1.0, description="Request timeout in seconds")
    max_retries: int = Field(default=3, ge=0, description="Retries after the first attempt")
    retry_delay: float = Field(
        default=1.0, ge=0.0, description="Backoff base in seconds, doubled per retry"
    )

    headers: Dict[str, str] = Field(
        default_factory=dict, description="Extra headers sent with every request"
    )
    user_agent: str = f"wws-api/{__version__}"

    pretty_queries: bool = Field(
        default=False, description="Send queries in indented multi-line form"
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(validate_assignment=True, extra="forbid")
