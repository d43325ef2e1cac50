"""
Configuration loader for wws_api.

Settings come from one JSON or YAML file and from environment variables
prefixed with ``WWS_``; environment values override the file.

Example ``wws_api.yaml``:

```yaml
endpoint: https://api.watsonwork.ibm.com/graphql
timeout: 20
logging:
  level: DEBUG
```
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from .models import WWSConfig

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = ("wws_api.yaml", "wws_api.yml", "wws_api.json")
HOME_CONFIG_NAMES = ("config.yaml", "config.yml", "config.json")

# Environment variable suffix -> path into the config dictionary
ENV_SETTINGS: Dict[str, Tuple[str, ...]] = {
    "ENDPOINT": ("endpoint",),
    "TIMEOUT": ("timeout",),
    "MAX_RETRIES": ("max_retries",),
    "RETRY_DELAY": ("retry_delay",),
    "USER_AGENT": ("user_agent",),
    "PRETTY_QUERIES": ("pretty_queries",),
    "LOG_LEVEL": ("logging", "level"),
    "LOG_FILE": ("logging", "file_path"),
    "LOG_FORMAT": ("logging", "format"),
    "LOG_STRUCTURED": ("logging", "enable_structured"),
}


class ConfigLoader:
    """Builds a WWSConfig from a config file and the environment."""

    def __init__(self, env_prefix: str = "WWS_") -> None:
        """
        Args:
            env_prefix: Prefix of the environment variables to read
        """
        self.env_prefix = env_prefix
        home = Path.home() / ".wws_api"
        self.config_paths = [Path(name) for name in CONFIG_FILE_NAMES]
        self.config_paths += [home / name for name in HOME_CONFIG_NAMES]

    def load_config(self, config_file: Optional[Union[str, Path]] = None) -> WWSConfig:
        """
        Load configuration.

        Args:
            config_file: Explicit config file; searched for when omitted

        Returns:
            Validated WWSConfig

        Raises:
            ValueError: If the file is missing, unsupported or malformed
        """
        config_data = self._load_from_file(config_file) or {}
        config_data = self._deep_merge(config_data, self._load_from_environment())
        return WWSConfig(**config_data)

    def _load_from_file(
        self, config_file: Optional[Union[str, Path]] = None
    ) -> Optional[Dict[str, Any]]:
        if config_file:
            path = Path(config_file)
            if not path.exists():
                raise ValueError(f"Config file not found: {path}")
            return self._parse_config_file(path)

        path = next((p for p in self.config_paths if p.exists()), None)
        if path is None:
            return None
        logger.debug("Loading configuration from %s", path)
        return self._parse_config_file(path)

    def _parse_config_file(self, config_path: Path) -> Dict[str, Any]:
        suffix = config_path.suffix.lower()
        if suffix not in (".yaml", ".yml", ".json"):
            raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        try:
            text = config_path.read_text(encoding="utf-8")
            data = json.loads(text) if suffix == ".json" else yaml.safe_load(text)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ValueError(f"Failed to parse config file {config_path}: {e}") from e
        return data or {}

    def _load_from_environment(self) -> Dict[str, Any]:
        config: Dict[str, Any] = {}

        for suffix, path in ENV_SETTINGS.items():
            value = os.getenv(self.env_prefix + suffix)
            if value is None:
                continue
            section = config
            for key in path[:-1]:
                section = section.setdefault(key, {})
            section[path[-1]] = self._convert_env_value(value)

        if self.env_prefix + "LOG_FILE" in os.environ:
            config.setdefault("logging", {})["enable_file"] = True

        return config

    @staticmethod
    def _convert_env_value(value: str) -> Any:
        """Booleans, then numbers; anything else stays a string."""
        lowered = value.lower()
        if lowered in ("true", "yes", "on"):
            return True
        if lowered in ("false", "no", "off"):
            return False

        for number in (int, float):
            try:
                return number(value)
            except ValueError:
                pass
        return value

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(base)
        for key, value in override.items():
            if isinstance(merged.get(key), dict) and isinstance(value, dict):
                merged[key] = self._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged


def load_config(config_file: Optional[Union[str, Path]] = None) -> WWSConfig:
    """Load configuration using the default loader."""
    return ConfigLoader().load_config(config_file)
