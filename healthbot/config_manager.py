"""Read-only access to cfg/config.json.

The file is parsed once and cached on the class; callers pass a key path
and a default, so a missing key never breaks the relay or the page.
"""

import json
import os
import logging
from typing import Any, Dict, List, Optional

from healthbot.config import DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


class ConfigManager:
    """Class-level cache of the JSON settings, addressed by key paths."""

    _config: Optional[Dict[str, Any]] = None
    _config_path: Optional[str] = None

    @classmethod
    def load(cls, config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
        """Parse the settings file, or return the cached copy of the same file.

        Raises:
            FileNotFoundError: If the file does not exist.
            json.JSONDecodeError: If the file is not valid JSON.
        """
        if cls._config is not None and cls._config_path == config_path:
            return cls._config

        if not os.path.exists(config_path):
            logger.error(f"Configuration file not found: {config_path}")
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                cls._config = json.load(f)
            except json.JSONDecodeError as e:
                logger.error(f"Invalid JSON in {config_path}: {e}")
                raise
        cls._config_path = config_path
        logger.info(f"Configuration loaded from {config_path}")
        return cls._config

    @classmethod
    def reload(cls) -> Dict[str, Any]:
        """Drop the cache and parse the last loaded file again."""
        config_path = cls._config_path or DEFAULT_CONFIG_PATH
        cls._config = None
        cls._config_path = None
        return cls.load(config_path)

    @classmethod
    def get(cls, *keys: str, default: Any = None) -> Any:
        """Walk ``keys`` down the settings tree; ``default`` if any step is missing or null.

        >>> ConfigManager.get("provider", "model_name", default="gemini-2.0-flash")
        """
        value: Any = cls.load() if cls._config is None else cls._config
        for key in keys:
            if not isinstance(value, dict) or value.get(key) is None:
                return default
            value = value[key]
        return value

    @classmethod
    def get_section(cls, section: str) -> Dict[str, Any]:
        return cls.get(section, default={})

    @classmethod
    def get_provider_config(cls) -> Dict[str, Any]:
        return cls.get_section("provider")

    @classmethod
    def get_ui_config(cls) -> Dict[str, Any]:
        return cls.get_section("ui")

    @classmethod
    def validate_required_keys(cls, required_keys: List[str]) -> bool:
        """Check dot-separated key paths such as ``"provider.base_url"``; logs the missing ones."""
        missing = [path for path in required_keys if cls.get(*path.split('.')) is None]
        if missing:
            logger.error(f"Missing required configuration keys: {missing}")
            return False
        return True
