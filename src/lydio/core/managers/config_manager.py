# src/lydio/core/managers/config_manager.py
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from lydio.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merges 'override' into 'base' recursively and returns 'base'."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


class ConfigManager:
    """
    A singleton class to manage lydio's process-wide defaults.
    It loads the packaged settings.json, applies the optional user override
    file and allows for in-memory modifications.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Loads the configuration from the settings files."""
        self._config: Dict[str, Any] = {}
        self.reset()
        logger.debug("ConfigManager initialized.")

    def get_all(self) -> Dict[str, Any]:
        """Returns the entire current configuration dictionary."""
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value from the configuration.
        e.g., 'render.xml_compliant'.
        """
        keys = key_path.split('.')
        value = self._config
        for key in keys:
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default
        return value if value is not None else default

    def set_nested(self, key_path: str, value: Any) -> bool:
        """
        Sets a nested value in the in-memory configuration.
        e.g., 'render.xml_compliant', True
        """
        keys = key_path.split('.')
        d = self._config
        # Navigate to the second-to-last dictionary
        for key in keys[:-1]:
            d = d.setdefault(key, {})
            if not isinstance(d, dict):
                logger.error("Cannot set value: '%s' is not a dictionary.", key)
                return False

        # Cast the new value to the type of the old one
        original_value = d.get(keys[-1])
        if isinstance(original_value, bool) and isinstance(value, str):
            value = value.strip().lower() in _TRUTHY
        elif original_value is not None and not isinstance(original_value, (dict, list)):
            try:
                value = type(original_value)(value)
            except (ValueError, TypeError):
                logger.warning(
                    "Could not cast new value for '%s' to type %s. Storing as given.",
                    key_path, type(original_value).__name__
                )

        d[keys[-1]] = value
        logger.info("Configuration updated: %s = %s", key_path, value)
        return True

    def reset(self):
        """Resets the in-memory configuration from the settings files."""
        self._config = self._load(PathUtils.get_settings_file())
        user_settings = PathUtils.get_user_settings_file()
        if user_settings.exists():
            _deep_merge(self._config, self._load(user_settings))
            logger.debug("Applied user settings from %s.", user_settings)
        logger.debug("Configuration has been (re)loaded.")

    @staticmethod
    def _load(path: Path) -> Dict[str, Any]:
        """Reads one JSON settings file; a missing or broken file yields an empty dict."""
        if not path.exists():
            logger.warning("settings.json not found at %s. Using empty config.", path)
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load %s: %s", path, e, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.error("Ignoring %s: top-level value must be an object.", path)
            return {}
        return copy.deepcopy(data)


def resolve_xml_compliant(value: Optional[bool] = None) -> bool:
    """Returns the explicit per-call value, or the configured default when it is None."""
    if value is not None:
        return bool(value)
    return bool(config_manager.get_nested("render.xml_compliant", False))


# The global singleton instance that the entire library will use.
config_manager = ConfigManager()
