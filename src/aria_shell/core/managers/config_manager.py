# src/aria_shell/core/managers/config_manager.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from aria_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


def _cast_like(value: Any, original: Any, key_path: str) -> Any:
    """
    Converts an override to the type of the setting it replaces.
    Strings become booleans by word, and lists by splitting on commas.
    """
    if original is None or isinstance(value, type(original)):
        return value
    if isinstance(original, bool):
        word = str(value).strip().lower()
        if word in _TRUE_WORDS | _FALSE_WORDS:
            return word in _TRUE_WORDS
    elif isinstance(original, list) and isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    elif isinstance(original, (int, float, str)):
        try:
            return type(original)(value)
        except (ValueError, TypeError):
            pass
    logger.warning(
        "Could not cast override for '%s' to %s. Storing as given.", key_path, type(original).__name__
    )
    return value


class ConfigManager:
    """
    Singleton holding the linter configuration: the packaged settings.json
    plus any in-memory overrides (CLI flags). `reset()` drops the overrides.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._config = {}
            cls._instance.reset()
        return cls._instance

    def get_all(self) -> Dict[str, Any]:
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Looks up a dotted key such as 'linter.workers'.
        Missing keys (or a path running through a non-dict) give `default`.
        """
        node: Any = self._config
        for key in key_path.split('.'):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return default if node is None else node

    def set_nested(self, key_path: str, value: Any) -> bool:
        """Overrides a dotted key in memory. Returns False if the path is blocked by a non-dict value."""
        *parents, leaf = key_path.split('.')
        section = self._config
        for key in parents:
            section = section.setdefault(key, {})
            if not isinstance(section, dict):
                logger.error("Cannot set '%s': '%s' is not a section.", key_path, key)
                return False

        section[leaf] = _cast_like(value, section.get(leaf), key_path)
        logger.debug("Configuration override: %s = %r", key_path, section[leaf])
        return True

    def apply_overrides(self, overrides: Dict[str, Any]) -> None:
        """Sets every dotted key whose value is not None."""
        for key_path, value in overrides.items():
            if value is not None:
                self.set_nested(key_path, value)

    def reset(self):
        """Reloads settings.json, discarding all overrides."""
        self._config = self._load(PathUtils.get_settings_file())

    @staticmethod
    def _load(config_path: Path) -> Dict[str, Any]:
        if not config_path.exists():
            logger.warning("settings.json not found at %s. Using empty config.", config_path)
            return {}
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load %s: %s", config_path, e)
            return {}
        logger.debug("Configuration loaded from %s", config_path)
        return config


# Shared instance used by the command line.
config_manager = ConfigManager()
