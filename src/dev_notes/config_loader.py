import os
from typing import Any, Dict

import yaml

from .config import CONFIG_ROOT, DEFAULT_NOTES_DIR


def deep_merge(base: Dict, overlay: Dict) -> Dict:
    """Recursively merge overlay into base."""
    result = base.copy()
    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class SystemConfig:
    """Singleton for the notes server configuration."""

    _instance = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load_config()
        return cls._instance

    @property
    def config_path(self):
        return CONFIG_ROOT / "config.yaml"

    def _load_config(self):
        """
        Loads config.yaml from the global config folder on top of the defaults.
        A missing file is not created; a broken one is ignored.
        """
        if not self.config_path.exists():
            self._config = self._get_defaults()
            return
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                loaded = {}
            self._config = deep_merge(self._get_defaults(), loaded)
        except (OSError, yaml.YAMLError):
            self._config = self._get_defaults()

    def reload(self):
        self._load_config()

    def _get_defaults(self) -> Dict[str, Any]:
        """Default configuration with fallback to environment variables."""
        return {
            "notes": {
                "dir": os.getenv("DEV_NOTES_DIR", str(DEFAULT_NOTES_DIR)),
                "prefix": os.getenv("DEV_NOTES_PREFIX", "week4"),
                "extension": ".md",
            },
            "server": {"name": "dev-notes-server"},
            "logging": {
                "level": os.getenv("DEV_NOTES_LOG_LEVEL", "INFO"),
                "max_log_size": 10485760,
                "backup_count": 5,
            },
        }

    def get(self, key_path: str, default: Any = None) -> Any:
        keys = key_path.split(".")
        value = self._config
        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def get_notes_config(self) -> Dict[str, Any]:
        """Returns notes storage configuration."""
        return self.get("notes", {})


config = SystemConfig()
