"""User settings and logging configuration.

Settings are read from a JSON file in the platform's user config
directory. Invalid or missing values fall back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

APP_NAME = "modalview"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _default_log_file() -> str:
    return str(Path(platformdirs.user_log_dir(APP_NAME)) / "modalview.log")


@dataclass
class Settings:
    """Effective settings for one session."""
    key_timeout: float = EditorConstants.KEY_POLL_TIMEOUT
    log_level: str = "WARNING"
    log_file: str = field(default_factory=_default_log_file)


class SettingsStore:
    """Loads settings from ``settings.json`` in the user config directory."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = Path(config_dir or platformdirs.user_config_dir(APP_NAME))
        self._settings_file = self._config_dir / "settings.json"

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _load_raw(self) -> Dict[str, Any]:
        """Read the settings file; empty dict if missing or unreadable."""
        if not self._settings_file.exists():
            return {}
        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    def load(self) -> Settings:
        settings = Settings()
        for key, value in self._load_raw().items():
            if not hasattr(settings, key):
                logger.warning(f"Unknown setting {key!r}, ignoring")
                continue
            if not self.validate_setting(key, value):
                logger.warning(f"Invalid value for {key!r}: {value!r}, using default")
                continue
            if key == 'key_timeout':
                value = float(value)
            elif key == 'log_level':
                value = value.upper()
            setattr(settings, key, value)
        return settings

    def validate_setting(self, key: str, value: Any) -> bool:
        """Validate a setting value.

        Args:
            key: Setting key name.
            value: Setting value to validate.

        Returns:
            True if setting is valid, False otherwise.
        """
        if key == 'key_timeout':
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return False
            return 0 < value <= 5
        if key == 'log_level':
            return isinstance(value, str) and isinstance(logging.getLevelName(value.upper()), int)
        if key == 'log_file':
            return isinstance(value, str) and bool(value.strip())
        return False


def load_settings(config_dir: Optional[Path] = None) -> Settings:
    return SettingsStore(config_dir).load()


def configure_logging(settings: Settings) -> Optional[logging.Handler]:
    """Send package logs to the configured file.

    Logging never goes to the terminal, which the editor owns while running.
    Returns the installed handler, or None if the log file can't be opened.
    """
    package_logger = logging.getLogger(APP_NAME)
    package_logger.setLevel(settings.log_level)
    log_path = Path(settings.log_file)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding='utf-8')
    except OSError as e:
        logger.warning(f"Could not open log file {log_path}: {e}")
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    return handler
