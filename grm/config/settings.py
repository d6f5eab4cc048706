"""Application settings management for grm.

Provides AppSettings dataclass and SettingsManager for persistence.
"""

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional

from grm.config.paths import DEFAULT_WORKING_DIR, get_settings_path

logger = logging.getLogger("grm.settings")

# Smallest accepted value of numeric settings
_MINIMUMS = {"timeout": 1, "download_timeout": 0, "chunk_size": 1}


@dataclass
class AppSettings:
    """Settings read from the user's settings file."""

    # GitHub API
    api_url: str = "https://api.github.com"
    timeout: int = 30

    # Downloads (0 means no timeout)
    download_timeout: int = 0
    chunk_size: int = 8192

    # Tag markers
    working_dir: str = DEFAULT_WORKING_DIR

    # Logging
    log_level: str = "WARNING"
    log_file: str = ""

    def to_dict(self) -> dict:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """
        Create settings from dictionary, ignoring unknown keys.

        Values are converted to the field's type. A value that does not
        convert, or a number below its minimum, keeps the default.
        """
        defaults = cls()
        values = {}
        for field in fields(cls):
            if field.name not in data:
                continue
            default = getattr(defaults, field.name)
            try:
                value = _coerce(data[field.name], type(default))
            except (ValueError, TypeError):
                logger.warning(
                    f"Invalid setting {field.name}={data[field.name]!r}, using {default!r}"
                )
                continue
            if field.name in _MINIMUMS and value < _MINIMUMS[field.name]:
                logger.warning(
                    f"Invalid setting {field.name}={value!r}, using {default!r}"
                )
                continue
            values[field.name] = value
        return cls(**values)


def _coerce(value, kind: type):
    """Convert a JSON value to ``kind``, rejecting containers and booleans for numbers."""
    if isinstance(value, (dict, list)) or value is None:
        raise TypeError(f"expected {kind.__name__}")
    if kind is int:
        if isinstance(value, bool):
            raise TypeError("expected int")
        return int(value)
    return kind(value)


class SettingsManager:
    """Manages application settings persistence."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            config_path: Optional custom path, defaults to platform standard
        """
        self._config_path = config_path or get_settings_path()
        self._settings: Optional[AppSettings] = None

    @property
    def config_path(self) -> Path:
        """Path to settings file."""
        return self._config_path

    def load(self) -> AppSettings:
        """
        Load settings from disk.

        Returns:
            AppSettings instance (defaults if file not found)
        """
        if self._config_path.exists():
            try:
                with open(self._config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("settings must be a JSON object")
                self._settings = AppSettings.from_dict(data)
            except (ValueError, TypeError, OSError) as e:
                # Invalid or unreadable file, use defaults
                logger.warning(f"Ignoring settings file {self._config_path}: {e}")
                self._settings = AppSettings()
        else:
            self._settings = AppSettings()

        return self._settings

    def save(self, settings: AppSettings) -> None:
        """
        Persist settings to disk.

        Args:
            settings: Settings to save
        """
        self._settings = settings

        # Ensure parent directory exists
        self._config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self._config_path, "w", encoding="utf-8") as f:
            json.dump(settings.to_dict(), f, indent=2)

    def reset(self) -> AppSettings:
        """
        Reset to default settings.

        Returns:
            Default AppSettings instance
        """
        self._settings = AppSettings()

        if self._config_path.exists():
            self._config_path.unlink()

        return self._settings
