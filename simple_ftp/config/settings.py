"""Client settings management for SimpleFtp.

Provides FtpSettings dataclass and SettingsManager for persistence.
Passwords are kept out of the settings file; see credentials.py.
"""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from simple_ftp.config.paths import get_settings_path
from simple_ftp.ftp.progress import DEFAULT_PROGRESS_THRESHOLD

logger = logging.getLogger("simple_ftp.settings")


@dataclass
class FtpSettings:
    """FTP client settings that persist between sessions."""

    # Server
    server: str = ""
    username: str = "anonymous"

    # Request flags
    passive_mode: bool = True
    enable_ssl: bool = False
    keep_alive: bool = True
    use_binary: bool = True
    proxy: Optional[str] = None
    timeout: Optional[float] = None

    # Upload progress
    progress_threshold: int = DEFAULT_PROGRESS_THRESHOLD

    def to_dict(self) -> dict:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "FtpSettings":
        """Create settings from dictionary, ignoring unknown keys."""
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered)


class SettingsManager:
    """Manages client settings persistence."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            config_path: Optional custom path, defaults to platform standard
        """
        self._config_path = config_path or get_settings_path()
        self._settings: Optional[FtpSettings] = None

    @property
    def config_path(self) -> Path:
        """Path to settings file."""
        return self._config_path

    def load(self) -> FtpSettings:
        """
        Load settings from disk.

        Returns:
            FtpSettings instance (defaults if file not found)
        """
        if self._config_path.exists():
            try:
                with open(self._config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                self._settings = FtpSettings.from_dict(data)
            except (json.JSONDecodeError, IOError, TypeError, AttributeError) as e:
                logger.warning(f"Ignoring unreadable settings file {self._config_path}: {e}")
                self._settings = FtpSettings()
        else:
            self._settings = FtpSettings()

        return self._settings

    def save(self, settings: FtpSettings) -> None:
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

    def reset(self) -> FtpSettings:
        """
        Reset to default settings.

        Returns:
            Default FtpSettings instance
        """
        self._settings = FtpSettings()

        # Remove existing file
        if self._config_path.exists():
            self._config_path.unlink()

        return self._settings

    def update(self, **kwargs) -> FtpSettings:
        """
        Update specific settings fields.

        Args:
            **kwargs: Field names and new values

        Returns:
            Updated FtpSettings instance
        """
        if self._settings is None:
            self.load()

        for key, value in kwargs.items():
            if hasattr(self._settings, key):
                setattr(self._settings, key, value)

        self.save(self._settings)
        return self._settings
