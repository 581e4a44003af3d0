"""
Configuration management using Pydantic Settings.

Architecture Decision: Why pydantic-settings?
WorkTime has three operational knobs: where the database file lives, where
exports are written and how verbose logging is. Each can be set through a
WORKTIME_* environment variable (or a .env file) without touching the user's
preferences, which live in settings.yaml and are edited from the UI.

Resolution order for the export folder:
    WORKTIME_EXPORT_DIR > preferences.export_directory > home directory
"""

import logging
import os
from pathlib import Path
from typing import Optional
import yaml

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from app.domain.models import UserPreferences

logger = logging.getLogger(__name__)

APP_DIR_NAME = "worktime"
DB_FILENAME = "worktime.db"
PREFERENCES_FILENAME = "settings.yaml"

# Checked before the user's config directory, for running from a checkout
WORKSPACE_PREFERENCES = Path("config") / PREFERENCES_FILENAME


def _user_dir(kind: str) -> Path:
    """Per-user folder for 'config' or 'data' files"""
    if os.name == 'nt':
        return Path(os.getenv('APPDATA', Path.home())) / APP_DIR_NAME
    if kind == 'config':
        return Path.home() / '.config' / APP_DIR_NAME
    return Path.home() / '.local' / 'share' / APP_DIR_NAME


class Settings(BaseSettings):
    """
    Process-wide settings. Environment variables override the defaults;
    `preferences` is filled from settings.yaml when that file exists.
    """
    model_config = SettingsConfigDict(
        env_prefix='WORKTIME_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    config_dir: Path = Field(default_factory=lambda: _user_dir('config'))
    data_dir: Path = Field(default_factory=lambda: _user_dir('data'))
    database_url: Optional[str] = Field(
        default=None,
        description="SQLAlchemy async URL; defaults to worktime.db in data_dir"
    )
    export_dir: Optional[Path] = Field(
        default=None,
        description="Forces the export folder, ignoring the stored preference"
    )
    log_level: str = "INFO"
    preferences: UserPreferences = Field(default_factory=UserPreferences)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @model_validator(mode="after")
    def _read_preferences(self) -> "Settings":
        path = self.preferences_file
        if path.exists():
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            self.preferences = UserPreferences(**data)
            logger.debug("Loaded preferences from %s", path)
        return self

    @property
    def preferences_file(self) -> Path:
        if WORKSPACE_PREFERENCES.exists():
            return WORKSPACE_PREFERENCES
        return self.config_dir / PREFERENCES_FILENAME

    def save_preferences(self) -> Path:
        """Write the preferences to the user's settings.yaml"""
        path = self.config_dir / PREFERENCES_FILENAME
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(self.preferences.model_dump(), f, default_flow_style=False, sort_keys=False)
        return path

    def get_db_url(self) -> str:
        """Database URL; the default file's folder is created on demand"""
        if self.database_url:
            return self.database_url
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite+aiosqlite:///{self.data_dir / DB_FILENAME}"

    def get_export_dir(self) -> Path:
        """Folder that receives CSV/PDF exports"""
        if self.export_dir:
            return self.export_dir.expanduser()
        if self.preferences.export_directory:
            return Path(self.preferences.export_directory).expanduser()
        return Path.home()

    def remember_export_dir(self, directory) -> None:
        """Store the folder chosen in the last export as the new default"""
        directory = str(directory)
        if directory == self.preferences.export_directory:
            return
        self.preferences.export_directory = directory
        self.save_preferences()


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
