"""
Configuration management using Pydantic Settings.

Architecture Decision: Why pydantic-settings?
- Type-safe configuration with validation
- Environment overrides (CONTEXTTASKS_*) without extra parsing code
- Easy to test with different configurations

User preferences live in a YAML file next to the other per-user config.
The task data itself is not configuration; it lives in the record store.
"""

import logging
import os
from pathlib import Path
from typing import Optional
import yaml

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from contexttasks.domain.models import UserPreferences

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
PREFERENCES_FILE = "settings.yaml"


def _user_base(*unix_parts: str) -> Path:
    """Per-user base directory: APPDATA on Windows, XDG-style elsewhere"""
    if os.name == 'nt':
        return Path(os.getenv('APPDATA') or Path.home())
    return Path.home().joinpath(*unix_parts)


class Settings(BaseSettings):
    """
    Application settings. Sources, lowest priority first:
    1. Default values
    2. Environment variables / .env file
    3. Keyword arguments

    Preferences are read from `config_file` (or `<config_dir>/settings.yaml`)
    after the fields above are resolved.
    """
    model_config = SettingsConfigDict(
        env_prefix='CONTEXTTASKS_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    app_name: str = "ContextTasks"
    config_dir: Optional[Path] = None
    data_dir: Optional[Path] = None
    config_file: Optional[Path] = None

    # Record store; defaults to a SQLite file in data_dir
    database_url: Optional[str] = None

    log_level: str = "INFO"

    preferences: UserPreferences = UserPreferences()

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._init_paths()
        self.preferences = self._load_preferences()

    def _init_paths(self):
        """Resolve and create the per-user directories"""
        slug = self.app_name.lower()
        if self.config_dir is None:
            self.config_dir = _user_base('.config') / slug
        if self.data_dir is None:
            self.data_dir = _user_base('.local', 'share') / slug
        if self.config_file is None:
            self.config_file = self.config_dir / PREFERENCES_FILE

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _load_preferences(self) -> UserPreferences:
        """
        Read preferences from YAML. A missing file gives defaults; an
        unreadable one is logged and also gives defaults.
        """
        if not self.config_file.exists():
            return UserPreferences()

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            return UserPreferences(**data)
        except (yaml.YAMLError, ValidationError, TypeError) as e:
            logger.warning(f"Ignoring invalid preferences in {self.config_file}: {e}")
            return UserPreferences()

    def save_preferences(self):
        """Write current preferences back to the YAML file"""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, 'w', encoding='utf-8') as f:
            yaml.safe_dump(self.preferences.model_dump(), f, default_flow_style=False)
        logger.info(f"Preferences saved to {self.config_file}")

    def get_db_url(self) -> str:
        """Database URL, defaulting to contexttasks.db in data_dir"""
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.data_dir / 'contexttasks.db'}"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Drop the cached instance and read settings again"""
    global _settings
    _settings = Settings()
    return _settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Set up root logging at the configured level"""
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
