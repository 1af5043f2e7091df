"""Configuration management using pydantic-settings"""

import logging
from pathlib import Path

import toml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    """Catalog settings loaded from environment and config.toml"""

    model_config = SettingsConfigDict(
        toml_file='config.toml',
        env_prefix='COUNTRY_SELECT_',
        case_sensitive=False,
        extra='ignore',
    )

    # Locale settings
    default_locale: str = Field(default='en', description='Locale used when a query does not name one')
    locales_path: Path = Field(
        default=PACKAGE_DIR / 'locales', description='Directory with <locale>.json country catalogs'
    )

    # Logging settings
    log_prefix: str = Field(default='country_select', description='Log prefix for logger names')
    log_level: int = Field(default=logging.INFO, description='Logging level')

    @field_validator('default_locale', mode='before')
    @classmethod
    def normalize_default_locale(cls, v: str) -> str:
        """Store the default locale in the same form the locale store uses"""
        return str(v).strip().lower().replace('_', '-')

    @field_validator('locales_path', mode='before')
    @classmethod
    def resolve_locales_path(cls, v: str | Path) -> Path:
        """Resolve locales path relative to project root"""
        path = Path(v)
        if not path.is_absolute():
            # Make path relative to project root (2 levels up from the package)
            project_root = PACKAGE_DIR.parent.parent
            path = project_root / path
        return path

    @field_validator('log_level', mode='before')
    @classmethod
    def parse_log_level(cls, v: str | int) -> int:
        """Parse log level from string or int"""
        if isinstance(v, str):
            return getattr(logging, v.upper(), logging.INFO)
        return v

    @classmethod
    def from_toml(cls, config_path: str | Path = 'config.toml') -> 'Settings':
        """Load settings from TOML file"""
        config_path = Path(config_path)
        if not config_path.is_absolute():
            # Look for config.toml in project root
            project_root = PACKAGE_DIR.parent.parent
            config_path = project_root / config_path

        if config_path.exists():
            config_data = toml.load(config_path)
            return cls(**config_data)
        # If no config file, try to load from environment
        return cls()


# Global settings instance
settings = Settings.from_toml()
