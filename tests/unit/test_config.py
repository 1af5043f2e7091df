import logging
from pathlib import Path

from localized_country_select.config import PACKAGE_DIR, Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv('COUNTRY_SELECT_DEFAULT_LOCALE', raising=False)
    settings = Settings()

    assert settings.default_locale == 'en'
    assert settings.locales_path == PACKAGE_DIR / 'locales'
    assert settings.log_level == logging.INFO


def test_log_level_from_name(test_settings):
    assert test_settings.log_level == logging.DEBUG
    assert Settings(log_level='nonsense').log_level == logging.INFO


def test_default_locale_normalized():
    assert Settings(default_locale='pt_BR').default_locale == 'pt-br'


def test_relative_locales_path_resolved():
    settings = Settings(locales_path='data/locales')

    assert settings.locales_path.is_absolute()
    assert settings.locales_path.parts[-2:] == ('data', 'locales')


def test_env_prefix(monkeypatch):
    monkeypatch.setenv('COUNTRY_SELECT_DEFAULT_LOCALE', 'ru')

    assert Settings().default_locale == 'ru'


def test_from_toml(temp_dir: Path):
    config_path = temp_dir / 'config.toml'
    config_path.write_text(f'default_locale = "de"\nlocales_path = "{temp_dir.as_posix()}"\n', encoding='utf-8')

    settings = Settings.from_toml(config_path)

    assert settings.default_locale == 'de'
    assert settings.locales_path == temp_dir


def test_from_toml_missing_file(temp_dir: Path):
    settings = Settings.from_toml(temp_dir / 'missing.toml')

    assert settings.log_prefix == 'country_select'
