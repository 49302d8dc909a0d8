"""Config – 12-factor settings and loaders."""

from es_commons.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from es_commons.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
