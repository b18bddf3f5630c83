"""Config – 12-factor settings and loaders."""

from docrepo.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from docrepo.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
