"""Config settings – 12-factor env-based configuration."""
from docrepo.config.settings.base import Settings
from docrepo.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
