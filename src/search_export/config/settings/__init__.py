"""Config settings – 12-factor env-based configuration."""
from search_export.config.settings.base import Settings
from search_export.config.settings.factory import SettingsFactory
from search_export.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
