"""Config settings – 12-factor env-based configuration."""
from logmask.config.settings.base import Settings
from logmask.config.settings.factory import SettingsFactory
from logmask.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from logmask.config.settings.masking import MaskingSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "MaskingSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
