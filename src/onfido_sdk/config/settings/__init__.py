"""Config settings – env-based client configuration."""
from onfido_sdk.config.settings.base import ClientSettings, Settings
from onfido_sdk.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["ClientSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
