"""Config settings – env-based configuration."""
from cq_dispatch.config.settings.base import Settings
from cq_dispatch.config.settings.dispatch import DispatchSettings
from cq_dispatch.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DispatchSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
