"""Config settings – env-based configuration."""
from datatable_kit.config.settings.base import Settings
from datatable_kit.config.settings.datatable import DataTableSettings
from datatable_kit.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DataTableSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
