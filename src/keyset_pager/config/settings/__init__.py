"""Config settings – dataclass settings and environment loading."""
from keyset_pager.config.settings.base import PaginationSettings, Settings
from keyset_pager.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "PaginationSettings", "Settings", "SettingsLoader"]
