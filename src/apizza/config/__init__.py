"""Configuration: models, discovery, layered settings and the Config handle."""

from apizza.config.models import AddressConfig, ApizzaConfig, CardConfig
from apizza.config.settings import ApizzaSettings
from apizza.config.store import Config, ConfigKeyError, FileConfig

__all__ = [
    "AddressConfig",
    "ApizzaConfig",
    "ApizzaSettings",
    "CardConfig",
    "Config",
    "ConfigKeyError",
    "FileConfig",
]
