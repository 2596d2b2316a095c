"""Configuration for InfoHub."""
from infohub.config.settings import (
    config,
    HubConfig,
    Settings,
    get_settings,
)

__all__ = [
    "config",
    "HubConfig",
    "Settings",
    "get_settings",
]
