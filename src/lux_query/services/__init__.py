"""
Service-layer helpers: configuration loading.
"""

from .config_loader import (
    DEFAULT_SEARCH_URI_HOST,
    ConfigLoader,
    QuerySettings,
    get_config_loader,
    load_config,
)

__all__ = [
    "DEFAULT_SEARCH_URI_HOST",
    "ConfigLoader",
    "QuerySettings",
    "get_config_loader",
    "load_config",
]
