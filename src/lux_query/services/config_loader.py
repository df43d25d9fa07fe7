"""
Configuration Loader Service

Loads compiler configuration from lux_query.json in the project root.
Environment variables always take precedence over config file values.

Config file location (in order of precedence):
1. LUX_QUERY_PROJECT_ROOT/lux_query.json (if LUX_QUERY_PROJECT_ROOT is set)
2. CWD/lux_query.json

Supported settings in lux_query.json:
{
    "include_generated_terms": true,        // -> LUX_QUERY_INCLUDE_GENERATED
    "extra_terms_path": "terms/local.json", // -> LUX_QUERY_EXTRA_TERMS
    "clamp_related_levels": true,           // -> LUX_QUERY_CLAMP_LEVELS
    "search_uri_host": "https://lux.collections.yale.edu",  // -> SEARCH_URI_HOST
    "log_level": "INFO",                    // -> LUX_QUERY_LOG_LEVEL
    "log_dir": "/var/log/lux-query"         // -> LUX_QUERY_LOG_DIR
}

A relative extra_terms_path / log_dir is resolved against the directory
holding lux_query.json.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from ..logging_config import configure_logger_for_debug_trace
from ..lux_exceptions import LuxQueryError

logger = configure_logger_for_debug_trace(__name__)

DEFAULT_SEARCH_URI_HOST = "https://lux.collections.yale.edu"
CONFIG_FILENAME = "lux_query.json"


class QuerySettings(BaseModel):
    """Resolved configuration (env > lux_query.json > defaults)."""
    model_config = ConfigDict(frozen=True)

    include_generated_terms: bool = True
    extra_terms_path: Optional[Path] = None
    clamp_related_levels: bool = True
    search_uri_host: str = DEFAULT_SEARCH_URI_HOST
    log_level: Optional[str] = None
    log_dir: Optional[Path] = None


class ConfigLoader:
    """
    Loads configuration from lux_query.json file.

    ::: This is-in-layer Service-Layer.
    ::: This is a loader.
    ::: This is stateless.

    Priority: Environment variables > lux_query.json > defaults
    """

    # Mapping from lux_query.json keys to environment variable names
    CONFIG_KEY_TO_ENV = {
        "include_generated_terms": "LUX_QUERY_INCLUDE_GENERATED",
        "extra_terms_path": "LUX_QUERY_EXTRA_TERMS",
        "clamp_related_levels": "LUX_QUERY_CLAMP_LEVELS",
        "search_uri_host": "SEARCH_URI_HOST",
        "log_level": "LUX_QUERY_LOG_LEVEL",
        "log_dir": "LUX_QUERY_LOG_DIR",
    }

    # Keys holding paths relative to the config file
    PATH_KEYS = ("extra_terms_path", "log_dir")

    def __init__(self):
        self._config: Dict[str, Any] = {}
        self._config_path: Optional[Path] = None
        self._loaded = False

    def load(self, project_root: Optional[Path] = None) -> bool:
        """
        Load configuration from lux_query.json.

        Args:
            project_root: Project root directory. If None, uses LUX_QUERY_PROJECT_ROOT or CWD.

        Returns:
            True if config file was found and loaded, False otherwise.
        """
        if self._loaded:
            return self._config_path is not None

        # Determine project root
        if project_root is None:
            env_root = os.getenv("LUX_QUERY_PROJECT_ROOT")
            if env_root:
                project_root = Path(env_root)
            else:
                project_root = Path.cwd()

        config_path = Path(project_root) / CONFIG_FILENAME
        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("top level must be a JSON object")
                self._config = data
                self._config_path = config_path
                logger.info("Loaded config from: %s", config_path)
            except json.JSONDecodeError as e:
                logger.warning("Invalid JSON in %s: %s", config_path, e)
            except (OSError, ValueError) as e:
                logger.warning("Error loading %s: %s", config_path, e)

        self._loaded = True
        return self._config_path is not None

    def get(self, key: str, default: Any = None) -> Any:
        """Get a raw config file value."""
        return self._config.get(key, default)

    def _resolve(self, key: str) -> Any:
        env_var = self.CONFIG_KEY_TO_ENV[key]
        env_value = os.getenv(env_var)
        if env_value is not None and env_value != "":
            return env_value

        if key not in self._config:
            return None
        value = self._config[key]
        if key in self.PATH_KEYS and value and self._config_path is not None:
            path = Path(value)
            if not path.is_absolute():
                value = self._config_path.parent / path
        return value

    def get_settings(self) -> QuerySettings:
        """
        Get the resolved settings with defaults applied.

        Raises:
            LuxQueryError: if a value cannot be converted (e.g. a non-boolean flag)
        """
        resolved = {}
        for key in self.CONFIG_KEY_TO_ENV:
            value = self._resolve(key)
            if value is not None:
                resolved[key] = value
        try:
            return QuerySettings.model_validate(resolved)
        except ValidationError as e:
            source = self._config_path or "environment"
            raise LuxQueryError(f"Invalid configuration ({source}): {e}") from e

    @property
    def config_path(self) -> Optional[Path]:
        """Path to the loaded config file, or None if not loaded."""
        return self._config_path

    @property
    def config(self) -> Dict[str, Any]:
        """The loaded configuration dictionary."""
        return self._config.copy()


# Global singleton instance
_config_loader: Optional[ConfigLoader] = None


def get_config_loader() -> ConfigLoader:
    """Get the global config loader instance."""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def load_config(project_root: Optional[Path] = None) -> bool:
    """
    Load configuration from lux_query.json.

    Args:
        project_root: Project root directory. If None, auto-detects.

    Returns:
        True if config was loaded, False otherwise.
    """
    return get_config_loader().load(project_root)
