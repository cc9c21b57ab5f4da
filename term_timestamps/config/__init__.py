"""Configuration loading for term-timestamps.

Usage:
    from term_timestamps.config import get_settings

    settings = get_settings()
    created_key = settings.meta_keys.created_by
"""

from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from term_timestamps.config.loader import load_config
from term_timestamps.config.settings import Settings, set_toml_config
from term_timestamps.errors import ConfigurationError


@lru_cache(maxsize=1)
def get_settings(config_path: str | Path | None = None) -> Settings:
    """Get the cached settings instance.

    Layers, lowest precedence first: model defaults, the packaged
    ``default.toml``, the host's TOML file (``config_path`` or
    TERM_TIMESTAMPS_CONFIG), then TERM_TIMESTAMPS_* environment variables.

    Raises:
        ConfigurationError: If a file is unreadable or a value is invalid
    """
    set_toml_config(load_config(config_path))
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid term-timestamps configuration: {e}") from e


def reload_settings(config_path: str | Path | None = None) -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings(config_path)


__all__ = ["ConfigurationError", "get_settings", "reload_settings", "Settings"]
