"""TOML configuration loading.

The defaults ship inside the package. A host embedding term-timestamps
may layer one TOML file of its own on top, passed explicitly or named
by the TERM_TIMESTAMPS_CONFIG environment variable.
"""

import os
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any

from term_timestamps.errors import ConfigurationError

CONFIG_PATH_ENV = "TERM_TIMESTAMPS_CONFIG"
DEFAULT_CONFIG = "default.toml"


def load_defaults() -> dict[str, Any]:
    """Load the defaults bundled with the package."""
    text = resources.files(__package__).joinpath(DEFAULT_CONFIG).read_text(encoding="utf-8")
    return tomllib.loads(text)


def resolve_config_path(config_path: str | Path | None = None) -> Path | None:
    """Pick the host's override file: the argument, else TERM_TIMESTAMPS_CONFIG."""
    if config_path is not None:
        return Path(config_path)
    from_env = os.environ.get(CONFIG_PATH_ENV)
    return Path(from_env) if from_env else None


def load_toml(file_path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary.

    Raises:
        ConfigurationError: If the file is missing or not valid TOML
    """
    if not file_path.is_file():
        raise ConfigurationError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {file_path}: {e}") from e


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence.

    Nested dictionaries are merged recursively; any other value in
    override replaces the one in base. Neither input is modified.
    """
    result = base.copy()

    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load the packaged defaults merged with the host's override file, if any."""
    config = load_defaults()
    path = resolve_config_path(config_path)
    if path is not None:
        config = deep_merge(config, load_toml(path))
    return config
