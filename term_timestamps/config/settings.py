"""Root settings model for term-timestamps configuration."""

from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from term_timestamps.config.models.clock import ClockConfig
from term_timestamps.config.models.keys import MetaKeysConfig
from term_timestamps.config.models.observability import ObservabilityConfig
from term_timestamps.config.models.query import QueryConfig

# Module-level variable to store TOML config for settings source
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration to be used by Settings."""
    global _toml_config
    _toml_config = config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that reads from TOML configuration."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        """Get field value from TOML config."""
        value = _toml_config.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        """Return the TOML config values."""
        return _toml_config.copy()


class Settings(BaseSettings):
    """Root configuration object.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. The packaged default.toml
    3. The host's TOML file, if one is given
    4. TERM_TIMESTAMPS_* environment variables (runtime overrides)
    """

    model_config = SettingsConfigDict(
        env_prefix="TERM_TIMESTAMPS_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="term-timestamps", description="Application name for logging")

    meta_keys: MetaKeysConfig = Field(
        default_factory=MetaKeysConfig,
        description="Term meta key names",
    )
    query: QueryConfig = Field(
        default_factory=QueryConfig,
        description="Query layer integration",
    )
    clock: ClockConfig = Field(
        default_factory=ClockConfig,
        description="Timestamp clock",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include TOML config.

        Priority order (highest to lowest):
        1. init_settings (constructor arguments)
        2. env_settings (TERM_TIMESTAMPS_* environment variables)
        3. toml_settings (packaged defaults merged with the host file)
        4. (defaults from model)
        """
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )
