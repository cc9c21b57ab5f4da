"""Configuration model exports.

    from term_timestamps.config.models import MetaKeysConfig, QueryConfig
"""

from term_timestamps.config.models.clock import ClockConfig
from term_timestamps.config.models.keys import MetaKeysConfig
from term_timestamps.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from term_timestamps.config.models.query import QueryConfig, QueryFieldsConfig

__all__ = [
    "ClockConfig",
    "LoggingConfig",
    "MetaKeysConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "QueryConfig",
    "QueryFieldsConfig",
]
