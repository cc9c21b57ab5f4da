"""Wire term-timestamps into a host.

Builds the recorder and query adapter from settings and subscribes them
to the host's lifecycle events. The two halves are independent: if the
host has no query layer, timestamps are still recorded.

Example usage:

    from term_timestamps.bootstrap import bootstrap

    plugin = bootstrap(store, identity, events, query_host=host)
"""

from pathlib import Path

from term_timestamps.audit.recorder import Clock, TimestampRecorder, ValueBuilder
from term_timestamps.config import get_settings
from term_timestamps.config.settings import Settings
from term_timestamps.host.events import CREATE_TERM, EDIT_TERMS, GENERATE_SCHEMA, HostEvents
from term_timestamps.identity.provider import IdentityProvider
from term_timestamps.meta.store import MetaStore
from term_timestamps.observability.logging import get_logger, setup_logging
from term_timestamps.observability.metrics import setup_metrics
from term_timestamps.query.adapter import HistoryQueryAdapter
from term_timestamps.query.host import QueryHost

logger = get_logger(__name__)


class TermTimestamps:
    """The recorder and query adapter, bound to one host."""

    def __init__(
        self,
        recorder: TimestampRecorder,
        adapter: HistoryQueryAdapter,
        query_host: QueryHost | None = None,
    ) -> None:
        self.recorder = recorder
        self.adapter = adapter
        self.query_host = query_host
        self.registered_types: list[str] = []

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        store: MetaStore,
        identity: IdentityProvider,
        query_host: QueryHost | None = None,
        clock: Clock | None = None,
        value_builder: ValueBuilder | None = None,
    ) -> "TermTimestamps":
        recorder = TimestampRecorder(
            store,
            identity,
            keys=settings.meta_keys,
            clock=clock,
            value_builder=value_builder,
            timezone=settings.clock.timezone,
        )
        adapter = HistoryQueryAdapter(
            store,
            identity,
            keys=settings.meta_keys,
            config=settings.query,
        )
        return cls(recorder, adapter, query_host)

    def setup(self, events: HostEvents) -> None:
        """Subscribe to the host's term and schema events."""
        events.subscribe(CREATE_TERM, self.handle_create_term)
        events.subscribe(EDIT_TERMS, self.recorder.on_entity_modified)
        events.subscribe(GENERATE_SCHEMA, self.handle_generate_schema)
        logger.info(
            "term_timestamps_setup",
            query_layer=self.query_host is not None,
            meta_keys=self.recorder.keys.model_dump(),
        )

    def handle_create_term(self, term_id: int, tt_id: int, taxonomy: str) -> None:  # noqa: ARG002
        self.recorder.on_entity_created(term_id, taxonomy)

    def handle_generate_schema(self) -> None:
        self.registered_types = self.adapter.register_fields(self.query_host)


def bootstrap(
    store: MetaStore,
    identity: IdentityProvider,
    events: HostEvents,
    query_host: QueryHost | None = None,
    settings: Settings | None = None,
    clock: Clock | None = None,
    value_builder: ValueBuilder | None = None,
    configure_logging: bool = True,
    config_path: str | Path | None = None,
) -> TermTimestamps:
    """Build term-timestamps from configuration and attach it to a host.

    Args:
        store: The host's term meta store
        identity: The host's user identity
        events: The host's event dispatcher
        query_host: The host's query layer, if it has one
        settings: Settings to use (default: loaded with get_settings)
        clock: Override the timestamp clock
        value_builder: Customise the value stored for each modification
        configure_logging: Apply the configured structlog setup
        config_path: Host TOML file layered over the packaged defaults,
            used only when settings is not given

    Returns:
        The wired TermTimestamps instance

    Raises:
        ConfigurationError: If settings must be loaded and are invalid
    """
    settings = settings or get_settings(config_path)
    setup_metrics(settings.observability.metrics.enabled)

    if configure_logging:
        log_config = settings.observability.logging
        setup_logging(
            level=log_config.level,
            format=log_config.format,
            redact_pii=log_config.redact_pii,
        )

    plugin = TermTimestamps.from_settings(
        settings,
        store,
        identity,
        query_host=query_host,
        clock=clock,
        value_builder=value_builder,
    )
    plugin.setup(events)
    return plugin
