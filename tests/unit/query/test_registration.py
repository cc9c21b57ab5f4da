"""Tests for audit field registration and resolution through a query host."""

import pytest

from term_timestamps.audit.models import Term
from term_timestamps.audit.recorder import TimestampRecorder
from term_timestamps.config.models import QueryConfig, QueryFieldsConfig
from term_timestamps.identity.models import User
from term_timestamps.identity.providers import InMemoryIdentityProvider
from term_timestamps.query.adapter import HistoryQueryAdapter
from term_timestamps.query.hosts import InMemoryQueryHost
from term_timestamps.query.schema import Category

RECORD_SELECTION = {"time": None, "user": None}


@pytest.fixture
def adapter(store, identity) -> HistoryQueryAdapter:
    return HistoryQueryAdapter(store, identity)


@pytest.fixture
def recorder(store, identity, clock) -> TimestampRecorder:
    return TimestampRecorder(store, identity, clock=clock)


class TestRegisterFields:
    """Tests for registering fields on host query types."""

    def test_registers_on_each_named_category(self, adapter, query_host) -> None:
        registered = adapter.register_fields(query_host)

        assert registered == ["Category", "Tag"]
        for type_name in registered:
            assert set(query_host.fields[type_name]) == {"created", "modifications", "lastModified"}

    def test_registers_shared_record_type(self, adapter, query_host) -> None:
        adapter.register_fields(query_host)
        record_type = query_host.types["AuditRecord"]
        assert [field.name for field in record_type.fields] == ["time", "user"]
        assert record_type.field("user").type_name == "User"

    def test_field_types(self, adapter, query_host) -> None:
        adapter.register_fields(query_host)
        fields = query_host.fields["Category"]
        assert fields["modifications"].is_list is True
        assert fields["created"].is_list is False
        assert {field.type_name for field in fields.values()} == {"AuditRecord"}

    def test_custom_field_names(self, store, identity, query_host) -> None:
        config = QueryConfig(
            fields=QueryFieldsConfig(
                created="termCreated",
                modifications="termModifications",
                last_modified="termLastModified",
            ),
        )
        HistoryQueryAdapter(store, identity, config=config).register_fields(query_host)

        assert set(query_host.fields["Tag"]) == {
            "termCreated",
            "termModifications",
            "termLastModified",
        }

    def test_follows_host_categories(self, adapter) -> None:
        host = InMemoryQueryHost(categories=[Category(name="genre", query_type_name="Genre")])
        assert adapter.register_fields(host) == ["Genre"]

    def test_no_categories_registers_nothing(self, adapter) -> None:
        host = InMemoryQueryHost()
        assert adapter.register_fields(host) == []
        assert host.fields == {}


class TestRegistrationSkipped:
    """The query integration is optional and never blocks recording."""

    def test_no_host(self, adapter) -> None:
        assert adapter.register_fields(None) == []

    def test_old_host_version(self, adapter) -> None:
        host = InMemoryQueryHost(
            categories=[Category(name="category", query_type_name="Category")],
            version="0.0.11",
        )
        assert adapter.register_fields(host) == []
        assert host.fields == {}
        assert host.types == {}

    def test_minimum_version_accepted(self, adapter) -> None:
        host = InMemoryQueryHost(
            categories=[Category(name="category", query_type_name="Category")],
            version="0.0.12",
        )
        assert adapter.register_fields(host) == ["Category"]

    @pytest.mark.parametrize("version", ["1.2.0-beta.1", "0.8.0-rc1", "0.4.0+local.7"])
    def test_prerelease_and_local_versions_accepted(self, adapter, version: str) -> None:
        host = InMemoryQueryHost(
            categories=[Category(name="category", query_type_name="Category")],
            version=version,
        )
        assert adapter.register_fields(host) == ["Category"]

    def test_prerelease_of_minimum_is_too_old(self, store, identity) -> None:
        adapter = HistoryQueryAdapter(
            store, identity, config=QueryConfig(min_host_version="1.0.0")
        )
        host = InMemoryQueryHost(
            categories=[Category(name="category", query_type_name="Category")],
            version="1.0.0-rc1",
        )
        assert adapter.register_fields(host) == []

    def test_unreadable_host_version(self, adapter) -> None:
        host = InMemoryQueryHost(
            categories=[Category(name="category", query_type_name="Category")],
            version="nightly",
        )
        assert adapter.register_fields(host) == []

    def test_disabled(self, store, identity, query_host) -> None:
        adapter = HistoryQueryAdapter(store, identity, config=QueryConfig(enabled=False))
        assert adapter.register_fields(query_host) == []
        assert query_host.fields == {}


class TestResolution:
    """End-to-end resolution of the registered fields."""

    def test_unrecorded_term(self, adapter, query_host) -> None:
        adapter.register_fields(query_host)
        result = query_host.execute(
            "Category",
            Term(term_id=10, taxonomy="category"),
            {
                "created": RECORD_SELECTION,
                "lastModified": RECORD_SELECTION,
                "modifications": RECORD_SELECTION,
            },
        )
        assert result == {"created": None, "lastModified": None, "modifications": None}

    def test_history_scenario(
        self,
        adapter,
        recorder,
        query_host,
        identity: InMemoryIdentityProvider,
        alice: User,
        bob: User,
    ) -> None:
        adapter.register_fields(query_host)
        term = Term(term_id=10, taxonomy="category")
        selection = {
            "created": RECORD_SELECTION,
            "lastModified": RECORD_SELECTION,
            "modifications": RECORD_SELECTION,
        }

        recorder.on_entity_created(term.term_id, term.taxonomy)
        result = query_host.execute("Category", term, selection)
        assert result["created"] == {"time": "Mon Jan 5,2026 14:03:09", "user": alice}
        assert result["modifications"] is None

        recorder.on_entity_modified(term.term_id, term.taxonomy)
        result = query_host.execute("Category", term, selection)
        first_edit = {"time": "Mon Jan 5,2026 14:04:09", "user": alice}
        assert result["modifications"] == [first_edit]
        assert result["lastModified"] == first_edit

        identity.set_current_user(bob.id)
        recorder.on_entity_modified(term.term_id, term.taxonomy)
        result = query_host.execute("Category", term, selection)
        second_edit = {"time": "Mon Jan 5,2026 14:05:09", "user": bob}
        assert result["modifications"] == [second_edit, first_edit]
        assert result["lastModified"] == second_edit
        assert result["created"] == {"time": "Mon Jan 5,2026 14:03:09", "user": alice}

    def test_deleted_user_resolves_to_none(self, store, clock, query_host) -> None:
        ghost = User(id=9, login="ghost")
        identity = InMemoryIdentityProvider([ghost])
        identity.set_current_user(ghost.id)
        TimestampRecorder(store, identity, clock=clock).on_entity_created(10, "category")

        adapter = HistoryQueryAdapter(store, InMemoryIdentityProvider())
        adapter.register_fields(query_host)
        result = query_host.execute(
            "Category", Term(term_id=10, taxonomy="category"), {"created": RECORD_SELECTION}
        )
        assert result["created"] == {"time": "Mon Jan 5,2026 14:03:09", "user": None}
