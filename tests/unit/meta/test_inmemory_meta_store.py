"""Tests for InMemoryMetaStore."""

import pytest

from term_timestamps.errors import MetaWriteError
from term_timestamps.meta.stores import InMemoryMetaStore


class TestReads:
    """Tests for reading meta."""

    def test_missing_single_is_none(self, store: InMemoryMetaStore) -> None:
        assert store.get(1, "created_by", single=True) is None

    def test_missing_multi_is_empty(self, store: InMemoryMetaStore) -> None:
        assert store.get(1, "modifications") == []

    def test_returned_values_are_copies(self, store: InMemoryMetaStore) -> None:
        store.append(1, "modifications", {"user_id": 1})
        store.get(1, "modifications")[0]["user_id"] = 99
        assert store.get(1, "modifications") == [{"user_id": 1}]


class TestSingleValueWrites:
    """Tests for set and set_if_absent."""

    def test_set_if_absent_first_write_wins(self, store: InMemoryMetaStore) -> None:
        assert store.set_if_absent(1, "created_by", 5) is True
        assert store.set_if_absent(1, "created_by", 6) is False
        assert store.get(1, "created_by", single=True) == 5

    def test_set_if_absent_keeps_falsy_first_value(self, store: InMemoryMetaStore) -> None:
        """An anonymous creator (user 0) still counts as written."""
        store.set_if_absent(1, "created_by", 0)
        assert store.set_if_absent(1, "created_by", 7) is False
        assert store.get(1, "created_by", single=True) == 0

    def test_set_overwrites(self, store: InMemoryMetaStore) -> None:
        store.set(1, "last_modified_by", 1)
        store.set(1, "last_modified_by", 2)
        assert store.get(1, "last_modified_by") == [2]

    def test_terms_are_isolated(self, store: InMemoryMetaStore) -> None:
        store.set(1, "last_modified_by", 1)
        assert store.get(2, "last_modified_by", single=True) is None

    @pytest.mark.parametrize("term_id", [0, -3, True])
    def test_invalid_term_id_raises(self, store: InMemoryMetaStore, term_id) -> None:
        with pytest.raises(MetaWriteError) as exc_info:
            store.set(term_id, "created_by", 1)
        assert exc_info.value.key == "created_by"


class TestMultiValueWrites:
    """Tests for append."""

    def test_append_keeps_insertion_order(self, store: InMemoryMetaStore) -> None:
        for i in range(3):
            store.append(1, "modifications", {"n": i})
        assert [value["n"] for value in store.get(1, "modifications")] == [0, 1, 2]

    def test_single_read_of_multi_key_returns_first(self, store: InMemoryMetaStore) -> None:
        store.append(1, "modifications", "a")
        store.append(1, "modifications", "b")
        assert store.get(1, "modifications", single=True) == "a"


class TestAtomic:
    """Tests for atomic write batches."""

    def test_commits_on_success(self, store: InMemoryMetaStore) -> None:
        with store.atomic():
            store.set(1, "last_modified_by", 1)
            store.append(1, "modifications", {"user_id": 1})
        assert store.get(1, "last_modified_by", single=True) == 1
        assert len(store.get(1, "modifications")) == 1

    def test_rolls_back_on_error(self, store: InMemoryMetaStore) -> None:
        store.set(1, "last_modified_by", 1)
        with pytest.raises(RuntimeError):
            with store.atomic():
                store.set(1, "last_modified_by", 2)
                store.append(1, "modifications", {"user_id": 2})
                raise RuntimeError("boom")

        assert store.get(1, "last_modified_by", single=True) == 1
        assert store.get(1, "modifications") == []

    def test_nested_blocks_roll_back_together(self, store: InMemoryMetaStore) -> None:
        with pytest.raises(RuntimeError):
            with store.atomic():
                store.set(1, "a", 1)
                with store.atomic():
                    store.set(1, "b", 2)
                raise RuntimeError("boom")

        assert store.keys(1) == []


class TestDeleteTerm:
    def test_delete_term_drops_meta(self, store: InMemoryMetaStore) -> None:
        store.set(1, "created_by", 1)
        store.delete_term(1)
        assert store.keys(1) == []
