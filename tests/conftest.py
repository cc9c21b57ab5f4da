"""Shared test fixtures for the term-timestamps test suite."""

from collections.abc import Callable, Generator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from term_timestamps.identity.models import User
from term_timestamps.identity.providers import InMemoryIdentityProvider
from term_timestamps.meta.stores import InMemoryMetaStore
from term_timestamps.query.hosts import InMemoryQueryHost
from term_timestamps.query.schema import Category


class SteppingClock:
    """Clock that advances by a fixed step every time it is read."""

    def __init__(self, start: datetime, step: timedelta = timedelta(minutes=1)) -> None:
        self.current = start
        self.step = step
        self.reads = 0

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        self.reads += 1
        return value


@pytest.fixture
def config_file(tmp_path: Path) -> Callable[[str], Path]:
    """Factory fixture writing a host TOML file and returning its path.

    Usage:
        def test_something(config_file):
            path = config_file("app_name = 'test'")
    """

    def _write(content: str, name: str = "term_timestamps.toml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear cached settings and loaded TOML before and after each test."""
    monkeypatch.delenv("TERM_TIMESTAMPS_CONFIG", raising=False)
    from term_timestamps.config import get_settings
    from term_timestamps.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})


@pytest.fixture
def store() -> InMemoryMetaStore:
    """Create a fresh meta store for each test."""
    return InMemoryMetaStore()


@pytest.fixture
def alice() -> User:
    return User(id=1, login="alice", display_name="Alice", email="alice@example.com")


@pytest.fixture
def bob() -> User:
    return User(id=2, login="bob", display_name="Bob")


@pytest.fixture
def identity(alice: User, bob: User) -> InMemoryIdentityProvider:
    """Identity provider with two users, acting as alice."""
    provider = InMemoryIdentityProvider([alice, bob])
    provider.set_current_user(alice.id)
    return provider


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock(datetime(2026, 1, 5, 14, 3, 9, tzinfo=UTC))


@pytest.fixture
def query_host() -> InMemoryQueryHost:
    return InMemoryQueryHost(
        categories=[
            Category(name="category", query_type_name="Category"),
            Category(name="post_tag", query_type_name="Tag"),
            Category(name="internal", query_type_name=None),
        ],
        version="0.3.0",
    )


@pytest.fixture(autouse=True)
def metrics_on() -> Generator[None, None, None]:
    """Tests start with metrics enabled, whatever a previous bootstrap set."""
    from term_timestamps.observability.metrics import setup_metrics

    setup_metrics(True)
    yield
    setup_metrics(True)
