"""Pytest configuration and shared fixtures."""

import pytest

from daily_fortune.errors import ProviderError
from daily_fortune.state.manager import DailyFortuneManager
from daily_fortune.utils.time import make_calendar_day
from tests.fakes import FakeClock, FakeProvider, RecordingStore


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def utc_calendar_day():
    return make_calendar_day("UTC")


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def failing_provider() -> FakeProvider:
    return FakeProvider(error=ProviderError("boom", status_code=500))


@pytest.fixture
def make_manager(clock, utc_calendar_day):
    """Factory building a manager pinned to the fake clock and UTC days."""

    def _make(store, provider, **kwargs) -> DailyFortuneManager:
        return DailyFortuneManager(
            store,
            provider,
            calendar_day=utc_calendar_day,
            clock=clock,
            **kwargs
        )

    return _make


@pytest.fixture
def stored_fortune_json() -> str:
    return ('{"text": "Yesterday you planted seeds.", '
            '"generatedAt": "2024-03-15T07:00:00.000+00:00", "id": "1710486000000"}')
