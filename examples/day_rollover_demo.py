#!/usr/bin/env python3
"""
Day Rollover Demo - Daily Fortune

Uses an injected clock to walk the lifecycle across midnight and shows
that a failed request leaves nothing behind.

Run: python examples/day_rollover_demo.py
"""

import asyncio
from datetime import datetime, timedelta, timezone

from daily_fortune.errors import ProviderError
from daily_fortune.logging.config import configure_logging
from daily_fortune.provider.base import FortuneProvider
from daily_fortune.state.manager import DailyFortuneManager
from daily_fortune.storage.memory_store import InMemoryStore
from daily_fortune.utils.time import make_calendar_day


class FlakyProvider(FortuneProvider):
    """Fails the first call, then succeeds."""

    def __init__(self):
        self.calls = 0

    async def fetch_fortune(self, client_id: str) -> str:
        self.calls += 1
        if self.calls == 1:
            raise ProviderError("Failed to generate fortune. Please try again.", status_code=500)
        return f"Fortune number {self.calls - 1} finds you well."


async def run() -> None:
    now = [datetime(2024, 3, 15, 22, 0, tzinfo=timezone.utc)]
    store = InMemoryStore()
    manager = DailyFortuneManager(
        store,
        FlakyProvider(),
        calendar_day=make_calendar_day("UTC"),
        clock=lambda: now[0],
    )

    def show(label: str) -> None:
        state = manager.state
        text = state.fortune.text if state.fortune else "-"
        print(f"{label:<28} view={state.view.value:<8} error={state.error!r} fortune={text!r}")

    await manager.reconcile()
    show("startup")

    await manager.generate()
    show("first request (fails)")
    print(f"{'':<28} store={store.snapshot()}")

    await manager.generate()
    show("retry")

    now[0] += timedelta(hours=3)
    await manager.reconcile()
    show("after midnight")

    await manager.generate()
    show("new day request")
    print(f"{'':<28} store date={store.snapshot()['lastGeneratedDate']}")


def main() -> None:
    configure_logging(level="WARNING")
    asyncio.run(run())


if __name__ == "__main__":
    main()
