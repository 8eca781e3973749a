#!/usr/bin/env python3
"""
Basic Usage Example - Daily Fortune

Shows how a host application drives the lifecycle:
- Build the app with an offline provider and a SQLite store
- Render every state change through a subscriber
- Reconcile on startup, request a fortune, restart and reconcile again

Run: python examples/basic_usage.py
"""

import asyncio
import tempfile
from pathlib import Path

from daily_fortune.app import DailyFortuneApp
from daily_fortune.config.loader import ConfigLoader
from daily_fortune.logging.config import configure_logging
from daily_fortune.provider.static_provider import StaticFortuneProvider
from daily_fortune.state.models import FortuneView, LifecycleState


def render(state: LifecycleState) -> None:
    """Minimal console presentation of the lifecycle state."""
    if state.view == FortuneView.LOADING:
        print("  ✨ Crafting your fortune...")
    elif state.view == FortuneView.FORTUNE and state.fortune:
        print(f"  🔮 {state.fortune.text}")
        print(f"     (generated {state.fortune.generated_at}, id {state.fortune.id})")
    else:
        print("  [ Get Today's Fortune ]")
        if state.error:
            print(f"  ⚠️  {state.error}")


async def run(db_path: str) -> None:
    config = ConfigLoader.create(Path(db_path).parent).build({"storage": {"db_path": db_path}})
    provider = StaticFortuneProvider(delay_seconds=0.2)

    print("🚀 First launch")
    app = DailyFortuneApp(config, provider=provider)
    app.subscribe(render)
    await app.start()

    print("\n👆 User taps the button (twice, quickly)")
    results = await asyncio.gather(app.request_fortune(), app.request_fortune())
    print(f"  results: {[r.value for r in results]}")

    print("\n🔁 Relaunch the same day")
    relaunched = DailyFortuneApp(config, provider=provider)
    relaunched.subscribe(render)
    await relaunched.start()

    result = await relaunched.request_fortune()
    print(f"  second request today: {result.value}")


def main() -> None:
    configure_logging(level="WARNING")
    with tempfile.TemporaryDirectory() as temp_dir:
        asyncio.run(run(str(Path(temp_dir) / "fortune.db")))


if __name__ == "__main__":
    main()
