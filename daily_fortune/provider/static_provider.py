"""Offline provider returning canned fortunes."""

import asyncio
from itertools import cycle
from typing import Iterable

from ..errors import ConfigurationError
from .base import FortuneProvider

DEFAULT_FORTUNES = (
    "A door you stopped noticing is about to open. Walk through it slowly "
    "and let your curiosity lead the way.",
    "The patience you have been practising will pay off in a conversation "
    "you did not expect to have today.",
    "Something small you finish today becomes the foundation of something "
    "larger. Trust the quiet progress.",
)


class StaticFortuneProvider(FortuneProvider):
    """Cycles through a fixed list of fortunes; useful without a backend."""

    def __init__(self, texts: Iterable[str] = DEFAULT_FORTUNES, delay_seconds: float = 0.0):
        texts = [t for t in texts if t and t.strip()]
        if not texts:
            raise ConfigurationError("No fortunes configured")
        self._texts = cycle(texts)
        self.delay_seconds = delay_seconds

    async def fetch_fortune(self, client_id: str) -> str:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        return next(self._texts)
