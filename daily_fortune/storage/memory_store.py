"""In-memory key-value store."""

from typing import Optional

from ..logging.config import get_logger
from .base import KeyValueStore

logger = get_logger(__name__)


class InMemoryStore(KeyValueStore):
    """Dict-backed store; contents are lost when the process exits."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value
        logger.debug("Value stored", key=key, size=len(value))

    def snapshot(self) -> dict[str, str]:
        """Copy of the current contents."""
        return dict(self._data)
