"""Base class for durable key-value stores."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Async string key-value store with no transactions."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under ``key``.

        Returns:
            The stored string, or None when the key is absent

        Raises:
            StoreReadError: If the backend could not be read
        """

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """
        Store ``value`` under ``key``, overwriting any previous value.

        Raises:
            StoreWriteError: If the value could not be persisted
        """
