"""
Durable store error classifications.

Reads fail open (a corrupted cache is just a miss); writes fail loudly so
the lifecycle never claims a fortune it could not persist.
"""

from typing import Optional

from .base import FortuneAppError


class StoreError(FortuneAppError):
    """Base class for key-value store failures."""

    def __init__(self, message: str, key: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.key = key


class StoreReadError(StoreError):
    """Stored value could not be read or decoded."""

    def __init__(self, message: str, raw_value: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_value = raw_value


class StoreWriteError(StoreError):
    """Value could not be persisted."""
