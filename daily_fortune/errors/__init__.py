"""
Error classification for the daily fortune lifecycle.

Store read failures are treated as cache misses, provider and store write
failures are surfaced to the user, transition errors indicate a bug.
"""

from .base import FortuneAppError, ConfigurationError
from .storage import StoreError, StoreReadError, StoreWriteError
from .provider import ProviderError
from .lifecycle import StateTransitionError

__all__ = [
    "FortuneAppError",
    "ConfigurationError",
    # Storage
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
    # Provider
    "ProviderError",
    # Lifecycle
    "StateTransitionError",
]
