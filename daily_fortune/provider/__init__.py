"""
Fortune provider boundary.

A provider turns an opaque client id into fortune text or raises
``ProviderError``; the lifecycle manager never sees transport details.
"""

from .base import FortuneProvider, ProviderResponse, interpret_response
from .http_provider import HttpFortuneProvider
from .static_provider import StaticFortuneProvider

__all__ = [
    "FortuneProvider",
    "ProviderResponse",
    "interpret_response",
    "HttpFortuneProvider",
    "StaticFortuneProvider",
]
