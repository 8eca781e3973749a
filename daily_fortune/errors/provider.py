"""Fortune provider failures."""

from typing import Optional

from .base import FortuneAppError


class ProviderError(FortuneAppError):
    """
    Fortune provider call failed.

    Covers network failures, non-2xx responses, ``success: false`` payloads
    and malformed bodies. ``message`` is shown to the user as-is.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code
