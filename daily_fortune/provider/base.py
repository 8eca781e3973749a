"""Base classes and response handling for fortune providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ..errors import ProviderError

DEFAULT_PLACEHOLDER = "Your fortune awaits tomorrow."
DEFAULT_ERROR = "Failed to generate fortune"


@dataclass(frozen=True)
class ProviderResponse:
    """Parsed ``{success, data?, error?}`` provider payload."""
    success: bool
    data: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "ProviderResponse":
        """
        Parse a decoded JSON payload.

        Raises:
            ProviderError: If the payload is not an object or its fields
                have the wrong types
        """
        if not isinstance(payload, dict):
            raise ProviderError("Malformed provider response")

        data = payload.get("data")
        error = payload.get("error")
        if data is not None and not isinstance(data, str):
            raise ProviderError("Malformed provider response")

        return cls(
            success=payload.get("success") is True,
            data=data,
            error=error if isinstance(error, str) else None,
        )


def interpret_response(
    status_code: int,
    payload: Any,
    placeholder: str = DEFAULT_PLACEHOLDER,
    default_error: str = DEFAULT_ERROR,
) -> str:
    """
    Turn a provider HTTP response into fortune text.

    A non-2xx status or ``success: false`` is a failure carrying the
    payload's ``error`` (or ``default_error``). A successful response
    without ``data`` yields ``placeholder``.

    Raises:
        ProviderError: On any failure
    """
    ok_status = 200 <= status_code < 300

    try:
        response = ProviderResponse.from_payload(payload)
    except ProviderError as e:
        if ok_status:
            raise
        raise ProviderError(default_error, status_code=status_code) from e

    if not ok_status or not response.success:
        raise ProviderError(response.error or default_error, status_code=status_code)

    if not response.data or not response.data.strip():
        return placeholder

    return response.data.strip()


class FortuneProvider(ABC):
    """Source of fortune text."""

    @abstractmethod
    async def fetch_fortune(self, client_id: str) -> str:
        """
        Produce one fortune.

        Args:
            client_id: Opaque identifying string passed through to the
                backend (sent as ``userAgent``)

        Returns:
            Fortune text

        Raises:
            ProviderError: On network failure, non-success response or
                malformed payload
        """
