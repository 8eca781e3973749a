"""HTTP fortune provider calling the generate-fortune endpoint."""

import asyncio
import json
import socket
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.parse import urlparse
from urllib.request import Request, urlopen

from ..config.defaults import ProviderParams
from ..errors import ConfigurationError, ProviderError
from ..logging.config import get_logger
from .base import FortuneProvider, interpret_response


class HttpFortuneProvider(FortuneProvider):
    """POSTs ``{"userAgent": ...}`` and reads ``{success, data, error}``."""

    def __init__(self, config: ProviderParams):
        self.config = config
        self.logger = get_logger("fortune.provider.http")

        parsed = urlparse(config.url)
        if not parsed.scheme or not parsed.netloc:
            raise ConfigurationError(f"Invalid provider URL: {config.url}")

    async def fetch_fortune(self, client_id: str) -> str:
        return await asyncio.to_thread(self._fetch_sync, client_id)

    def _fetch_sync(self, client_id: str) -> str:
        """Perform the blocking request and interpret the response."""
        status_code, body = self._post({"userAgent": client_id})

        payload = self._decode(status_code, body)
        text = interpret_response(
            status_code,
            payload,
            placeholder=self.config.placeholder_text,
            default_error=self.config.default_error,
        )

        self.logger.info(
            "Fortune received",
            url=self.config.url,
            response_code=status_code,
            length=len(text)
        )
        return text

    def _post(self, body: dict[str, Any]) -> tuple[int, str]:
        """Send the request; returns status code and raw body, even for HTTP errors."""
        data = json.dumps(body).encode('utf-8')
        headers = {
            'Content-Type': 'application/json',
            'Content-Length': str(len(data)),
            'User-Agent': 'daily-fortune/1.0'
        }

        if self.config.headers:
            headers.update(self.config.headers)

        req = Request(
            self.config.url,
            data=data,
            headers=headers,
            method=self.config.method
        )

        try:
            with urlopen(req, timeout=self.config.timeout_seconds) as response:
                # Undecodable bytes surface below as a malformed JSON body
                return response.getcode(), response.read().decode('utf-8', errors='replace')

        except HTTPError as e:
            # Error responses still carry the backend's JSON error message
            raw = e.read().decode('utf-8', errors='replace') if e.fp else ""
            self.logger.warning(
                "Fortune request HTTP error",
                url=self.config.url,
                error_code=e.code,
                error_reason=str(e.reason)
            )
            return e.code, raw

        except (OSError, URLError, socket.timeout) as e:
            self.logger.warning(
                "Fortune request network error",
                url=self.config.url,
                error=str(e)
            )
            raise ProviderError(f"Network error: {e}") from e

    def _decode(self, status_code: int, body: str) -> Any:
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            self.logger.warning(
                "Fortune response is not JSON",
                url=self.config.url,
                response_code=status_code,
                response_data=body[:200]
            )
            if 200 <= status_code < 300:
                raise ProviderError("Malformed provider response", status_code=status_code) from e
            raise ProviderError(self.config.default_error, status_code=status_code) from e
