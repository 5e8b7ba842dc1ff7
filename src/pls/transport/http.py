"""
Blocking HTTP transport for the Tautulli API.
"""

import logging
from typing import Any, Optional

import httpx

from pls.errors import NetworkError
from pls.formatting import mask_api_key

logger = logging.getLogger(__name__)


def _redact(url: httpx.URL) -> str:
    key = url.params.get("apikey")
    if not key:
        return str(url)
    return str(url.copy_set_param("apikey", mask_api_key(key)))


class HttpClient:
    def __init__(self, transport: Optional[httpx.BaseTransport] = None):
        self._client = httpx.Client(
            headers={"User-Agent": "pls/0.1.0", "Accept": "application/json"},
            transport=transport,
        )

    def get(self, url: httpx.URL) -> Any:
        """GET `url` and return the decoded JSON body."""
        logger.debug("GET %s", _redact(url))
        try:
            resp = self._client.get(url)
        except httpx.HTTPError as e:
            raise NetworkError(f"request to {url.host} failed: {e}")
        logger.debug("HTTP %s (%d bytes)", resp.status_code, len(resp.content))
        if resp.status_code >= 400:
            raise NetworkError(f"HTTP {resp.status_code}: {resp.text[:200]}",
                               details={"status_code": resp.status_code})
        try:
            return resp.json()
        except ValueError as e:
            raise NetworkError(f"invalid JSON in response: {e}")

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
