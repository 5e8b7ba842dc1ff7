"""
Plexpy — client facade over the transport, URL builder and normalizer.
"""

from typing import Any, Optional

import httpx

from pls.normalize import Outcome, normalize_response
from pls.plexpy import DEFAULT_HISTORY_LENGTH, activity_url, history_url
from pls.transport.http import HttpClient


class Plexpy:
    """Synchronous Tautulli client. One request per call, no retries."""

    def __init__(self, server: str, key: str, http: Optional[HttpClient] = None,
                 transport: Optional[httpx.BaseTransport] = None):
        self._server = server
        self._key = key
        self.http = http or HttpClient(transport=transport)

    def get_activity(self) -> Outcome:
        """Current streaming sessions."""
        return normalize_response(self.http.get(activity_url(self._server, self._key)))

    def get_history(self, length: int = DEFAULT_HISTORY_LENGTH) -> Outcome:
        """The last `length` playback records, newest first."""
        return normalize_response(self.http.get(history_url(self._server, self._key, length)))

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "Plexpy":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
