"""
Tautulli (PlexPy) API v2 commands and URL construction.
"""

from enum import Enum
from typing import Any

import httpx

from pls.errors import ConfigurationError

API_PATH = "/api/v2"
DEFAULT_HISTORY_LENGTH = 25


class RequestCmd(str, Enum):
    GET_ACTIVITY = "get_activity"
    GET_HISTORY = "get_history"


def build_url(server: str, key: str, cmd: RequestCmd, **params: Any) -> httpx.URL:
    """Compose `{server}/api/v2?apikey=...&cmd=...` plus any extra query params.

    Whatever path the server URL carries is replaced by the API path.
    """
    try:
        url = httpx.URL(server)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"invalid server url {server!r}: {e}")
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"invalid server url {server!r}: expected http(s)://host[:port]")

    query: dict[str, Any] = {"apikey": key, "cmd": RequestCmd(cmd).value}
    query.update({k: str(v) for k, v in params.items()})
    return url.copy_with(path=API_PATH, params=query, fragment=None)


def activity_url(server: str, key: str) -> httpx.URL:
    return build_url(server, key, RequestCmd.GET_ACTIVITY)


def history_url(server: str, key: str, length: int = DEFAULT_HISTORY_LENGTH) -> httpx.URL:
    return build_url(server, key, RequestCmd.GET_HISTORY, length=length)
