"""
pls error types.

Every failure is terminal: the CLI reports it once and exits with status 1.
"""

from typing import Any, Optional


class PlsError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class ConfigurationError(PlsError):
    def __init__(self, message: str, code: str = "configuration_error"):
        super().__init__(code, message)


class NetworkError(PlsError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("network_error", message, details)


class ApiError(PlsError):
    """The server answered, but its `message` field reports a failure."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("api_error", message, details)


class PayloadShapeError(PlsError):
    """`data` was present but matched neither the activity nor the history shape."""

    def __init__(self, message: str = "unrecognized response payload", details: Optional[dict[str, Any]] = None):
        super().__init__("payload_shape_error", message, details)
