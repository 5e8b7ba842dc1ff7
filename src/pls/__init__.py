"""
pls — Plex activity and history from the command line.

Client and terminal renderer for the Tautulli (PlexPy) API v2.
"""

from pls.client import Plexpy
from pls.errors import PlsError, ConfigurationError, NetworkError, ApiError, PayloadShapeError
from pls.formatting import pretty_duration, progress_bar
from pls.normalize import Empty, Error, Render, normalize, decode_envelope

__version__ = "0.1.0"
__all__ = [
    "Plexpy",
    "PlsError",
    "ConfigurationError",
    "NetworkError",
    "ApiError",
    "PayloadShapeError",
    "pretty_duration",
    "progress_bar",
    "Empty",
    "Error",
    "Render",
    "normalize",
    "decode_envelope",
]
