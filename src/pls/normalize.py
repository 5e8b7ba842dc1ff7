"""
Turn a decoded Tautulli reply into something the CLI can act on.

    Error(message)   the API reported a failure (HTTP was still 200)
    Empty()          success, nothing to show
    Render(payload)  an activity or history payload to print
"""

import logging
from dataclasses import dataclass
from typing import Any, Union

from pydantic import ValidationError

from pls.errors import ApiError, PayloadShapeError
from pls.models.envelope import ApiEnvelope, Payload, ServerInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Error:
    message: str


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Render:
    payload: Payload


Outcome = Union[Error, Empty, Render]


def decode_envelope(raw: Any) -> ApiEnvelope:
    """Validate a JSON body, with or without the outer `response` wrapper."""
    if not isinstance(raw, dict):
        raise PayloadShapeError("response body is not a JSON object")
    try:
        if "response" in raw:
            return ServerInfo.model_validate(raw).response
        return ApiEnvelope.model_validate(raw)
    except ValidationError as e:
        raise PayloadShapeError(f"malformed response envelope: {e.error_count()} validation error(s)",
                                details={"errors": e.errors(include_url=False)})


def normalize(envelope: ApiEnvelope) -> Outcome:
    # `result` is not consulted; it reads "success" even for a bad key
    if envelope.data is None:
        if envelope.message:
            logger.debug("API reported an error: %s", envelope.message)
            return Error(envelope.message)
        logger.debug("response carried no payload")
        return Empty()
    logger.debug("decoded %s", type(envelope.data).__name__)
    return Render(envelope.data)


def normalize_response(raw: Any) -> Outcome:
    return normalize(decode_envelope(raw))


def raise_for_outcome(outcome: Outcome) -> Outcome:
    """Raise ApiError for an Error outcome, return anything else unchanged."""
    if isinstance(outcome, Error):
        raise ApiError(outcome.message)
    return outcome
