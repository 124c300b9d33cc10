"""Classify raw HTTP responses and decode the success/failure envelope.

Every ZenSend endpoint answers with a JSON object holding exactly one of
``success`` or ``failure``. Routing errors and similar problems come back
as HTML or empty bodies instead, so the content type is checked before
any parsing is attempted.
"""

import logging
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from zensend.exceptions import ApiResponseError, DecodeError, UnexpectedResponseError
from zensend.models.error import ApiError

logger = logging.getLogger("zensend")

JSON_CONTENT_TYPE = "application/json"

P = TypeVar("P", bound=BaseModel)


class Outcome(Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    MALFORMED = "malformed"


class Envelope(BaseModel):
    success: dict[str, Any] | None = None
    failure: ApiError | None = None

    @property
    def outcome(self) -> Outcome:
        if self.success is not None:
            return Outcome.SUCCESS
        if self.failure is not None:
            return Outcome.FAILURE
        return Outcome.MALFORMED


def is_json_response(content_type: str | None) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_CONTENT_TYPE


def decode_envelope(text: str, model: type[P], status_code: int) -> P:
    """Decode ``text`` into ``model``.

    Raises:
        DecodeError: the body is not JSON, or does not match the envelope
            or payload shape.
        ApiResponseError: the envelope carries ``failure``.
        UnexpectedResponseError: the envelope carries neither branch.
    """
    try:
        envelope = Envelope.model_validate_json(text)
    except ValidationError as e:
        logger.error(f"Validation error: {e.errors()}")
        raise DecodeError(str(e)) from e

    outcome = envelope.outcome
    if outcome is Outcome.SUCCESS:
        try:
            return model.model_validate(envelope.success)
        except ValidationError as e:
            logger.error(f"Validation error: {e.errors()}")
            raise DecodeError(str(e)) from e
    if outcome is Outcome.FAILURE and envelope.failure is not None:
        logger.error(f"Error from server: {envelope.failure.failcode}")
        raise ApiResponseError(envelope.failure)

    logger.error(f"Envelope without success or failure (HTTP {status_code})")
    raise UnexpectedResponseError(status_code)


def classify_response(
    status_code: int, content_type: str | None, text: str, model: type[P]
) -> P:
    if not is_json_response(content_type):
        logger.error(
            f"Unexpected content type {content_type!r} (HTTP {status_code})"
        )
        raise UnexpectedResponseError(status_code)
    return decode_envelope(text, model, status_code)
