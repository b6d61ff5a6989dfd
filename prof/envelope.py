"""Interprets the response envelopes returned by the prof service.

The service normally answers with `{success, profile, error, details}`, but
some failures come back as a bare `{"error": ..., "details": [...]}` object.
Parsing tries each shape in order and records which one matched, so callers
can tell a well-formed envelope from a recognized error object or from a body
that could not be understood at all.
"""

import enum
import json
import logging
from dataclasses import dataclass
from typing import Any, Callable

import pydantic

from prof.errors import NotFoundError, ServiceError, ValidationError
from prof.models import Profile, ProfileResponse

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    ENVELOPE = "envelope"
    ERROR_SHAPE = "error_shape"
    INVALID_FORMAT = "invalid_format"
    UNPARSEABLE = "unparseable"


@dataclass(frozen=True)
class ParsedResponse:
    outcome: Outcome
    raw: str
    envelope: ProfileResponse | None = None


def _parse_envelope(raw: str) -> ParsedResponse | None:
    try:
        envelope = ProfileResponse.model_validate_json(raw)
    except pydantic.ValidationError:
        return None
    return ParsedResponse(Outcome.ENVELOPE, raw, envelope)


def _parse_error_shape(raw: str) -> ParsedResponse | None:
    try:
        value: Any = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(value, dict) or not isinstance(value.get("error"), str):
        return ParsedResponse(Outcome.INVALID_FORMAT, raw)
    details = value.get("details")
    envelope = ProfileResponse(
        success=False,
        error=value["error"],
        details=[d for d in details if isinstance(d, str)] if isinstance(details, list) else None,
    )
    return ParsedResponse(Outcome.ERROR_SHAPE, raw, envelope)


def _unparseable(raw: str) -> ParsedResponse:
    return ParsedResponse(Outcome.UNPARSEABLE, raw)


PARSERS: list[Callable[[str], ParsedResponse | None]] = [
    _parse_envelope,
    _parse_error_shape,
    _unparseable,
]


def parse_response(raw: str) -> ParsedResponse:
    for parser in PARSERS:
        parsed = parser(raw)
        if parsed is not None:
            return parsed
    raise AssertionError("The last parser always matches")


def raise_for_failure(envelope: ProfileResponse, status_code: int, not_found_default: str) -> None:
    """Maps a failed envelope and its HTTP status onto the error taxonomy."""
    if envelope.success:
        return
    logger.debug("Service reported failure with status %d: %s", status_code, envelope.error)
    if status_code == 400:
        if envelope.details is not None:
            raise ValidationError(envelope.details)
        raise ServiceError(envelope.error or "Validation failed")
    if status_code == 404:
        raise NotFoundError(envelope.error or not_found_default)
    raise ServiceError(envelope.error or "Unknown error")


def interpret_profile_response(raw: str, status_code: int, not_found_default: str) -> Profile:
    """Turns a profile endpoint response into a `Profile` or raises.

    Args:
        raw: The raw response body.
        status_code: The HTTP status of the response.
        not_found_default: The message used for a 404 without an error field.

    Returns:
        The profile carried by a successful envelope.
    """
    parsed = parse_response(raw)
    if parsed.outcome == Outcome.INVALID_FORMAT:
        raise ServiceError(f"Invalid response format: {raw}")
    if parsed.outcome == Outcome.UNPARSEABLE:
        raise ServiceError(f"Could not parse response: {raw}")
    assert parsed.envelope is not None
    raise_for_failure(parsed.envelope, status_code, not_found_default)
    if parsed.envelope.profile is None:
        raise ServiceError("No profile in response")
    return parsed.envelope.profile
