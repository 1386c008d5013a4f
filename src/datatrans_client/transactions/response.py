"""Classifies raw Datatrans responses."""

from collections.abc import Mapping
from typing import Any

import structlog

from datatrans_client.models import AuthorizeResponse, MalformedResponse

logger = structlog.get_logger(__name__)


def interpret_response(raw: Any) -> AuthorizeResponse:
    """
    Turn a decoded JSON response into an AuthorizeResponse.

    Args:
        raw: Mapping returned by a Transport

    Returns:
        AuthorizeResponse with transaction_id set (success) or
        error_code/error_message set (declined)

    Raises:
        MalformedResponse: If raw is neither success- nor error-shaped
    """
    if not isinstance(raw, Mapping):
        logger.error("datatrans_response_not_a_mapping", response_type=type(raw).__name__)
        raise MalformedResponse(
            f"Expected a JSON object, got {type(raw).__name__}", raw=raw
        )

    if raw.get("transactionId") is not None:
        return AuthorizeResponse(transaction_id=raw["transactionId"], raw=dict(raw))

    error = raw.get("error")
    if isinstance(error, Mapping) and "code" in error and "message" in error:
        return AuthorizeResponse(
            error_code=error["code"],
            error_message=error["message"],
            raw=dict(raw),
        )

    logger.error("datatrans_response_malformed", keys=sorted(raw.keys()))
    raise MalformedResponse(
        "Response has neither transactionId nor error.code/error.message",
        raw=raw,
    )
