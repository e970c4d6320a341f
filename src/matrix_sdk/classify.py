"""
Response classification.

Only 4xx responses are turned into errors. Every other status, 5xx
included, is handed back unchanged; deciding what a 5xx or a redirect means
is left to the caller.
"""

import logging
from collections.abc import Mapping
from typing import Union

from pydantic import ValidationError

from matrix_sdk.errors import MalformedResponseError, ProtocolError
from matrix_sdk.log import fmt_response, wire_classify_logger
from matrix_sdk.models.error import ErrorPayload
from matrix_sdk.models.response import Response

Classified = Union[Response, ProtocolError, MalformedResponseError]


def classify(response: Response) -> Classified:
    if response.status_class != 4:
        return response
    if wire_classify_logger.isEnabledFor(logging.DEBUG):
        wire_classify_logger.debug("Client error response: %s", fmt_response(response))
    return parse_error(response)


def parse_error(response: Response) -> Union[ProtocolError, MalformedResponseError]:
    """Build a ProtocolError from a 4xx body, or report the body as malformed."""
    if not isinstance(response.body, Mapping):
        return MalformedResponseError(
            f"HTTP {response.status}: error body is not a JSON object", response.status, response.body,
        )
    try:
        payload = ErrorPayload.model_validate(dict(response.body))
    except ValidationError as e:
        return MalformedResponseError(
            f"HTTP {response.status}: invalid error body: {e.error_count()} validation error(s)",
            response.status,
            response.body,
        )
    return ProtocolError(
        kind=payload.errcode,
        message=payload.error,
        status_code=response.status,
        soft_logout=payload.soft_logout,
        retry_after_ms=payload.retry_after_ms,
        room_version=payload.room_version,
        admin_contact=payload.admin_contact,
    )
