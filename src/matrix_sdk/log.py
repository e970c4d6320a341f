"""
Logger hierarchy for wire diagnostics.

Enable with ``logging.getLogger("matrix_sdk.wire").setLevel(logging.DEBUG)``.
The SDK never installs handlers. Formatting helpers return ``str`` and are
meant to be called inside ``isEnabledFor`` guards.
"""

import logging

from matrix_sdk.models.request import Request
from matrix_sdk.models.response import Response

wire_http_logger = logging.getLogger("matrix_sdk.wire.http")
"""Dispatch of requests and transport failures."""

wire_classify_logger = logging.getLogger("matrix_sdk.wire.classify")
"""Classification of responses into results."""

REDACTED = "<redacted>"
_SENSITIVE_HEADERS = frozenset({"authorization"})
_MAX_BODY_LEN = 200


def fmt_headers(headers: tuple[tuple[str, str], ...]) -> str:
    parts = [f"{k}: {REDACTED if k.lower() in _SENSITIVE_HEADERS else v}" for k, v in headers]
    return "{" + ", ".join(parts) + "}"


def fmt_request(request: Request) -> str:
    """``"GET https://hs/_matrix/client/r0/sync params=[...] headers={...}"``"""
    text = f"{request.method.value} {request.url}"
    if request.query_params:
        text += f" params={list(request.query_params)!r}"
    if request.headers:
        text += f" headers={fmt_headers(request.headers)}"
    return text


def fmt_response(response: Response) -> str:
    body = repr(response.body)
    if len(body) > _MAX_BODY_LEN:
        body = body[:_MAX_BODY_LEN] + "..."
    return f"status={response.status} body={body}"
