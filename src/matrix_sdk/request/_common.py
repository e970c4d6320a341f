"""
Shared construction rules for every request builder.
"""

from collections.abc import Mapping
from typing import Any, Optional

from matrix_sdk.models.request import Method, Request

CLIENT_PREFIX = "/_matrix/client/r0"

Options = Optional[Mapping[str, Any]]


def client_path(*segments: str) -> str:
    """Join segments under the r0 prefix. Identifier segments must already be encoded."""
    return "/".join((CLIENT_PREFIX,) + segments)


def bearer(token: str) -> tuple[str, str]:
    return ("Authorization", f"Bearer {token}")


def merge(required: Mapping[str, Any], options: Options = None) -> dict[str, Any]:
    """Options underneath, required keys on top: an option never replaces a required field."""
    return {**(options or {}), **required}


def query(params: Options = None) -> tuple[tuple[str, Any], ...]:
    return tuple(sorted((params or {}).items()))


def build(
    method: Method,
    base_url: str,
    path: str,
    *,
    token: Optional[str] = None,
    params: Options = None,
    headers: tuple[tuple[str, str], ...] = (),
    body: Any = None,
) -> Request:
    if token is not None:
        headers = (bearer(token),) + headers
    return Request(
        method=method,
        base_url=base_url,
        path=path,
        query_params=query(params),
        headers=headers,
        body={} if body is None else body,
    )
