"""
Request descriptor: one HTTP call against a homeserver, no I/O.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"


# Methods whose body is sent on the wire. GET/DELETE and friends carry only
# query parameters.
BODY_METHODS = frozenset({Method.POST, Method.PUT, Method.PATCH})


class Request(BaseModel):
    """Immutable description of a single client-server API call.

    `path` always starts with `/` and has every identifier segment already
    percent-encoded. `query_params` are sorted by key. `body` is sent as JSON
    for methods in `BODY_METHODS`.
    """

    model_config = ConfigDict(frozen=True)

    method: Method
    base_url: str
    path: str
    query_params: tuple[tuple[str, Any], ...] = ()
    headers: tuple[tuple[str, str], ...] = ()
    body: Any = Field(default_factory=dict)

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}{self.path}"

    @property
    def sends_body(self) -> bool:
        return self.method in BODY_METHODS

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None
