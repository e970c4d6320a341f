"""
Raw homeserver response, as handed back by a transport.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Response(BaseModel):
    """Status, decoded body and headers of one HTTP response.

    `body` is the decoded JSON value when the payload parsed as JSON, the raw
    text when it did not, and None for an empty payload.
    """

    model_config = ConfigDict(frozen=True)

    status: int
    body: Any = None
    headers: tuple[tuple[str, str], ...] = ()

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def status_class(self) -> int:
        """Leading digit of the status code (2 for 2xx, 4 for 4xx...)."""
        return self.status // 100
