"""
Transport capability consumed by the client.
"""

from typing import Optional, Protocol, runtime_checkable

from matrix_sdk.models.request import Request
from matrix_sdk.models.response import Response


@runtime_checkable
class Transport(Protocol):
    """Sends one request and returns the raw response.

    Implementations raise `matrix_sdk.errors.TransportError` for connection,
    DNS, TLS and timeout failures. They must not retry on their caller's
    behalf unless configured to.
    """

    async def send(self, request: Request, timeout: Optional[float] = None) -> Response: ...

    async def aclose(self) -> None: ...
