"""
Default httpx transport.
"""

from typing import Any, Optional

import httpx

from matrix_sdk.errors import TransportError
from matrix_sdk.models.request import Request
from matrix_sdk.models.response import Response

DEFAULT_TIMEOUT = 30.0
USER_AGENT = "matrix-sdk/0.1.0"


class HttpxTransport:
    """Sends requests with one `httpx.AsyncClient` per homeserver base URL.

    Per-request headers (the bearer token, Accept-Language) are sent with each
    request rather than baked into the client, so the pool only grows with the
    number of homeservers. `transport` is passed through to httpx; tests use it
    to plug in an `httpx.MockTransport`.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._timeout = timeout
        self._transport = transport
        self._clients: dict[str, httpx.AsyncClient] = {}

    def _client_for(self, request: Request) -> httpx.AsyncClient:
        client = self._clients.get(request.base_url)
        if client is None:
            client = httpx.AsyncClient(
                base_url=request.base_url.rstrip("/"),
                headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
                timeout=self._timeout,
                transport=self._transport,
            )
            self._clients[request.base_url] = client
        return client

    async def send(self, request: Request, timeout: Optional[float] = None) -> Response:
        kwargs: dict[str, Any] = {}
        if request.headers:
            kwargs["headers"] = list(request.headers)
        if request.query_params:
            kwargs["params"] = list(request.query_params)
        if request.sends_body:
            kwargs["json"] = request.body
        if timeout is not None:
            kwargs["timeout"] = timeout

        client = self._client_for(request)
        try:
            resp = await client.request(request.method.value, request.path, **kwargs)
            body = self._decode(resp)
        except httpx.HTTPError as e:
            # DecodingError is not an httpx.TransportError.
            raise TransportError(f"{request.method.value} {request.url}: {e!r}", cause=e) from e

        return Response(status=resp.status_code, body=body, headers=tuple(resp.headers.items()))

    @staticmethod
    def _decode(resp: httpx.Response) -> Any:
        """JSON when it parses, raw text when it does not, None when empty."""
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text

    async def aclose(self) -> None:
        clients, self._clients = list(self._clients.values()), {}
        for client in clients:
            await client.aclose()
