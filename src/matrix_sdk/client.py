"""
AsyncMatrixClient / MatrixClient: execute request descriptors.

    request = matrix_sdk.request.whoami("https://matrix.org", token)
    result = await client.do_request(request)
    if is_error(result):
        ...

One attempt per call: no retries, no backoff. The transport is injected at
construction; the default is `HttpxTransport`.
"""

import asyncio
import logging
from typing import Any, Optional, Union

from matrix_sdk.classify import classify
from matrix_sdk.errors import MalformedResponseError, MatrixSDKError, ProtocolError, TransportError
from matrix_sdk.log import fmt_request, fmt_response, wire_http_logger
from matrix_sdk.models.request import Request
from matrix_sdk.models.response import Response
from matrix_sdk.transport.base import Transport
from matrix_sdk.transport.http import HttpxTransport

Result = Union[Response, ProtocolError, MalformedResponseError, TransportError]


def is_error(result: Result) -> bool:
    return isinstance(result, MatrixSDKError)


def unwrap(result: Result) -> Response:
    """Return the response, or raise the error the result carries."""
    if isinstance(result, MatrixSDKError):
        raise result
    return result


class AsyncMatrixClient:
    """Async request dispatcher (primary)."""

    def __init__(self, transport: Optional[Transport] = None, timeout: Optional[float] = None):
        self.transport: Transport = transport if transport is not None else HttpxTransport()
        self._timeout = timeout

    async def do_request(self, request: Request, timeout: Optional[float] = None) -> Result:
        """Send `request` once and classify what comes back.

        Transport failures, 4xx protocol errors and malformed 4xx bodies are
        returned, not raised. Anything else is the raw `Response`.
        """
        if wire_http_logger.isEnabledFor(logging.DEBUG):
            wire_http_logger.debug("Dispatch: %s", fmt_request(request))
        try:
            raw = await self.transport.send(request, timeout=timeout if timeout is not None else self._timeout)
        except TransportError as e:
            wire_http_logger.warning("Transport failure: %s %s: %s", request.method.value, request.path, e)
            return e
        if wire_http_logger.isEnabledFor(logging.DEBUG):
            wire_http_logger.debug("Response: %s", fmt_response(raw))
        return classify(raw)

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> "AsyncMatrixClient":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()


class MatrixClient:
    """Sync wrapper around AsyncMatrixClient. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncMatrixClient(**kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def transport(self) -> Transport:
        return self._async.transport

    def do_request(self, request: Request, timeout: Optional[float] = None) -> Result:
        return self._run(self._async.do_request(request, timeout=timeout))

    def close(self) -> None:
        self._run(self._async.aclose())
        self._loop.close()

    def __enter__(self) -> "MatrixClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
