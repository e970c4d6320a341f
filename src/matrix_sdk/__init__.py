"""
matrix-sdk: Matrix client-server API for Python.

Pure request builders (`matrix_sdk.request`), payload helpers
(`matrix_sdk.auth`, `RoomEvent`, `StateEvent`) and an httpx-backed client
that dispatches a request and classifies the response.
"""

from matrix_sdk import auth, request
from matrix_sdk.client import AsyncMatrixClient, MatrixClient, Result, is_error, unwrap
from matrix_sdk.classify import classify
from matrix_sdk.encoding import decode_segment, encode_segment
from matrix_sdk.errors import (
    ConstructionError,
    MalformedResponseError,
    MatrixSDKError,
    ProtocolError,
    TransportError,
)
from matrix_sdk.models.events import MessageType, RoomEvent, StateEvent
from matrix_sdk.models.request import Method, Request
from matrix_sdk.models.response import Response
from matrix_sdk.transport.base import Transport
from matrix_sdk.transport.http import HttpxTransport

__version__ = "0.1.0"
__all__ = [
    "auth",
    "request",
    "AsyncMatrixClient",
    "MatrixClient",
    "Result",
    "is_error",
    "unwrap",
    "classify",
    "encode_segment",
    "decode_segment",
    "MatrixSDKError",
    "ConstructionError",
    "TransportError",
    "ProtocolError",
    "MalformedResponseError",
    "MessageType",
    "RoomEvent",
    "StateEvent",
    "Method",
    "Request",
    "Response",
    "Transport",
    "HttpxTransport",
]
