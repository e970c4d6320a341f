"""
Matrix SDK error types.

Construction errors are raised at the call site. Transport, protocol and
malformed-response errors are returned by the client as values; they are
exceptions too, so callers may raise them.
"""

from typing import Any, Optional


class MatrixSDKError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class ConstructionError(MatrixSDKError, ValueError):
    """A helper or builder was given an argument it cannot represent."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("construction_error", message, details)


class TransportError(MatrixSDKError):
    """Connection, DNS, TLS or timeout failure. Never retried by the SDK."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__("transport_error", message)
        self.cause = cause


class MalformedResponseError(MatrixSDKError):
    """A 4xx response whose body is not a Matrix error object."""

    def __init__(self, message: str, status_code: int, body: Any = None):
        super().__init__("malformed_response", message, {"body": body})
        self.status_code = status_code
        self.body = body


class ProtocolError(MatrixSDKError):
    """A 4xx response carrying a Matrix `errcode`.

    The optional fields are None when the server did not send them.
    """

    def __init__(
        self,
        kind: str,
        message: Optional[str],
        status_code: int,
        soft_logout: Optional[bool] = None,
        retry_after_ms: Optional[int] = None,
        room_version: Optional[str] = None,
        admin_contact: Optional[str] = None,
    ):
        super().__init__(kind, message or kind)
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.soft_logout = soft_logout
        self.retry_after_ms = retry_after_ms
        self.room_version = room_version
        self.admin_contact = admin_contact

    @property
    def retryable(self) -> bool:
        """True when the server advised a backoff (M_LIMIT_EXCEEDED and the like)."""
        return self.retry_after_ms is not None

    def __repr__(self) -> str:
        return f"ProtocolError(kind={self.kind!r}, status_code={self.status_code})"
