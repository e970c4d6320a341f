"""
Matrix standard error response body.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, ValidatorFunctionWrapHandler, field_validator


class ErrorPayload(BaseModel):
    """`{"errcode": ..., "error": ...}` plus the optional fields some errors carry.

    Only `errcode` is strict. An optional field of the wrong type reads as absent.
    """

    model_config = ConfigDict(extra="allow")

    errcode: str
    error: Optional[str] = None
    soft_logout: Optional[bool] = None       # M_UNKNOWN_TOKEN
    retry_after_ms: Optional[int] = None     # M_LIMIT_EXCEEDED
    room_version: Optional[str] = None       # M_INCOMPATIBLE_ROOM_VERSION
    admin_contact: Optional[str] = None      # M_RESOURCE_LIMIT_EXCEEDED

    @field_validator("error", "soft_logout", "retry_after_ms", "room_version", "admin_contact", mode="wrap")
    @classmethod
    def _drop_invalid(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None
