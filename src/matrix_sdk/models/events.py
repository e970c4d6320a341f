"""
Outgoing room and state events.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

from matrix_sdk.errors import ConstructionError

DEFAULT_FORMAT = "org.matrix.custom.html"
ROOM_MESSAGE = "m.room.message"
JOIN_RULES = "m.room.join_rules"
TOPIC = "m.room.topic"

FILE_OPTIONAL_KEYS = ("filename", "info")


class MessageType(str, Enum):
    TEXT = "m.text"
    NOTICE = "m.notice"
    FILE = "m.file"

    @classmethod
    def _missing_(cls, value: object) -> Optional["MessageType"]:
        # Also accept the short tags: "text", "notice", "file".
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None


Content = Union[str, Mapping[str, Any]]


def _require(content: Mapping[str, Any], *keys: str) -> None:
    missing = [k for k in keys if k not in content]
    if missing:
        raise ConstructionError(f"message content is missing {', '.join(missing)}", {"missing": missing})


def _text_content(msgtype: MessageType, content: Content) -> dict[str, Any]:
    if isinstance(content, str):
        return {"msgtype": msgtype.value, "body": content}
    _require(content, "body")
    result = {"msgtype": msgtype.value, "body": content["body"]}
    if "formatted_body" in content:
        result["formatted_body"] = content["formatted_body"]
        result["format"] = content.get("format", DEFAULT_FORMAT)
    return result


def _file_content(content: Content) -> dict[str, Any]:
    if not isinstance(content, Mapping):
        raise ConstructionError("file content must be a mapping with body and url")
    _require(content, "body", "url")
    result = {"msgtype": MessageType.FILE.value, "body": content["body"], "url": content["url"]}
    # Anything outside the allow-list is dropped, not rejected.
    for key in FILE_OPTIONAL_KEYS:
        if key in content:
            result[key] = content[key]
    return result


def message_content(msgtype: MessageType, content: Content) -> dict[str, Any]:
    """Build `m.room.message` content for the given message type.

    Text and notice accept a bare body string or a mapping with `body` and,
    optionally, `formatted_body` and `format`. File requires `body` and `url`.
    """
    try:
        msgtype = MessageType(msgtype)
    except ValueError:
        raise ConstructionError(f"unknown message type: {msgtype!r}") from None

    if msgtype is MessageType.TEXT or msgtype is MessageType.NOTICE:
        return _text_content(msgtype, content)
    if msgtype is MessageType.FILE:
        return _file_content(content)
    raise ConstructionError(f"unhandled message type: {msgtype!r}")


class RoomEvent(BaseModel):
    """A timeline event to send. `transaction_id` is chosen by the caller."""

    model_config = ConfigDict(frozen=True)

    content: dict[str, Any]
    type: str
    room_id: str
    transaction_id: str

    @classmethod
    def message(cls, room_id: str, msgtype: MessageType, content: Content, transaction_id: str) -> "RoomEvent":
        return cls(
            content=message_content(msgtype, content),
            type=ROOM_MESSAGE,
            room_id=room_id,
            transaction_id=transaction_id,
        )


class StateEvent(BaseModel):
    """A room state event, keyed by (type, state_key)."""

    model_config = ConfigDict(frozen=True)

    content: dict[str, Any]
    type: str
    room_id: str
    state_key: str = ""

    @classmethod
    def join_rules(cls, room_id: str, join_rule: str) -> "StateEvent":
        return cls(content={"join_rule": join_rule}, type=JOIN_RULES, room_id=room_id)

    @classmethod
    def topic(cls, room_id: str, topic: str) -> "StateEvent":
        return cls(content={"topic": topic}, type=TOPIC, room_id=room_id)
