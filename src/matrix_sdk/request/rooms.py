"""
Room events, room state, room creation and membership.
"""

from matrix_sdk.encoding import encode_segment
from matrix_sdk.models.events import RoomEvent, StateEvent
from matrix_sdk.models.request import Method, Request
from matrix_sdk.request._common import Options, build, client_path, merge


def _room_path(room_id: str, *segments: str) -> str:
    return client_path("rooms", encode_segment(room_id), *segments)


# --- reading events and state ------------------------------------------------


def room_event(base_url: str, token: str, room_id: str, event_id: str) -> Request:
    return build(Method.GET, base_url, _room_path(room_id, "event", encode_segment(event_id)), token=token)


def room_state_event(base_url: str, token: str, room_id: str, event_type: str, state_key: str) -> Request:
    path = _room_path(room_id, "state", encode_segment(event_type), encode_segment(state_key))
    return build(Method.GET, base_url, path, token=token)


def room_state(base_url: str, token: str, room_id: str) -> Request:
    return build(Method.GET, base_url, _room_path(room_id, "state"), token=token)


def room_members(base_url: str, token: str, room_id: str, options: Options = None) -> Request:
    """Options: `at`, `membership`, `not_membership`."""
    return build(Method.GET, base_url, _room_path(room_id, "members"), token=token, params=options)


def room_joined_members(base_url: str, token: str, room_id: str) -> Request:
    return build(Method.GET, base_url, _room_path(room_id, "joined_members"), token=token)


def room_messages(
    base_url: str, token: str, room_id: str, from_token: str, direction: str, options: Options = None,
) -> Request:
    """Paginate the timeline from `from_token` in `direction` ("b" or "f").

    Options: `to`, `limit`, `filter`.
    """
    params = merge({"from": from_token, "dir": direction}, options)
    return build(Method.GET, base_url, _room_path(room_id, "messages"), token=token, params=params)


# --- sending events ----------------------------------------------------------


def send_state_event(base_url: str, token: str, state_event: StateEvent) -> Request:
    path = _room_path(
        state_event.room_id, "state", encode_segment(state_event.type), encode_segment(state_event.state_key),
    )
    return build(Method.PUT, base_url, path, token=token, body=dict(state_event.content))


def send_room_event(base_url: str, token: str, room_event: RoomEvent) -> Request:
    path = _room_path(
        room_event.room_id, "send", encode_segment(room_event.type), encode_segment(room_event.transaction_id),
    )
    return build(Method.PUT, base_url, path, token=token, body=dict(room_event.content))


def redact_room_event(
    base_url: str, token: str, room_id: str, event_id: str, transaction_id: str, options: Options = None,
) -> Request:
    """Options: `reason`."""
    path = _room_path(room_id, "redact", encode_segment(event_id), encode_segment(transaction_id))
    return build(Method.PUT, base_url, path, token=token, body=dict(options or {}))


# --- creation and membership -------------------------------------------------


def create_room(base_url: str, token: str, options: Options = None) -> Request:
    """Options are the createRoom body: `visibility`, `room_alias_name`,
    `name`, `topic`, `invite`, `preset`, `initial_state` and so on."""
    return build(Method.POST, base_url, client_path("createRoom"), token=token, body=dict(options or {}))


def joined_rooms(base_url: str, token: str) -> Request:
    return build(Method.GET, base_url, client_path("joined_rooms"), token=token)


def room_invite(base_url: str, token: str, room_id: str, user_id: str) -> Request:
    return build(Method.POST, base_url, _room_path(room_id, "invite"), token=token, body={"user_id": user_id})


def join_room(base_url: str, token: str, room_id_or_alias: str, options: Options = None) -> Request:
    """Options: `third_party_signed`."""
    path = client_path("join", encode_segment(room_id_or_alias))
    return build(Method.POST, base_url, path, token=token, body=dict(options or {}))


def leave_room(base_url: str, token: str, room_id: str) -> Request:
    return build(Method.POST, base_url, _room_path(room_id, "leave"), token=token)


def forget_room(base_url: str, token: str, room_id: str) -> Request:
    return build(Method.POST, base_url, _room_path(room_id, "forget"), token=token)


def room_kick(base_url: str, token: str, room_id: str, user_id: str, options: Options = None) -> Request:
    """Options: `reason`."""
    body = merge({"user_id": user_id}, options)
    return build(Method.POST, base_url, _room_path(room_id, "kick"), token=token, body=body)


def room_ban(base_url: str, token: str, room_id: str, user_id: str, options: Options = None) -> Request:
    """Options: `reason`."""
    body = merge({"user_id": user_id}, options)
    return build(Method.POST, base_url, _room_path(room_id, "ban"), token=token, body=body)


def room_unban(base_url: str, token: str, room_id: str, user_id: str) -> Request:
    return build(Method.POST, base_url, _room_path(room_id, "unban"), token=token, body={"user_id": user_id})
