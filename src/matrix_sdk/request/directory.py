"""
Room discovery: directory visibility, the public room list and aliases.
"""

from typing import Any, Optional

from matrix_sdk.encoding import encode_segment
from matrix_sdk.models.request import Method, Request
from matrix_sdk.request._common import Options, build, client_path


def _visibility_path(room_id: str) -> str:
    return client_path("directory", "list", "room", encode_segment(room_id))


def _alias_path(room_alias: str) -> str:
    return client_path("directory", "room", encode_segment(room_alias))


def room_visibility(base_url: str, room_id: str) -> Request:
    return build(Method.GET, base_url, _visibility_path(room_id))


def set_room_visibility(base_url: str, token: str, room_id: str, visibility: str) -> Request:
    """`visibility` is "public" or "private"."""
    return build(Method.PUT, base_url, _visibility_path(room_id), token=token, body={"visibility": visibility})


def public_rooms(base_url: str, options: Options = None) -> Request:
    """Anonymous listing. Options: `limit`, `since`, `server`."""
    return build(Method.GET, base_url, client_path("publicRooms"), params=options)


def filter_public_rooms(
    base_url: str, token: str, filters: dict[str, Any], server: Optional[str] = None,
) -> Request:
    """Filtered listing. `filters` is the whole body (`limit`, `since`,
    `filter`, `include_all_networks`, `third_party_instance_id`)."""
    params = {"server": server} if server is not None else None
    return build(Method.POST, base_url, client_path("publicRooms"), token=token, params=params, body=filters)


def room_alias(base_url: str, room_alias: str) -> Request:
    """Resolve an alias to a room id and its servers."""
    return build(Method.GET, base_url, _alias_path(room_alias))


def create_room_alias(base_url: str, token: str, room_alias: str, room_id: str) -> Request:
    return build(Method.PUT, base_url, _alias_path(room_alias), token=token, body={"room_id": room_id})


def delete_room_alias(base_url: str, token: str, room_alias: str) -> Request:
    return build(Method.DELETE, base_url, _alias_path(room_alias), token=token)
