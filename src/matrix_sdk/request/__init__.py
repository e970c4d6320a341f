"""
Request builders: one function per client-server API operation.

Every function is pure and returns an immutable `Request`; nothing here does
I/O. Execute a request with `AsyncMatrixClient.do_request`:

    request = matrix_sdk.request.sync("https://matrix.org", token, {"since": since})
    result = await client.do_request(request)
"""

from matrix_sdk.request.server import server_capabilities, server_discovery, spec_versions
from matrix_sdk.request.session import login, login_flows, logout, logout_all
from matrix_sdk.request.account import (
    account_3pids,
    account_add_3pid,
    account_bind_3pid,
    account_delete_3pid,
    account_email_token,
    account_msisdn_token,
    account_unbind_3pid,
    change_password,
    deactivate_account,
    password_email_token,
    password_msisdn_token,
    register_guest,
    register_user,
    registration_email_token,
    registration_msisdn_token,
    username_availability,
    whoami,
)
from matrix_sdk.request.syncing import sync
from matrix_sdk.request.rooms import (
    create_room,
    forget_room,
    join_room,
    joined_rooms,
    leave_room,
    redact_room_event,
    room_ban,
    room_event,
    room_invite,
    room_joined_members,
    room_kick,
    room_members,
    room_messages,
    room_state,
    room_state_event,
    room_unban,
    send_room_event,
    send_state_event,
)
from matrix_sdk.request.directory import (
    create_room_alias,
    delete_room_alias,
    filter_public_rooms,
    public_rooms,
    room_alias,
    room_visibility,
    set_room_visibility,
)
from matrix_sdk.request.users import (
    avatar_url,
    display_name,
    set_avatar_url,
    set_display_name,
    user_directory_search,
    user_profile,
)

__all__ = [
    "spec_versions",
    "server_discovery",
    "server_capabilities",
    "login_flows",
    "login",
    "logout",
    "logout_all",
    "register_guest",
    "register_user",
    "registration_email_token",
    "registration_msisdn_token",
    "username_availability",
    "change_password",
    "password_email_token",
    "password_msisdn_token",
    "deactivate_account",
    "whoami",
    "account_3pids",
    "account_add_3pid",
    "account_bind_3pid",
    "account_delete_3pid",
    "account_unbind_3pid",
    "account_email_token",
    "account_msisdn_token",
    "sync",
    "room_event",
    "room_state_event",
    "room_state",
    "room_members",
    "room_joined_members",
    "room_messages",
    "send_state_event",
    "send_room_event",
    "redact_room_event",
    "create_room",
    "joined_rooms",
    "room_invite",
    "join_room",
    "leave_room",
    "forget_room",
    "room_kick",
    "room_ban",
    "room_unban",
    "room_visibility",
    "set_room_visibility",
    "public_rooms",
    "filter_public_rooms",
    "room_alias",
    "create_room_alias",
    "delete_room_alias",
    "user_directory_search",
    "set_display_name",
    "display_name",
    "set_avatar_url",
    "avatar_url",
    "user_profile",
]
