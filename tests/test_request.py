"""Request builders: method, path, headers, query parameters and body per operation."""

import pytest
from pydantic import ValidationError

from matrix_sdk import Method, MessageType, RoomEvent, StateEvent, auth, request

BASE_URL = "http://test-server.url"
TOKEN = "token"
BEARER = ("Authorization", "Bearer token")
R0 = "/_matrix/client/r0"
ROOM_ID = "!someroom:matrix.org"
ENCODED_ROOM_ID = "%21someroom%3Amatrix.org"
USER_ID = "@user:matrix.org"
ENCODED_USER_ID = "%40user%3Amatrix.org"


def assert_anonymous(req):
    assert req.header("Authorization") is None


class TestDescriptor:
    def test_is_immutable(self):
        req = request.whoami(BASE_URL, TOKEN)
        with pytest.raises(ValidationError):
            req.path = "/elsewhere"

    def test_same_inputs_same_descriptor(self):
        opts = {"since": "s1", "timeout": 1000}
        assert request.sync(BASE_URL, TOKEN, opts) == request.sync(BASE_URL, TOKEN, opts)

    def test_defaults(self):
        req = request.spec_versions(BASE_URL)
        assert req.query_params == ()
        assert req.headers == ()
        assert req.body == {}
        assert req.url == "http://test-server.url/_matrix/client/versions"

    def test_options_are_copied(self):
        opts = {"name": "room"}
        req = request.create_room(BASE_URL, TOKEN, opts)
        opts["name"] = "changed"
        assert req.body == {"name": "room"}


class TestServerAdministration:
    def test_spec_versions(self):
        req = request.spec_versions(BASE_URL)
        assert req.method == Method.GET
        assert req.base_url == BASE_URL
        assert req.path == "/_matrix/client/versions"
        assert_anonymous(req)

    def test_server_discovery(self):
        req = request.server_discovery(BASE_URL)
        assert req.method == Method.GET
        assert req.path == "/.well-known/matrix/client"
        assert_anonymous(req)

    def test_server_capabilities(self):
        req = request.server_capabilities(BASE_URL, TOKEN)
        assert req.method == Method.GET
        assert req.path == f"{R0}/capabilities"
        assert req.headers == (BEARER,)


class TestSessionManagement:
    def test_login_flows(self):
        req = request.login_flows(BASE_URL)
        assert req.method == Method.GET
        assert req.path == f"{R0}/login"
        assert_anonymous(req)

    def test_login_token(self):
        req = request.login(BASE_URL, auth.login_token("abc"))
        assert req.method == Method.POST
        assert req.path == f"{R0}/login"
        assert req.body == {"type": "m.login.token", "token": "abc"}
        assert_anonymous(req)

    def test_login_user_and_password(self):
        req = request.login(BASE_URL, auth.login_user("username", "password"))
        assert req.body["type"] == "m.login.password"
        assert req.body["identifier"] == {"type": "m.id.user", "user": "username"}
        assert req.body["password"] == "password"

    def test_login_with_options(self):
        opts = {"device_id": "id", "initial_device_display_name": "display name"}
        req = request.login(BASE_URL, auth.login_token("abc"), opts)
        assert req.body == {"type": "m.login.token", "token": "abc", **opts}

    def test_login_options_do_not_override_auth(self):
        req = request.login(BASE_URL, auth.login_token("abc"), {"type": "m.login.dummy", "token": "x"})
        assert req.body == {"type": "m.login.token", "token": "abc"}

    def test_logout(self):
        req = request.logout(BASE_URL, TOKEN)
        assert req.method == Method.POST
        assert req.path == f"{R0}/logout"
        assert req.headers == (BEARER,)
        assert req.body == {}

    def test_logout_all(self):
        req = request.logout_all(BASE_URL, TOKEN)
        assert req.method == Method.POST
        assert req.path == f"{R0}/logout/all"
        assert req.headers == (BEARER,)


class TestAccountRegistration:
    def test_register_guest(self):
        req = request.register_guest(BASE_URL)
        assert req.method == Method.POST
        assert req.path == f"{R0}/register?kind=guest"
        assert req.query_params == ()
        assert req.body == {}
        assert_anonymous(req)

    def test_register_guest_with_options(self):
        req = request.register_guest(BASE_URL, {"initial_device_display_name": "guest"})
        assert req.body == {"initial_device_display_name": "guest"}

    def test_register_user(self):
        req = request.register_user(BASE_URL, "password", auth.login_dummy())
        assert req.method == Method.POST
        assert req.path == f"{R0}/register"
        assert req.body == {"password": "password", "auth": {"type": "m.login.dummy"}}

    def test_register_user_with_options(self):
        opts = {"username": "alice", "device_id": "dev", "inhibit_login": True}
        req = request.register_user(BASE_URL, "password", auth.login_dummy(), opts)
        assert req.body == {"password": "password", "auth": {"type": "m.login.dummy"}, **opts}

    def test_register_user_options_cannot_replace_password(self):
        req = request.register_user(BASE_URL, "password", auth.login_dummy(), {"password": "other"})
        assert req.body["password"] == "password"

    def test_registration_email_token(self):
        req = request.registration_email_token(BASE_URL, "secret", "a@example.org", 1)
        assert req.method == Method.POST
        assert req.path == f"{R0}/register/email/requestToken"
        assert req.body == {"client_secret": "secret", "email": "a@example.org", "send_attempt": 1}

    def test_registration_email_token_with_options(self):
        opts = {"next_link": "https://example.org/next", "id_server": "id.example.org"}
        req = request.registration_email_token(BASE_URL, "secret", "a@example.org", 1, opts)
        assert req.body == {"client_secret": "secret", "email": "a@example.org", "send_attempt": 1, **opts}

    def test_registration_msisdn_token(self):
        req = request.registration_msisdn_token(BASE_URL, "secret", "GB", "07700900000", 2)
        assert req.path == f"{R0}/register/msisdn/requestToken"
        assert req.body == {
            "client_secret": "secret",
            "country": "GB",
            "phone_number": "07700900000",
            "send_attempt": 2,
        }

    def test_username_availability(self):
        req = request.username_availability(BASE_URL, "username")
        assert req.method == Method.GET
        assert req.path == f"{R0}/register/available?username=username"
        assert_anonymous(req)

    def test_username_availability_is_encoded(self):
        req = request.username_availability(BASE_URL, "a&b=c")
        assert req.path == f"{R0}/register/available?username=a%26b%3Dc"


class TestAccountManagement:
    def test_change_password(self):
        req = request.change_password(BASE_URL, "new", auth.login_token("t"))
        assert req.method == Method.POST
        assert req.path == f"{R0}/account/password"
        assert req.body == {"new_password": "new", "auth": {"type": "m.login.token", "token": "t"}}

    def test_change_password_with_options(self):
        req = request.change_password(BASE_URL, "new", auth.login_user("u", "old"), {"logout_devices": False})
        assert req.body["logout_devices"] is False
        assert req.body["auth"]["identifier"] == {"type": "m.id.user", "user": "u"}

    def test_password_email_token(self):
        req = request.password_email_token(BASE_URL, "secret", "a@example.org", 1)
        assert req.path == f"{R0}/account/password/email/requestToken"
        assert req.body == {"client_secret": "secret", "email": "a@example.org", "send_attempt": 1}

    def test_password_msisdn_token(self):
        req = request.password_msisdn_token(BASE_URL, "secret", "GB", "07700900000", 1, {"next_link": "x"})
        assert req.path == f"{R0}/account/password/msisdn/requestToken"
        assert req.body == {
            "client_secret": "secret",
            "country": "GB",
            "phone_number": "07700900000",
            "send_attempt": 1,
            "next_link": "x",
        }

    def test_deactivate_account(self):
        req = request.deactivate_account(BASE_URL, TOKEN)
        assert req.method == Method.POST
        assert req.path == f"{R0}/account/deactivate"
        assert req.headers == (BEARER,)
        assert req.body == {}

    def test_deactivate_account_with_options(self):
        req = request.deactivate_account(BASE_URL, TOKEN, {"auth": auth.login_dummy(), "id_server": "id"})
        assert req.body == {"auth": {"type": "m.login.dummy"}, "id_server": "id"}


class TestThirdPartyIdentifiers:
    def test_account_3pids(self):
        req = request.account_3pids(BASE_URL, TOKEN)
        assert req.method == Method.GET
        assert req.path == f"{R0}/account/3pid"
        assert req.headers == (BEARER,)

    def test_account_add_3pid(self):
        req = request.account_add_3pid(BASE_URL, TOKEN, "secret", "sid")
        assert req.method == Method.POST
        assert req.path == f"{R0}/account/3pid/add"
        assert req.headers == (BEARER,)
        assert req.body == {"client_secret": "secret", "sid": "sid"}

    def test_account_add_3pid_with_auth(self):
        session_auth = auth.put_session(auth.login_dummy(), "session")
        req = request.account_add_3pid(BASE_URL, TOKEN, "secret", "sid", {"auth": session_auth})
        assert req.body["auth"] == {"type": "m.login.dummy", "session": "session"}

    def test_account_bind_3pid(self):
        req = request.account_bind_3pid(BASE_URL, TOKEN, "secret", "id.example.org", "id_token", "sid")
        assert req.path == f"{R0}/account/3pid/bind"
        assert req.headers == (BEARER,)
        assert req.body == {
            "client_secret": "secret",
            "sid": "sid",
            "id_server": "id.example.org",
            "id_access_token": "id_token",
        }

    def test_account_delete_3pid(self):
        req = request.account_delete_3pid(BASE_URL, TOKEN, "email", "a@example.org")
        assert req.path == f"{R0}/account/3pid/delete"
        assert req.body == {"medium": "email", "address": "a@example.org"}

    def test_account_delete_3pid_with_options(self):
        req = request.account_delete_3pid(BASE_URL, TOKEN, "email", "a@example.org", {"id_server": "id"})
        assert req.body == {"medium": "email", "address": "a@example.org", "id_server": "id"}

    def test_account_unbind_3pid(self):
        req = request.account_unbind_3pid(BASE_URL, TOKEN, "msisdn", "447700900000", {"id_server": "id"})
        assert req.path == f"{R0}/account/3pid/unbind"
        assert req.headers == (BEARER,)
        assert req.body == {"medium": "msisdn", "address": "447700900000", "id_server": "id"}

    def test_account_email_token(self):
        req = request.account_email_token(BASE_URL, TOKEN, "secret", "a@example.org", 1)
        assert req.path == f"{R0}/account/3pid/email/requestToken"
        assert req.headers == (BEARER,)
        assert req.body == {"client_secret": "secret", "email": "a@example.org", "send_attempt": 1}

    def test_account_msisdn_token(self):
        req = request.account_msisdn_token(BASE_URL, TOKEN, "secret", "GB", "07700900000", 1)
        assert req.path == f"{R0}/account/3pid/msisdn/requestToken"
        assert req.headers == (BEARER,)
        assert req.body["phone_number"] == "07700900000"

    def test_whoami(self):
        req = request.whoami(BASE_URL, TOKEN)
        assert req.method == Method.GET
        assert req.path == f"{R0}/account/whoami"
        assert req.headers == (BEARER,)


class TestSync:
    def test_sync(self):
        req = request.sync(BASE_URL, TOKEN)
        assert req.method == Method.GET
        assert req.path == f"{R0}/sync"
        assert req.headers == (BEARER,)
        assert req.query_params == ()

    def test_sync_with_options(self):
        req = request.sync(BASE_URL, TOKEN, {"timeout": 1000, "since": "s1"})
        assert dict(req.query_params) == {"since": "s1", "timeout": 1000}
        assert len(req.query_params) == 2
        assert req.headers == (BEARER,)
        assert req.body == {}

    def test_query_params_are_sorted(self):
        req = request.sync(BASE_URL, TOKEN, {"timeout": 1000, "since": "s1", "full_state": True})
        assert [k for k, _ in req.query_params] == ["full_state", "since", "timeout"]


class TestRoomEvents:
    def test_room_event(self):
        req = request.room_event(BASE_URL, TOKEN, ROOM_ID, "$someevent")
        assert req.method == Method.GET
        assert req.path == f"{R0}/rooms/{ENCODED_ROOM_ID}/event/%24someevent"
        assert req.headers == (BEARER,)

    def test_room_state_event(self):
        req = request.room_state_event(BASE_URL, TOKEN, ROOM_ID, "m.room.member", USER_ID)
        assert req.path == f"{R0}/rooms/{ENCODED_ROOM_ID}/state/m.room.member/{ENCODED_USER_ID}"

    def test_room_state_event_encodes_event_type(self):
        req = request.room_state_event(BASE_URL, TOKEN, ROOM_ID, "org.example/custom type", "")
        assert req.path == f"{R0}/rooms/{ENCODED_ROOM_ID}/state/org.example%2Fcustom%20type/"

    def test_room_state(self):
        req = request.room_state(BASE_URL, TOKEN, ROOM_ID)
        assert req.path == f"{R0}/rooms/{ENCODED_ROOM_ID}/state"

    def test_room_members(self):
        req = request.room_members(BASE_URL, TOKEN, ROOM_ID)
        assert req.path == f"{R0}/rooms/{ENCODED_ROOM_ID}/members"
        assert req.query_params == ()

    def test_room_members_with_options(self):
        req = request.room_members(BASE_URL, TOKEN, ROOM_ID, {"membership": "join", "at": "t1"})
        assert req.query_params == (("at", "t1"), ("membership", "join"))

    def test_room_joined_members(self):
        req = request.room_joined_members(BASE_URL, TOKEN, ROOM_ID)
        assert req.path == f"{R0}/rooms/{ENCODED_ROOM_ID}/joined_members"

    def test_room_messages(self):
        req = request.room_messages(BASE_URL, TOKEN, ROOM_ID, "t1", "b")
        assert req.method == Method.GET
        assert req.path == f"{R0}/rooms/{ENCODED_ROOM_ID}/messages"
        assert req.query_params == (("dir", "b"), ("from", "t1"))
        assert req.body == {}

    def test_room_messages_with_options(self):
        req = request.room_messages(BASE_URL, TOKEN, ROOM_ID, "t1", "f", {"limit": 10, "dir": "b"})
        assert dict(req.query_params) == {"from": "t1", "dir": "f", "limit": 10}


class TestSendingEvents:
    def test_send_text_message(self):
        event = RoomEvent.message("!abc:example.org", MessageType.TEXT, "hello", "t1")
        req = request.send_room_event(BASE_URL, TOKEN, event)
        assert req.method == Method.PUT
        assert req.path == "/_matrix/client/r0/rooms/%21abc%3Aexample.org/send/m.room.message/t1"
        assert req.body == {"msgtype": "m.text", "body": "hello"}
        assert req.headers == (BEARER,)

    def test_send_room_event_encodes_transaction_id(self):
        event = RoomEvent.message(ROOM_ID, MessageType.NOTICE, "hi", "a/b c")
        req = request.send_room_event(BASE_URL, TOKEN, event)
        assert req.path.endswith("/send/m.room.message/a%2Fb%20c")

    def test_send_state_event(self):
        event = StateEvent.join_rules(ROOM_ID, "public")
        req = request.send_state_event(BASE_URL, TOKEN, event)
        assert req.method == Method.PUT
        assert req.path == f"{R0}/rooms/{ENCODED_ROOM_ID}/state/m.room.join_rules/"
        assert req.body == {"join_rule": "public"}

    def test_send_state_event_with_state_key(self):
        event = StateEvent(content={"membership": "join"}, type="m.room.member", room_id=ROOM_ID, state_key=USER_ID)
        req = request.send_state_event(BASE_URL, TOKEN, event)
        assert req.path == f"{R0}/rooms/{ENCODED_ROOM_ID}/state/m.room.member/{ENCODED_USER_ID}"

    def test_redact_room_event(self):
        req = request.redact_room_event(BASE_URL, TOKEN, ROOM_ID, "$event", "t2")
        assert req.method == Method.PUT
        assert req.path == f"{R0}/rooms/{ENCODED_ROOM_ID}/redact/%24event/t2"
        assert req.body == {}

    def test_redact_room_event_with_reason(self):
        req = request.redact_room_event(BASE_URL, TOKEN, ROOM_ID, "$event", "t2", {"reason": "spam"})
        assert req.body == {"reason": "spam"}


class TestRoomCreationAndMembership:
    def test_create_room(self):
        req = request.create_room(BASE_URL, TOKEN)
        assert req.method == Method.POST
        assert req.path == f"{R0}/createRoom"
        assert req.headers == (BEARER,)
        assert req.body == {}

    def test_create_room_with_options(self):
        opts = {"visibility": "public", "room_alias_name": "test", "name": "Test", "topic": "t"}
        req = request.create_room(BASE_URL, TOKEN, opts)
        assert req.body == opts

    def test_joined_rooms(self):
        req = request.joined_rooms(BASE_URL, TOKEN)
        assert req.method == Method.GET
        assert req.path == f"{R0}/joined_rooms"

    def test_room_invite(self):
        req = request.room_invite(BASE_URL, TOKEN, ROOM_ID, USER_ID)
        assert req.method == Method.POST
        assert req.path == f"{R0}/rooms/{ENCODED_ROOM_ID}/invite"
        assert req.body == {"user_id": USER_ID}

    def test_join_room_by_alias(self):
        req = request.join_room(BASE_URL, TOKEN, "#alias:matrix.org")
        assert req.method == Method.POST
        assert req.path == f"{R0}/join/%23alias%3Amatrix.org"
        assert req.body == {}

    def test_join_room_with_options(self):
        signed = {"sender": USER_ID, "mxid": USER_ID, "token": "t", "signatures": {}}
        req = request.join_room(BASE_URL, TOKEN, ROOM_ID, {"third_party_signed": signed})
        assert req.body == {"third_party_signed": signed}

    def test_leave_room(self):
        req = request.leave_room(BASE_URL, TOKEN, ROOM_ID)
        assert req.path == f"{R0}/rooms/{ENCODED_ROOM_ID}/leave"
        assert req.body == {}

    def test_forget_room(self):
        req = request.forget_room(BASE_URL, TOKEN, ROOM_ID)
        assert req.path == f"{R0}/rooms/{ENCODED_ROOM_ID}/forget"

    @pytest.mark.parametrize("builder, action", [
        (request.room_kick, "kick"),
        (request.room_ban, "ban"),
    ])
    def test_kick_and_ban(self, builder, action):
        req = builder(BASE_URL, TOKEN, ROOM_ID, USER_ID)
        assert req.method == Method.POST
        assert req.path == f"{R0}/rooms/{ENCODED_ROOM_ID}/{action}"
        assert req.body == {"user_id": USER_ID}

        req = builder(BASE_URL, TOKEN, ROOM_ID, USER_ID, {"reason": "bye", "user_id": "@other:matrix.org"})
        assert req.body == {"user_id": USER_ID, "reason": "bye"}

    def test_room_unban(self):
        req = request.room_unban(BASE_URL, TOKEN, ROOM_ID, USER_ID)
        assert req.path == f"{R0}/rooms/{ENCODED_ROOM_ID}/unban"
        assert req.body == {"user_id": USER_ID}


class TestRoomDiscovery:
    def test_room_visibility(self):
        req = request.room_visibility(BASE_URL, ROOM_ID)
        assert req.method == Method.GET
        assert req.path == f"{R0}/directory/list/room/{ENCODED_ROOM_ID}"
        assert_anonymous(req)

    def test_set_room_visibility(self):
        req = request.set_room_visibility(BASE_URL, TOKEN, ROOM_ID, "private")
        assert req.method == Method.PUT
        assert req.headers == (BEARER,)
        assert req.body == {"visibility": "private"}

    def test_public_rooms(self):
        req = request.public_rooms(BASE_URL)
        assert req.method == Method.GET
        assert req.path == f"{R0}/publicRooms"
        assert_anonymous(req)

    def test_public_rooms_with_options(self):
        req = request.public_rooms(BASE_URL, {"limit": 10, "since": "s", "server": "matrix.org"})
        assert req.query_params == (("limit", 10), ("server", "matrix.org"), ("since", "s"))

    def test_filter_public_rooms(self):
        filters = {"limit": 10, "filter": {"generic_search_term": "foo"}}
        req = request.filter_public_rooms(BASE_URL, TOKEN, filters)
        assert req.method == Method.POST
        assert req.path == f"{R0}/publicRooms"
        assert req.headers == (BEARER,)
        assert req.query_params == ()
        assert req.body == filters

    def test_filter_public_rooms_with_server(self):
        req = request.filter_public_rooms(BASE_URL, TOKEN, {"limit": 10}, "matrix.org")
        assert req.query_params == (("server", "matrix.org"),)
        assert req.body == {"limit": 10}

    def test_room_alias(self):
        req = request.room_alias(BASE_URL, "#room:matrix.org")
        assert req.method == Method.GET
        assert req.path == f"{R0}/directory/room/%23room%3Amatrix.org"
        assert_anonymous(req)

    def test_create_room_alias(self):
        req = request.create_room_alias(BASE_URL, TOKEN, "#room:matrix.org", ROOM_ID)
        assert req.method == Method.PUT
        assert req.body == {"room_id": ROOM_ID}
        assert req.headers == (BEARER,)

    def test_delete_room_alias(self):
        req = request.delete_room_alias(BASE_URL, TOKEN, "#room:matrix.org")
        assert req.method == Method.DELETE
        assert req.path == f"{R0}/directory/room/%23room%3Amatrix.org"
        assert not req.sends_body


class TestUserDirectory:
    def test_search(self):
        req = request.user_directory_search(BASE_URL, TOKEN, "mickey")
        assert req.method == Method.POST
        assert req.path == f"{R0}/user_directory/search"
        assert req.headers == (BEARER,)
        assert req.body == {"search_term": "mickey"}

    def test_language_only(self):
        req = request.user_directory_search(BASE_URL, TOKEN, "mickey", {"language": "en-US"})
        assert req.headers == (BEARER, ("Accept-Language", "en-US"))
        assert req.body == {"search_term": "mickey"}

    def test_limit_only(self):
        req = request.user_directory_search(BASE_URL, TOKEN, "mickey", {"limit": 42})
        assert req.headers == (BEARER,)
        assert req.body == {"search_term": "mickey", "limit": 42}

    def test_language_and_limit(self):
        req = request.user_directory_search(BASE_URL, TOKEN, "mickey", {"language": "en-US", "limit": 5})
        assert req.headers == (BEARER, ("Accept-Language", "en-US"))
        assert req.body == {"search_term": "mickey", "limit": 5}
        assert "language" not in req.body

    def test_unrecognised_options_are_ignored(self):
        req = request.user_directory_search(BASE_URL, TOKEN, "mickey", {"foo": "bar", "bar": "foo"})
        assert req.headers == (BEARER,)
        assert req.body == {"search_term": "mickey"}


class TestUserProfile:
    def test_set_display_name(self):
        req = request.set_display_name(BASE_URL, TOKEN, USER_ID, "Alice")
        assert req.method == Method.PUT
        assert req.path == f"{R0}/profile/{ENCODED_USER_ID}/displayname"
        assert req.headers == (BEARER,)
        assert req.body == {"displayname": "Alice"}

    def test_display_name(self):
        req = request.display_name(BASE_URL, USER_ID)
        assert req.method == Method.GET
        assert req.path == f"{R0}/profile/{ENCODED_USER_ID}/displayname"
        assert_anonymous(req)

    def test_set_avatar_url(self):
        req = request.set_avatar_url(BASE_URL, TOKEN, USER_ID, "mxc://matrix.org/abc")
        assert req.method == Method.PUT
        assert req.path == f"{R0}/profile/{ENCODED_USER_ID}/avatar_url"
        assert req.body == {"avatar_url": "mxc://matrix.org/abc"}

    def test_avatar_url(self):
        req = request.avatar_url(BASE_URL, USER_ID)
        assert req.path == f"{R0}/profile/{ENCODED_USER_ID}/avatar_url"
        assert_anonymous(req)

    def test_user_profile(self):
        req = request.user_profile(BASE_URL, USER_ID)
        assert req.method == Method.GET
        assert req.path == f"{R0}/profile/{ENCODED_USER_ID}"
        assert_anonymous(req)
