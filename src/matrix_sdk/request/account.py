"""
Account registration, password management, deactivation and 3PIDs.

3PID flows:

- adding a 3PID during registration: `registration_email_token` or
  `registration_msisdn_token`, then `register_user`.
- adding a 3PID after registration: `account_email_token` or
  `account_msisdn_token`, then `account_add_3pid`.
- resetting a password via email: `password_email_token`, then
  `change_password`.
"""

from typing import Any

from matrix_sdk.encoding import encode_segment
from matrix_sdk.models.request import Method, Request
from matrix_sdk.request._common import Options, build, client_path, merge


def register_guest(base_url: str, options: Options = None) -> Request:
    # kind=guest is part of the fixed path, not a query parameter.
    return build(Method.POST, base_url, client_path("register") + "?kind=guest", body=dict(options or {}))


def register_user(base_url: str, password: str, auth: dict[str, Any], options: Options = None) -> Request:
    """Register a user account. Options: `username`, `device_id`,
    `initial_device_display_name`, `inhibit_login`."""
    body = merge({"password": password, "auth": auth}, options)
    return build(Method.POST, base_url, client_path("register"), body=body)


def registration_email_token(
    base_url: str, client_secret: str, email: str, send_attempt: int, options: Options = None,
) -> Request:
    body = merge(_email_token(client_secret, email, send_attempt), options)
    return build(Method.POST, base_url, client_path("register", "email", "requestToken"), body=body)


def registration_msisdn_token(
    base_url: str, client_secret: str, country: str, phone: str, send_attempt: int, options: Options = None,
) -> Request:
    body = merge(_msisdn_token(client_secret, country, phone, send_attempt), options)
    return build(Method.POST, base_url, client_path("register", "msisdn", "requestToken"), body=body)


def username_availability(base_url: str, username: str) -> Request:
    path = client_path("register", "available") + f"?username={encode_segment(username)}"
    return build(Method.GET, base_url, path)


def change_password(base_url: str, new_password: str, auth: dict[str, Any], options: Options = None) -> Request:
    body = merge({"new_password": new_password, "auth": auth}, options)
    return build(Method.POST, base_url, client_path("account", "password"), body=body)


def password_email_token(
    base_url: str, client_secret: str, email: str, send_attempt: int, options: Options = None,
) -> Request:
    body = merge(_email_token(client_secret, email, send_attempt), options)
    return build(Method.POST, base_url, client_path("account", "password", "email", "requestToken"), body=body)


def password_msisdn_token(
    base_url: str, client_secret: str, country: str, phone: str, send_attempt: int, options: Options = None,
) -> Request:
    body = merge(_msisdn_token(client_secret, country, phone, send_attempt), options)
    return build(Method.POST, base_url, client_path("account", "password", "msisdn", "requestToken"), body=body)


def deactivate_account(base_url: str, token: str, options: Options = None) -> Request:
    """Options: `auth`, `id_server`."""
    return build(Method.POST, base_url, client_path("account", "deactivate"), token=token, body=dict(options or {}))


def whoami(base_url: str, token: str) -> Request:
    return build(Method.GET, base_url, client_path("account", "whoami"), token=token)


# --- third-party identifiers -------------------------------------------------


def account_3pids(base_url: str, token: str) -> Request:
    return build(Method.GET, base_url, client_path("account", "3pid"), token=token)


def account_add_3pid(base_url: str, token: str, client_secret: str, sid: str, options: Options = None) -> Request:
    """Options: `auth` for user-interactive authentication."""
    body = merge({"client_secret": client_secret, "sid": sid}, options)
    return build(Method.POST, base_url, client_path("account", "3pid", "add"), token=token, body=body)


def account_bind_3pid(
    base_url: str, token: str, client_secret: str, id_server: str, id_access_token: str, sid: str,
) -> Request:
    body = {
        "client_secret": client_secret,
        "sid": sid,
        "id_server": id_server,
        "id_access_token": id_access_token,
    }
    return build(Method.POST, base_url, client_path("account", "3pid", "bind"), token=token, body=body)


def account_delete_3pid(base_url: str, token: str, medium: str, address: str, options: Options = None) -> Request:
    """Options: `id_server`."""
    body = merge({"medium": medium, "address": address}, options)
    return build(Method.POST, base_url, client_path("account", "3pid", "delete"), token=token, body=body)


def account_unbind_3pid(base_url: str, token: str, medium: str, address: str, options: Options = None) -> Request:
    """Options: `id_server`."""
    body = merge({"medium": medium, "address": address}, options)
    return build(Method.POST, base_url, client_path("account", "3pid", "unbind"), token=token, body=body)


def account_email_token(
    base_url: str, token: str, client_secret: str, email: str, send_attempt: int, options: Options = None,
) -> Request:
    body = merge(_email_token(client_secret, email, send_attempt), options)
    return build(
        Method.POST, base_url, client_path("account", "3pid", "email", "requestToken"), token=token, body=body,
    )


def account_msisdn_token(
    base_url: str,
    token: str,
    client_secret: str,
    country: str,
    phone: str,
    send_attempt: int,
    options: Options = None,
) -> Request:
    body = merge(_msisdn_token(client_secret, country, phone, send_attempt), options)
    return build(
        Method.POST, base_url, client_path("account", "3pid", "msisdn", "requestToken"), token=token, body=body,
    )


def _email_token(client_secret: str, email: str, send_attempt: int) -> dict[str, Any]:
    return {"client_secret": client_secret, "email": email, "send_attempt": send_attempt}


def _msisdn_token(client_secret: str, country: str, phone: str, send_attempt: int) -> dict[str, Any]:
    return {
        "client_secret": client_secret,
        "country": country,
        "phone_number": phone,
        "send_attempt": send_attempt,
    }
