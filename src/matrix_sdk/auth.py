"""
Authentication payloads for login, registration and user-interactive auth.

Only password logins carry an `identifier`. Every helper returns a fresh
dict ready to drop into a request body.
"""

from typing import Any

LOGIN_DUMMY = "m.login.dummy"
LOGIN_TOKEN = "m.login.token"
LOGIN_PASSWORD = "m.login.password"
LOGIN_RECAPTCHA = "m.login.recaptcha"
LOGIN_EMAIL_IDENTITY = "m.login.email.identity"
LOGIN_MSISDN = "m.login.msisdn"

ID_USER = "m.id.user"
ID_THIRDPARTY = "m.id.thirdparty"
ID_PHONE = "m.id.phone"


def login_dummy() -> dict[str, Any]:
    return {"type": LOGIN_DUMMY}


def login_token(token: str) -> dict[str, Any]:
    return {"type": LOGIN_TOKEN, "token": token}


def login_recaptcha(response: str) -> dict[str, Any]:
    return {"type": LOGIN_RECAPTCHA, "response": response}


def login_email_identity(sid: str, client_secret: str) -> dict[str, Any]:
    """Email verification credential from a previous requestToken call."""
    return {"type": LOGIN_EMAIL_IDENTITY, "threepidCreds": [_three_pid_creds(sid, client_secret)]}


def login_msisdn(sid: str, client_secret: str) -> dict[str, Any]:
    """Phone (MSISDN) verification credential from a previous requestToken call."""
    return {"type": LOGIN_MSISDN, "threepidCreds": [_three_pid_creds(sid, client_secret)]}


def login_user(user: str, password: str) -> dict[str, Any]:
    return _login_password(id_user(user), password)


def login_3pid(medium: str, address: str, password: str) -> dict[str, Any]:
    return _login_password(id_thirdparty(medium, address), password)


def login_phone(country: str, phone: str, password: str) -> dict[str, Any]:
    return _login_password(id_phone(country, phone), password)


def id_user(user: str) -> dict[str, Any]:
    return {"type": ID_USER, "user": user}


def id_thirdparty(medium: str, address: str) -> dict[str, Any]:
    return {"type": ID_THIRDPARTY, "medium": medium, "address": address}


def id_phone(country: str, phone: str) -> dict[str, Any]:
    return {"type": ID_PHONE, "country": country, "phone": phone}


def put_session(payload: dict[str, Any], session_id: str) -> dict[str, Any]:
    """Return a copy of an auth/registration payload with `session` set.

    Used to continue a multi-stage flow (e.g. 3PID verification) once the
    homeserver has handed out a session id.
    """
    return {**payload, "session": session_id}


def _login_password(identifier: dict[str, Any], password: str) -> dict[str, Any]:
    return {"type": LOGIN_PASSWORD, "identifier": identifier, "password": password}


def _three_pid_creds(sid: str, client_secret: str) -> dict[str, str]:
    return {"sid": sid, "client_secret": client_secret}
