"""
Session management: login and logout.
"""

from typing import Any

from matrix_sdk.models.request import Method, Request
from matrix_sdk.request._common import Options, build, client_path, merge


def login_flows(base_url: str) -> Request:
    """List the login types the homeserver accepts. Anonymous."""
    return build(Method.GET, base_url, client_path("login"))


def login(base_url: str, auth: dict[str, Any], options: Options = None) -> Request:
    """Log in with an auth payload from `matrix_sdk.auth`.

    Every auth key is required. Options carry `device_id`,
    `initial_device_display_name` and the like.
    """
    return build(Method.POST, base_url, client_path("login"), body=merge(auth, options))


def logout(base_url: str, token: str) -> Request:
    return build(Method.POST, base_url, client_path("logout"), token=token)


def logout_all(base_url: str, token: str) -> Request:
    """Invalidate every access token of the user, not just this one."""
    return build(Method.POST, base_url, client_path("logout", "all"), token=token)
