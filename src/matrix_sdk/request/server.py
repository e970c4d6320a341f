"""
Server administration and discovery.
"""

from matrix_sdk.models.request import Method, Request
from matrix_sdk.request._common import build, client_path


def spec_versions(base_url: str) -> Request:
    """Client-server API versions the homeserver supports."""
    return build(Method.GET, base_url, "/_matrix/client/versions")


def server_discovery(base_url: str) -> Request:
    """Well-known discovery document for the domain."""
    return build(Method.GET, base_url, "/.well-known/matrix/client")


def server_capabilities(base_url: str, token: str) -> Request:
    return build(Method.GET, base_url, client_path("capabilities"), token=token)
