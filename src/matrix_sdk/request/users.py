"""
User directory search and user profiles.
"""

from matrix_sdk.encoding import encode_segment
from matrix_sdk.models.request import Method, Request
from matrix_sdk.request._common import Options, build, client_path


def user_directory_search(base_url: str, token: str, search_term: str, options: Options = None) -> Request:
    """Search the user directory.

    Only two options are recognised: `limit` goes into the body and
    `language` is sent as the Accept-Language header. Anything else is
    ignored.
    """
    options = options or {}
    body = {"search_term": search_term}
    if "limit" in options:
        body["limit"] = options["limit"]
    headers = (("Accept-Language", options["language"]),) if "language" in options else ()
    return build(
        Method.POST, base_url, client_path("user_directory", "search"), token=token, headers=headers, body=body,
    )


def _profile_path(user_id: str, *segments: str) -> str:
    return client_path("profile", encode_segment(user_id), *segments)


def set_display_name(base_url: str, token: str, user_id: str, display_name: str) -> Request:
    body = {"displayname": display_name}
    return build(Method.PUT, base_url, _profile_path(user_id, "displayname"), token=token, body=body)


def display_name(base_url: str, user_id: str) -> Request:
    return build(Method.GET, base_url, _profile_path(user_id, "displayname"))


def set_avatar_url(base_url: str, token: str, user_id: str, avatar_url: str) -> Request:
    body = {"avatar_url": avatar_url}
    return build(Method.PUT, base_url, _profile_path(user_id, "avatar_url"), token=token, body=body)


def avatar_url(base_url: str, user_id: str) -> Request:
    return build(Method.GET, base_url, _profile_path(user_id, "avatar_url"))


def user_profile(base_url: str, user_id: str) -> Request:
    return build(Method.GET, base_url, _profile_path(user_id))
