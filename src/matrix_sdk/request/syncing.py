"""
Client-server syncing.
"""

from matrix_sdk.models.request import Method, Request
from matrix_sdk.request._common import Options, build, client_path


def sync(base_url: str, token: str, options: Options = None) -> Request:
    """One poll of the sync endpoint.

    Options become query parameters: `filter`, `since`, `full_state`,
    `set_presence`, `timeout`.
    """
    return build(Method.GET, base_url, client_path("sync"), token=token, params=options)
