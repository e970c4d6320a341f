"""
Path segment encoding for Matrix identifiers.

Room IDs, user IDs, event IDs and aliases carry sigils and separators
(`!`, `#`, `$`, `@`, `:`) that are reserved in URL paths. Each identifier is
encoded on its own and joined into a path with literal `/`.
"""

from urllib.parse import quote, unquote


def encode_segment(identifier: str) -> str:
    """Percent-encode one path segment. Nothing is left safe, including `/`."""
    return quote(identifier, safe="")


def decode_segment(segment: str) -> str:
    return unquote(segment)

