"""
Endpoint Resolution for the Atlassian API Client

Joins a configured site URL with the relative path of an operation. The
relative path's query string is carried over byte for byte.
"""

import re
from urllib.parse import urlsplit, urlunsplit

from ..core.error_handler import InvalidURL


ALLOWED_SCHEMES = ('http', 'https')

# Whitespace and control characters are never valid inside a URI
_FORBIDDEN_CHARS = re.compile(r'[\x00-\x20\x7f]')
# A '%' must introduce exactly two hex digits
_BAD_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')


def _check_characters(value: str, what: str):
    if _FORBIDDEN_CHARS.search(value):
        raise InvalidURL(f"{what} contains whitespace or control characters: {value!r}")
    if _BAD_ESCAPE.search(value):
        raise InvalidURL(f"{what} contains a malformed percent escape: {value!r}")


def validate_base_url(base_url: str) -> str:
    """
    Validate a site URL

    Returns:
        The base URL normalized to end with a slash

    Raises:
        InvalidURL: If it is not an absolute http(s) URL with a host
    """
    if not isinstance(base_url, str) or not base_url:
        raise InvalidURL("base URL must be a non-empty string")

    _check_characters(base_url, "base URL")

    try:
        parts = urlsplit(base_url)
        parts.port
    except ValueError as e:
        raise InvalidURL(f"cannot parse base URL {base_url!r}: {e}") from e

    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        raise InvalidURL(f"base URL must use http or https: {base_url!r}")
    if not parts.hostname:
        raise InvalidURL(f"base URL has no host: {base_url!r}")
    if parts.query or parts.fragment:
        raise InvalidURL(f"base URL must not carry a query or fragment: {base_url!r}")

    path = parts.path if parts.path.endswith('/') else parts.path + '/'
    return urlunsplit((parts.scheme, parts.netloc, path, '', ''))


def resolve(base_url: str, relative_path: str) -> str:
    """
    Resolve an operation path against the site URL

    Args:
        base_url: Absolute site URL, with or without trailing slash
        relative_path: Path relative to the site, optionally with a query

    Returns:
        Absolute URL whose path is the base path followed by the relative
        path and whose query is exactly the relative path's query

    Raises:
        InvalidURL: If either input is not a valid URL reference
    """
    base = validate_base_url(base_url)

    if not isinstance(relative_path, str):
        raise InvalidURL(f"relative path must be a string, got {type(relative_path).__name__}")

    _check_characters(relative_path, "relative path")

    try:
        rel = urlsplit(relative_path)
    except ValueError as e:
        raise InvalidURL(f"cannot parse relative path {relative_path!r}: {e}") from e

    if rel.scheme or rel.netloc:
        raise InvalidURL(f"relative path must not name a scheme or host: {relative_path!r}")

    base_parts = urlsplit(base)
    path = base_parts.path.rstrip('/') + '/' + rel.path.lstrip('/')

    return urlunsplit((base_parts.scheme, base_parts.netloc, path, rel.query, rel.fragment))
