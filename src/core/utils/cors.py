"""
Cross-origin policy for the gallery JSON view.

Browsers send ``Origin`` only on cross-origin AJAX requests. When the web
front end is served from a subdomain (``https://cdn.example.com``) and calls
the gallery on the root domain (``example.com``), the ``Host`` value appears
inside the ``Origin`` value and the origin is echoed back.

The containment test is not a suffix match: ``https://notexample.com``
contains ``example.com`` as well. It is kept for compatibility with existing
front ends.
"""

from collections.abc import Mapping

from core.utils.constants import HEADER_HOST, HEADER_ORIGIN


def get_header(headers: Mapping[str, str] | None, name: str) -> str | None:
    """Return a request header value, matching the name case-insensitively."""
    if not headers:
        return None

    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value

    return None


def allowed_cors_origin(headers: Mapping[str, str] | None) -> str | None:
    """Return the Origin to echo back, or None when CORS must not be granted."""
    origin = get_header(headers, HEADER_ORIGIN)
    host = get_header(headers, HEADER_HOST)

    if not origin or not host:
        return None

    if host in origin:
        return origin

    return None
