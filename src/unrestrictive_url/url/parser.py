"""src/unrestrictive_url/url/parser.py

Boundary to the URL parser.

Parsing is delegated to ``yarl``. This module rejects the inputs a WHATWG
parser would reject without a base URL and exposes the few accessors the
decomposer needs that yarl does not provide directly.
"""

import logging
from typing import Optional

from yarl import URL

from unrestrictive_url.exceptions import (
    EmptyHostError,
    ParseError,
    RelativeURLWithoutBaseError,
)
from unrestrictive_url.url.host import Host, parse_host

__all__ = [
    "SPECIAL_SCHEMES",
    "parse_url",
    "host_of",
    "port_of",
    "cannot_be_a_base",
]

logger = logging.getLogger(__name__)

SPECIAL_SCHEMES = frozenset(("ftp", "file", "http", "https", "ws", "wss"))

# Special schemes that cannot go without a host. ``file`` may.
_HOST_REQUIRED = SPECIAL_SCHEMES - {"file"}


def parse_url(text: str) -> URL:
    """
    Parse an absolute URL.

    Args:
        text: URL string.

    Returns:
        The parsed ``yarl.URL``.

    Raises:
        RelativeURLWithoutBaseError: No scheme.
        EmptyHostError: A special scheme without a host.
        ParseError: Any other rejection by the parser.
    """
    try:
        url = URL(text)
        # Host and port are split lazily on some yarl versions
        url.raw_host  # pylint: disable=pointless-statement
        url.explicit_port  # pylint: disable=pointless-statement
    except ValueError as exc:
        logger.debug("Rejected URL %r: %s", text, exc)
        raise ParseError(str(exc) or "Invalid URL") from exc

    if not url.scheme:
        logger.debug("Rejected URL %r: no scheme", text)
        raise RelativeURLWithoutBaseError()

    if url.scheme in _HOST_REQUIRED and not url.raw_host:
        logger.debug("Rejected URL %r: %s requires a host", text, url.scheme)
        raise EmptyHostError()

    return url


def host_of(url: URL) -> Optional[Host]:
    """Tagged host of ``url``, None when it has none."""
    raw_host = url.raw_host
    if not raw_host:
        return None
    return parse_host(raw_host)


def port_of(url: URL) -> Optional[int]:
    """Explicit port of ``url``. The scheme's default port counts as no port."""
    if url.explicit_port is None or url.is_default_port():
        return None
    return url.explicit_port


def cannot_be_a_base(url: URL) -> bool:
    """
    Whether ``url`` has an opaque path, as ``mailto:`` and ``data:`` URLs do.

    That is a non-special scheme with no authority and a path that does not
    start with ``/``.
    """
    if not url.scheme or url.scheme in SPECIAL_SCHEMES:
        return False
    if url.raw_authority:
        return False
    return not url.raw_path.startswith("/")
