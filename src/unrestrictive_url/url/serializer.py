"""src/unrestrictive_url/url/serializer.py

Relaxed URL serialization.

Follows the WHATWG URL serializer, but tolerates the component combinations
a strict URL forbids: a missing scheme, a missing host, credentials without
a password. Separators are only written for components that are present.
"""

from typing import TYPE_CHECKING, List

from unrestrictive_url.url.host import Ipv6

if TYPE_CHECKING:
    from unrestrictive_url.url.view import UnrestrictiveURL

__all__ = ["serialize"]


def serialize(url: "UnrestrictiveURL") -> str:
    """
    Render the components of ``url`` into a string.

    Args:
        url: Component view to render. It is only read.

    Returns:
        The serialized URL. Never fails.
    """
    parts: List[str] = []

    if url.scheme is not None:
        parts.append(f"{url.scheme}:")

    if url.host is not None:
        # "//" only follows a scheme
        if url.scheme is not None:
            parts.append("//")

        if url.username is not None:
            parts.append(url.username)
            if url.password:
                parts.append(f":{url.password}")
            parts.append("@")

        if isinstance(url.host, Ipv6):
            parts.append(f"[{url.host}]")
        else:
            parts.append(str(url.host))

        if url.port is not None:
            parts.append(f":{url.port}")

    if url.cannot_be_a_base:
        segments = url.path_segments()
        if segments is not None:
            parts.append(segments.first())
    elif url.path is not None:
        if url.path == "/":
            parts.append("/")
        else:
            segments = url.path.split("/")
            # "//x" without an authority would read as a host
            if url.host is None and len(segments) > 1 and segments[0] == "":
                parts.append("/.")
            parts.append("/".join(segments))

    if url.query is not None:
        parts.append(f"?{url.query}")

    if url.fragment is not None:
        parts.append(f"#{url.fragment}")

    return "".join(parts)
