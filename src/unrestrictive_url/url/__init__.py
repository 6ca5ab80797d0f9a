"""src/unrestrictive_url/url/__init__.py

URL component model, parser boundary and serializer.
"""

from .host import Domain, Host, Ipv4, Ipv6, parse_host
from .parser import cannot_be_a_base, host_of, parse_url, port_of
from .segments import PathSegments, path_segments
from .serializer import serialize
from .view import UnrestrictiveURL

__all__ = [
    "UnrestrictiveURL",
    "Domain",
    "Ipv4",
    "Ipv6",
    "Host",
    "parse_host",
    "parse_url",
    "host_of",
    "port_of",
    "cannot_be_a_base",
    "PathSegments",
    "path_segments",
    "serialize",
]
