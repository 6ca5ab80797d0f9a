"""src/unrestrictive_url/__init__.py

unrestrictive_url - URLs you can edit without a strict grammar in the way.

A parsed URL is split into independent components that can be changed or
removed freely, including the ones a standards-compliant URL cannot go
without, such as the scheme. Rendering the result always succeeds and only
writes separators for the components that are still there.

Parsing is done by ``yarl``; parse failures surface as ``ParseError``.

Example:
    Editing a URL::

        from unrestrictive_url import UnrestrictiveURL

        url = UnrestrictiveURL.parse("https://user:pw@github.com/SirWindfield")
        url.scheme = None
        url.password = None
        print(url)  # user@github.com/SirWindfield

    Display form::

        from unrestrictive_url import humanize_url

        humanize_url("https://github.com/SirWindfield/")  # github.com/SirWindfield
"""

import logging

from unrestrictive_url.exceptions import (
    EmptyHostError,
    ParseError,
    RelativeURLWithoutBaseError,
    UnrestrictiveURLError,
)
from unrestrictive_url.url.host import Domain, Host, Ipv4, Ipv6
from unrestrictive_url.url.parser import parse_url
from unrestrictive_url.url.view import UnrestrictiveURL
from unrestrictive_url.utils.humanize import HumanizeOptions, humanize_url
from unrestrictive_url.utils.validators import can_parse
from unrestrictive_url.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "UnrestrictiveURL",
    "Domain",
    "Ipv4",
    "Ipv6",
    "Host",
    "parse_url",
    "humanize_url",
    "HumanizeOptions",
    "can_parse",
    "UnrestrictiveURLError",
    "ParseError",
    "RelativeURLWithoutBaseError",
    "EmptyHostError",
    "__version__",
]
