"""utils/validators.py

Validation utilities for unrestrictive_url.
"""

from unrestrictive_url.exceptions import ParseError
from unrestrictive_url.url.parser import parse_url


def can_parse(url: str) -> bool:
    """Whether ``url`` is accepted as an absolute URL."""
    try:
        parse_url(url)
    except ParseError:
        return False
    return True
