"""src/unrestrictive_url/utils/humanize.py

Short, human readable URLs.
"""

from dataclasses import dataclass
from typing import Optional

from unrestrictive_url.url.view import UnrestrictiveURL

__all__ = ["HumanizeOptions", "humanize_url"]


@dataclass
class HumanizeOptions:
    """
    What humanize_url removes.

    Attributes:
        strip_scheme: Drop the scheme, and with it the ``//``.
        strip_credentials: Drop user name and password.
        trim_trailing_slash: Drop one trailing ``/`` from the result.
    """

    strip_scheme: bool = True
    strip_credentials: bool = True
    trim_trailing_slash: bool = True


def humanize_url(url: str, options: Optional[HumanizeOptions] = None) -> str:
    """
    Shorten a URL for display.

    ``https://user:pw@github.com/SirWindfield/`` becomes
    ``github.com/SirWindfield``.

    Args:
        url: Absolute URL string.
        options: What to remove. Defaults to everything.

    Returns:
        Display form of the URL.

    Raises:
        ParseError: If ``url`` cannot be parsed.
    """
    if options is None:
        options = HumanizeOptions()

    view = UnrestrictiveURL.parse(url)
    if options.strip_scheme:
        view.scheme = None
    if options.strip_credentials:
        view.username = None
        view.password = None

    rendered = str(view)
    if options.trim_trailing_slash and rendered.endswith("/"):
        return rendered[:-1]
    return rendered
