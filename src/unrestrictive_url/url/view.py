"""src/unrestrictive_url/url/view.py

Freely editable URL components.
"""

from typing import Any, Optional

from yarl import URL

from unrestrictive_url.url.host import Host
from unrestrictive_url.url.parser import cannot_be_a_base, host_of, parse_url, port_of
from unrestrictive_url.url.segments import PathSegments, path_segments
from unrestrictive_url.url.serializer import serialize

__all__ = ["UnrestrictiveURL"]


class UnrestrictiveURL:
    """
    A parsed URL split into independent, optional components.

    Any component can be reassigned or set to None, including ones a strict
    URL cannot go without, such as the scheme. ``str()`` renders whatever is
    left.

    Example::

        url = UnrestrictiveURL.parse("https://github.com")
        url.scheme = "jojo"
        assert str(url) == "jojo://github.com/"

    Attributes:
        scheme: Scheme without the trailing colon.
        username: User name. Never the empty string after decomposition.
        password: Password. An empty password is kept, but not rendered.
        host: Domain, Ipv4 or Ipv6 host.
        port: Explicit non-default port.
        path: Path, including its leading slash if it has one.
        query: Query without the leading ``?``.
        fragment: Fragment without the leading ``#``.
    """

    # pylint: disable=too-many-instance-attributes
    __slots__ = (
        "scheme",
        "username",
        "password",
        "host",
        "port",
        "path",
        "query",
        "fragment",
        "_cannot_be_a_base",
    )

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        *,
        scheme: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        host: Optional[Host] = None,
        port: Optional[int] = None,
        path: Optional[str] = None,
        query: Optional[str] = None,
        fragment: Optional[str] = None,
        cannot_be_a_base: bool = False,
    ):
        self.scheme = scheme
        self.username = username
        self.password = password
        self.host = host
        self.port = port
        self.path = path
        self.query = query
        self.fragment = fragment
        self._cannot_be_a_base = cannot_be_a_base

    @classmethod
    def from_url(cls, url: URL) -> "UnrestrictiveURL":
        """
        Decompose a parsed URL.

        Components are copied as they are, except for an empty user name,
        which becomes None. Empty passwords stay empty strings.

        Args:
            url: URL returned by ``parse_url``.

        Returns:
            New UnrestrictiveURL.
        """
        return cls(
            scheme=url.scheme or None,
            username=url.raw_user or None,
            password=url.raw_password,
            host=host_of(url),
            port=port_of(url),
            path=url.raw_path,
            query=url.raw_query_string or None,
            fragment=url.raw_fragment or None,
            cannot_be_a_base=cannot_be_a_base(url),
        )

    @classmethod
    def parse(cls, text: str) -> "UnrestrictiveURL":
        """
        Parse and decompose a URL string.

        Raises:
            ParseError: If the string is not a valid absolute URL.
        """
        return cls.from_url(parse_url(text))

    @property
    def cannot_be_a_base(self) -> bool:
        """Whether the path is opaque (``mailto:``, ``data:``, ...)."""
        return self._cannot_be_a_base

    def path_segments(self) -> Optional[PathSegments]:
        """Segments of the path, None unless the path starts with ``/``."""
        return path_segments(self.path)

    def __str__(self) -> str:
        return serialize(self)

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={getattr(self, name)!r}"
            for name in self.__slots__
            if not name.startswith("_")
        )
        return f"UnrestrictiveURL({fields}, cannot_be_a_base={self._cannot_be_a_base!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, UnrestrictiveURL):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    __hash__ = None  # type: ignore[assignment]
