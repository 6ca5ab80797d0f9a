"""src/unrestrictive_url/url/segments.py

Path segment access.
"""

from typing import Iterator, Optional

__all__ = ["PathSegments", "path_segments"]


class PathSegments:
    """
    Lazy view over the ``/``-separated segments of an absolute path.

    The leading slash is not part of any segment. Consecutive slashes yield
    empty segments. Each call to ``iter()`` starts over from the first
    segment.
    """

    __slots__ = ("_path",)

    def __init__(self, path: str):
        # Without the leading slash
        self._path = path[1:]

    def __iter__(self) -> Iterator[str]:
        path = self._path
        start = 0
        while True:
            end = path.find("/", start)
            if end == -1:
                yield path[start:]
                return
            yield path[start:end]
            start = end + 1

    def first(self) -> str:
        """Return the first segment. There is always at least one."""
        return next(iter(self))

    def __repr__(self) -> str:
        return f"PathSegments({'/' + self._path!r})"


def path_segments(path: Optional[str]) -> Optional[PathSegments]:
    """
    Segments of ``path``, or None when it is absent or does not start with ``/``.
    """
    if path is None or not path.startswith("/"):
        return None
    return PathSegments(path)
