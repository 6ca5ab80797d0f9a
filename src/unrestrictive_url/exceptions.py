"""src/unrestrictive_url/exceptions.py

unrestrictive_url exceptions hierarchy.
"""


class UnrestrictiveURLError(Exception):
    """Base exception for all unrestrictive_url errors."""


class ParseError(UnrestrictiveURLError, ValueError):
    """
    The URL string could not be parsed.

    Raised only at the parser boundary. Editing and rendering a parsed URL
    never fail.
    """

    def __init__(self, message: str = "Invalid URL"):
        super().__init__(message)


class RelativeURLWithoutBaseError(ParseError):
    """The URL has no scheme and there is no base URL to resolve it against."""

    def __init__(self, message: str = "Relative URL without a base"):
        super().__init__(message)


class EmptyHostError(ParseError):
    """A scheme that requires a host was given none."""

    def __init__(self, message: str = "Empty host"):
        super().__init__(message)
