import pytest

from unrestrictive_url import UnrestrictiveURL


@pytest.fixture
def parsed():
    """Fixture providing a parse-and-decompose helper."""

    def _parsed(text):
        return UnrestrictiveURL.parse(text)

    return _parsed
