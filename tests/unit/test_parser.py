"""Unit tests for unrestrictive_url.url.parser module."""

import ipaddress
import logging

import pytest
from yarl import URL

from unrestrictive_url.exceptions import (
    EmptyHostError,
    ParseError,
    RelativeURLWithoutBaseError,
)
from unrestrictive_url.url.host import Domain, Ipv4, Ipv6
from unrestrictive_url.url.parser import cannot_be_a_base, host_of, parse_url, port_of


class TestParseURL:
    """Tests for parse_url()."""

    def test_returns_yarl_url(self):
        """Test that a valid URL comes back as a yarl URL."""
        url = parse_url("https://github.com/SirWindfield")
        assert isinstance(url, URL)
        assert url.scheme == "https"
        assert url.raw_host == "github.com"

    @pytest.mark.parametrize("text", ["github.com", "/path/only", ""])
    def test_relative_url_rejected(self, text):
        """Test that URLs without a scheme are rejected."""
        with pytest.raises(RelativeURLWithoutBaseError):
            parse_url(text)

    def test_special_scheme_requires_host(self):
        """Test that special schemes other than file need a host."""
        with pytest.raises(EmptyHostError):
            parse_url("http:foo")

    def test_file_without_host(self):
        """Test that file URLs may omit the host."""
        assert parse_url("file:///tmp/x").raw_path == "/tmp/x"

    @pytest.mark.parametrize(
        "text",
        ["http://example.com:99999/", "http://example.com:port/", "http://[::1/"],
    )
    def test_parser_errors_wrapped(self, text):
        """Test that parser failures surface as ParseError."""
        with pytest.raises(ParseError) as exc_info:
            parse_url(text)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_rejection_logged(self, caplog):
        """Test that rejected input is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="unrestrictive_url.url.parser"):
            with pytest.raises(ParseError):
                parse_url("github.com")
        assert "github.com" in caplog.text


class TestAccessors:
    """Tests for host_of(), port_of() and cannot_be_a_base()."""

    def test_host_domain(self):
        """Test domain hosts."""
        assert host_of(parse_url("https://github.com")) == Domain("github.com")

    def test_host_ipv4(self):
        """Test IPv4 hosts."""
        expected = Ipv4(ipaddress.IPv4Address("127.0.0.1"))
        assert host_of(parse_url("http://127.0.0.1/")) == expected

    def test_host_ipv6(self):
        """Test IPv6 hosts."""
        expected = Ipv6(ipaddress.IPv6Address("::1"))
        assert host_of(parse_url("http://[::1]:8080/")) == expected

    def test_no_host(self):
        """Test URLs without an authority have no host."""
        assert host_of(parse_url("mailto:someone@example.com")) is None

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("https://example.com/", None),
            ("https://example.com:443/", None),
            ("http://example.com:80/", None),
            ("https://example.com:8443/", 8443),
            ("http://example.com:8080/", 8080),
        ],
    )
    def test_port(self, text, expected):
        """Test that only non-default explicit ports are reported."""
        assert port_of(parse_url(text)) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("mailto:someone@example.com", True),
            ("data:text/plain,hello", True),
            ("https://github.com", False),
            ("file:///tmp/x", False),
            ("git://example.com/repo", False),
        ],
    )
    def test_cannot_be_a_base(self, text, expected):
        """Test opaque path detection."""
        assert cannot_be_a_base(parse_url(text)) is expected
