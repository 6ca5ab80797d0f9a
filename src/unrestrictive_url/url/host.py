"""src/unrestrictive_url/url/host.py

Tagged host values.
"""

import ipaddress
from dataclasses import dataclass
from typing import Union

__all__ = ["Domain", "Ipv4", "Ipv6", "Host", "parse_host"]


@dataclass(frozen=True)
class Domain:
    """A registered name, kept exactly as the parser produced it."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Ipv4:
    """An IPv4 address host."""

    address: ipaddress.IPv4Address

    def __str__(self) -> str:
        return str(self.address)


@dataclass(frozen=True)
class Ipv6:
    """
    An IPv6 address host.

    ``str()`` gives the bare address; brackets are added when the host is
    written into an authority.
    """

    address: ipaddress.IPv6Address

    def __str__(self) -> str:
        return str(self.address)


Host = Union[Domain, Ipv4, Ipv6]


def parse_host(text: str) -> Host:
    """
    Classify a host string.

    Args:
        text: Host as found in an authority. IPv6 literals may be bracketed.

    Returns:
        Ipv4 or Ipv6 for IP literals, Domain for anything else.
    """
    candidate = text
    if candidate.startswith("[") and candidate.endswith("]"):
        candidate = candidate[1:-1]

    try:
        address = ipaddress.ip_address(candidate)
    except ValueError:
        return Domain(text)

    if isinstance(address, ipaddress.IPv6Address):
        return Ipv6(address)
    return Ipv4(address)
