"""
IP literal parsing.

Implements the RFC 3986 / RFC 6874 host literal grammars:
- IPv4address: four dotted decimal octets (0-255), kept verbatim
- IPv6address: inside brackets, with an optional "%25"-escaped zone identifier
- IPvFuture: "v" HEXDIG+ "." 1*(unreserved / sub-delims / ":"), kept verbatim
"""

import re
from dataclasses import dataclass
from ipaddress import AddressValueError, IPv6Address
from typing import Optional, Union

from ..errors import HostSyntaxError

# Escaped form of "%" introducing a zone identifier inside brackets
ZONE_ID_DELIMITER = "%25"

_DEC_OCTET = re.compile(r"[0-9]{1,3}")
_ZONE_ID = re.compile(r"(?:[A-Za-z0-9\-._~!$&'()*+,;=]|%[0-9A-Fa-f]{2})+")
_IP_FUTURE = re.compile(
    r"[vV](?P<version>[0-9A-Fa-f]+)\.(?P<rest>[A-Za-z0-9\-._~!$&'()*+,;=:]+)"
)

# IPvFuture versions already covered by a dedicated grammar
_RESERVED_VERSIONS = (4, 6)


@dataclass(frozen=True)
class IPv6Literal:
    """Bracket-free IPv6 literal split from its zone identifier."""

    address: str
    zone_id: Optional[str] = None

    def to_host(self) -> str:
        """Render as a bracketed URI host."""
        if self.zone_id is None:
            return f"[{self.address}]"
        return f"[{self.address}{ZONE_ID_DELIMITER}{self.zone_id}]"

    def to_ip(self) -> str:
        """Render as a plain address, unescaping the zone delimiter."""
        if self.zone_id is None:
            return self.address
        return f"{self.address}%{self.zone_id}"


@dataclass(frozen=True)
class IPFutureLiteral:
    """IPvFuture literal with its version tag split off."""

    version: str
    rest: str

    def to_host(self) -> str:
        return f"[v{self.version}.{self.rest}]"


def is_ipv4(text: str) -> bool:
    """Check whether text is a dotted-quad IPv4 literal."""
    octets = text.split(".")
    if len(octets) != 4:
        return False
    return all(_DEC_OCTET.fullmatch(octet) and int(octet) <= 255 for octet in octets)


def parse_ipv4(text: str) -> str:
    """
    Validate an IPv4 literal.

    Leading zeros are accepted as literal text and never reinterpreted.

    Args:
        text: Candidate literal

    Returns:
        The literal, unchanged

    Raises:
        HostSyntaxError: If text is not four decimal octets in 0-255
    """
    if not is_ipv4(text):
        raise HostSyntaxError(text, "expected an IPv4address literal")
    return text


def is_ipv6(text: str) -> bool:
    """Check whether text is a bare IPv6 address (no brackets, no zone)."""
    try:
        IPv6Address(text)
    except AddressValueError:
        return False
    return "%" not in text


def parse_ipv6_literal(body: str) -> IPv6Literal:
    """
    Validate the content of a bracketed IPv6 literal.

    Args:
        body: Literal without its brackets, e.g. "fe80::1%25eth0"

    Returns:
        IPv6Literal with a lower-cased address and the raw zone identifier

    Raises:
        HostSyntaxError: If the address or the zone identifier is malformed
    """
    address, delimiter, zone_id = body.partition(ZONE_ID_DELIMITER)

    # ipaddress accepts "%scope" suffixes; only the escaped form is allowed here
    if "%" in address:
        raise HostSyntaxError(
            body, "a zone identifier must be introduced by the escaped delimiter %25"
        )

    try:
        ip = IPv6Address(address)
    except AddressValueError as exc:
        raise HostSyntaxError(body, f"expected an IPv6address literal ({exc})") from exc

    if not delimiter:
        return IPv6Literal(address=address.lower())

    if not _ZONE_ID.fullmatch(zone_id):
        raise HostSyntaxError(
            body,
            "a ZoneID must be one or more unreserved, sub-delims or "
            "percent-encoded characters",
        )

    if not ip.is_link_local:
        raise HostSyntaxError(
            body, "a ZoneID is only allowed on link-local (fe80::/10) addresses"
        )

    return IPv6Literal(address=address.lower(), zone_id=zone_id)


def parse_ip_future(body: str) -> IPFutureLiteral:
    """
    Validate an IPvFuture literal.

    Args:
        body: Literal without its brackets, e.g. "v1.fe"

    Returns:
        IPFutureLiteral holding the verbatim version and address text

    Raises:
        HostSyntaxError: If body does not match the IPvFuture grammar
    """
    match = _IP_FUTURE.fullmatch(body)
    if match is None:
        raise HostSyntaxError(body, "expected an IPvFuture literal")

    version = match.group("version")
    if int(version, 16) in _RESERVED_VERSIONS:
        raise HostSyntaxError(
            body, f"IPvFuture version {version} is reserved for IPv{int(version, 16)}"
        )

    return IPFutureLiteral(version=version, rest=match.group("rest"))


def parse_ip_literal(body: str) -> Union[IPv6Literal, IPFutureLiteral]:
    """Parse the content of a bracketed IP literal (IPv6 or IPvFuture)."""
    if body[:1] in ("v", "V"):
        return parse_ip_future(body)
    return parse_ipv6_literal(body)
