"""Unit tests for IP literal parsing."""

import pytest

from uri_host.errors import HostSyntaxError
from uri_host.normalization import (
    IPFutureLiteral,
    IPv6Literal,
    is_ipv4,
    is_ipv6,
    parse_ip_future,
    parse_ip_literal,
    parse_ipv4,
    parse_ipv6_literal,
)


class TestIPv4:
    """Test suite for the IPv4 literal grammar."""

    @pytest.mark.parametrize(
        "text", ["127.0.0.1", "0.0.0.0", "255.255.255.255", "192.168.001.010"]
    )
    def test_valid_literals(self, text):
        """Test dotted quads in range are accepted verbatim."""
        assert is_ipv4(text)
        assert parse_ipv4(text) == text

    @pytest.mark.parametrize(
        "text",
        ["256.0.0.1", "1.2.3", "1.2.3.4.5", "1.2.3.a", "1..2.3", "1.2.3.1234", "", "1.2.3.4\n"],
    )
    def test_invalid_literals(self, text):
        """Test malformed dotted quads are rejected."""
        assert not is_ipv4(text)
        with pytest.raises(HostSyntaxError):
            parse_ipv4(text)


class TestIPv6:
    """Test suite for the IPv6 literal grammar."""

    def test_bare_address(self):
        """Test bare IPv6 addresses are recognised without zone ids."""
        assert is_ipv6("::1")
        assert is_ipv6("fe80::1")
        assert not is_ipv6("fe80::1%eth0")
        assert not is_ipv6("[::1]")
        assert not is_ipv6("127.0.0.1")

    def test_address_is_lowercased(self):
        """Test the address part is normalized to lowercase."""
        literal = parse_ipv6_literal("FE80::ABCD")

        assert literal == IPv6Literal(address="fe80::abcd")
        assert literal.to_host() == "[fe80::abcd]"
        assert literal.to_ip() == "fe80::abcd"

    def test_zone_identifier(self):
        """Test an escaped zone identifier is split off."""
        literal = parse_ipv6_literal("fe80:1234::%251")

        assert literal.address == "fe80:1234::"
        assert literal.zone_id == "1"
        assert literal.to_host() == "[fe80:1234::%251]"
        assert literal.to_ip() == "fe80:1234::%1"

    def test_zone_identifier_with_percent_encoding(self):
        """Test zone identifiers may hold percent-encoded octets."""
        literal = parse_ipv6_literal("fe80::%25eth%230")
        assert literal.zone_id == "eth%230"

    def test_unescaped_zone_delimiter_rejected(self):
        """Test a raw '%' cannot introduce a zone identifier."""
        with pytest.raises(HostSyntaxError, match="%25"):
            parse_ipv6_literal("fe80::1%eth0")

    def test_zone_identifier_requires_link_local(self):
        """Test zone identifiers are refused on non link-local addresses."""
        with pytest.raises(HostSyntaxError, match="link-local"):
            parse_ipv6_literal("::1%251")

    def test_empty_zone_identifier_rejected(self):
        """Test an empty zone identifier is rejected."""
        with pytest.raises(HostSyntaxError):
            parse_ipv6_literal("fe80::1%25")

    def test_zone_identifier_trailing_newline_rejected(self):
        """Test a zone identifier cannot end with a line break."""
        with pytest.raises(HostSyntaxError):
            parse_ipv6_literal("fe80::1%25eth0\n")

    @pytest.mark.parametrize("body", ["", "::1::", "12345::", "fe80::1]", "gggg::1"])
    def test_invalid_addresses(self, body):
        """Test malformed addresses are rejected."""
        with pytest.raises(HostSyntaxError) as exc_info:
            parse_ipv6_literal(body)
        assert exc_info.value.value == body


class TestIPFuture:
    """Test suite for the IPvFuture literal grammar."""

    def test_valid_literal(self):
        """Test an IPvFuture literal keeps its version and address verbatim."""
        literal = parse_ip_future("vAF.csucj.$&+;::")

        assert literal == IPFutureLiteral(version="AF", rest="csucj.$&+;::")
        assert literal.to_host() == "[vAF.csucj.$&+;::]"

    def test_uppercase_prefix(self):
        """Test the version marker is case-insensitive."""
        assert parse_ip_future("V1.fe").version == "1"

    @pytest.mark.parametrize("body", ["v4.1.2.3.4", "v6.::1", "v06.abc"])
    def test_reserved_versions_rejected(self, body):
        """Test versions owned by IPv4 and IPv6 are refused."""
        with pytest.raises(HostSyntaxError, match="reserved"):
            parse_ip_future(body)

    @pytest.mark.parametrize(
        "body", ["v.abc", "vG.abc", "v1.", "v1.a b", "v1abc", "v1.abc\n"]
    )
    def test_invalid_literals(self, body):
        """Test malformed IPvFuture literals are rejected."""
        with pytest.raises(HostSyntaxError):
            parse_ip_future(body)


class TestParseIPLiteral:
    """Test suite for bracket content dispatch."""

    def test_dispatch(self):
        """Test a leading 'v' selects the IPvFuture grammar."""
        assert isinstance(parse_ip_literal("v1.fe"), IPFutureLiteral)
        assert isinstance(parse_ip_literal("::1"), IPv6Literal)
