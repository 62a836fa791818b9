"""
Host classification.

Decides which grammar a raw host matches, in order:
1. null / empty string
2. bracketed IP literal (IPv6 or IPvFuture)
3. IPv4 literal
4. IDNA domain name
5. generic registered name (RFC 3986 reg-name)

and produces the canonical ASCII content plus its label sequence.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from ..errors import HostSyntaxError, IDNAConversionError
from ..models import HostCategory
from .idna_transcoder import label_to_ascii, label_to_unicode, map_label
from .ip_literals import IPv6Literal, is_ipv4, parse_ip_literal

logger = logging.getLogger(__name__)

# Longest domain name in its ASCII form, root label excluded
MAX_DOMAIN_LENGTH = 253

_REGISTERED_NAME = re.compile(r"(?:[A-Za-z0-9\-._~!$&'()*+,;=]|%[0-9A-Fa-f]{2})+")
_PERCENT_ENCODED = re.compile(r"%[0-9a-f]{2}")


@dataclass(frozen=True)
class ParsedHost:
    """
    Result of classifying a raw host.

    Attributes:
        category: Grammar the host matched
        content: Canonical ASCII content (None for the null host)
        labels: Labels in storage order, right-most label first
        unicode_labels: Unicode labels when the input was internationalized
        ip: Address text for IP hosts (no brackets, zone delimiter unescaped)
        ip_version: "4", "6" or the IPvFuture version tag
        zone_id: IPv6 zone identifier, as written after "%25"
    """

    category: HostCategory
    content: Optional[str]
    labels: tuple[str, ...]
    unicode_labels: Optional[tuple[str, ...]] = None
    ip: Optional[str] = None
    ip_version: Optional[str] = None
    zone_id: Optional[str] = None


NULL_HOST = ParsedHost(category=HostCategory.NULL, content=None, labels=())
EMPTY_HOST = ParsedHost(category=HostCategory.EMPTY, content="", labels=("",))


def split_labels(text: str) -> tuple[str, ...]:
    """Split host text into labels, right-most label first."""
    return tuple(reversed(text.split(".")))


def classify(raw: Optional[str]) -> ParsedHost:
    """
    Classify and canonicalize a raw host.

    Args:
        raw: Host text as found in a URI authority, or None

    Returns:
        ParsedHost describing the canonical host

    Raises:
        TypeError: If raw is neither a string nor None
        HostSyntaxError: If raw matches none of the host grammars
    """
    if raw is None:
        return NULL_HOST

    if not isinstance(raw, str):
        raise TypeError(f"A host must be a string or None, got {type(raw).__name__}")

    if raw == "":
        return EMPTY_HOST

    if raw.startswith("[") and raw.endswith("]"):
        return _classify_ip_literal(raw)

    if is_ipv4(raw):
        return ParsedHost(
            category=HostCategory.IPV4,
            content=raw,
            labels=(raw,),
            ip=raw,
            ip_version="4",
        )

    idna_error = None
    try:
        domain = _classify_domain(raw)
    except IDNAConversionError as exc:
        logger.debug(f"'{raw}' is not an IDNA domain name ({exc.rule})")
        domain = None
        idna_error = exc

    if domain is not None:
        return domain

    if _REGISTERED_NAME.fullmatch(raw):
        content = _PERCENT_ENCODED.sub(lambda m: m.group(0).upper(), raw.lower())
        return ParsedHost(
            category=HostCategory.REGISTERED_NAME,
            content=content,
            labels=split_labels(content),
        )

    if idna_error is not None and not raw.isascii():
        raise HostSyntaxError(
            raw, f"invalid internationalized domain name: {idna_error.rule}"
        ) from idna_error

    raise HostSyntaxError(
        raw,
        "a registered name can only contain unreserved, sub-delims or "
        "percent-encoded characters",
    )


def _classify_ip_literal(raw: str) -> ParsedHost:
    literal = parse_ip_literal(raw[1:-1])

    if isinstance(literal, IPv6Literal):
        content = literal.to_host()
        return ParsedHost(
            category=HostCategory.IPV6,
            content=content,
            labels=(content,),
            ip=literal.to_ip(),
            ip_version="6",
            zone_id=literal.zone_id,
        )

    # IPvFuture literals are stored verbatim
    return ParsedHost(
        category=HostCategory.IP_FUTURE,
        content=raw,
        labels=(raw,),
        ip=literal.rest,
        ip_version=literal.version,
    )


def _classify_domain(raw: str) -> Optional[ParsedHost]:
    """
    Try the IDNA domain grammar.

    Returns None when the shape cannot be a domain (empty inner labels or
    excessive length); raises IDNAConversionError when a label is rejected.
    """
    labels = raw.split(".")
    is_absolute = len(labels) > 1 and labels[-1] == ""
    if is_absolute:
        labels = labels[:-1]

    if not all(labels):
        return None

    ascii_labels = [label_to_ascii(label) for label in labels]
    name = ".".join(ascii_labels)
    if len(name) > MAX_DOMAIN_LENGTH:
        logger.debug(f"'{raw}' exceeds {MAX_DOMAIN_LENGTH} characters")
        return None

    root = ("",) if is_absolute else ()
    unicode_labels = None
    if not raw.isascii():
        # A-labels mixed with Unicode labels are decoded too
        mapped = [label_to_unicode(map_label(label)) for label in labels]
        unicode_labels = root + tuple(reversed(mapped))

    return ParsedHost(
        category=HostCategory.DOMAIN,
        content=name + ("." if is_absolute else ""),
        labels=root + tuple(reversed(ascii_labels)),
        unicode_labels=unicode_labels,
    )
