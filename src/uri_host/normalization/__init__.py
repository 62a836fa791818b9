"""
Host normalization utilities.

Handles host classification, IP literal grammars and IDNA transcoding.
"""

from .classifier import ParsedHost, classify, split_labels
from .idna_transcoder import (
    TranscodedLabels,
    label_to_ascii,
    label_to_unicode,
    to_ascii,
    to_unicode,
)
from .ip_literals import (
    IPFutureLiteral,
    IPv6Literal,
    is_ipv4,
    is_ipv6,
    parse_ip_future,
    parse_ip_literal,
    parse_ipv4,
    parse_ipv6_literal,
)

__all__ = [
    "ParsedHost",
    "classify",
    "split_labels",
    "TranscodedLabels",
    "label_to_ascii",
    "label_to_unicode",
    "to_ascii",
    "to_unicode",
    "IPFutureLiteral",
    "IPv6Literal",
    "is_ipv4",
    "is_ipv6",
    "parse_ip_future",
    "parse_ip_literal",
    "parse_ipv4",
    "parse_ipv6_literal",
]
