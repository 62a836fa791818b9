"""
Shared host enums and the debug model.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class HostCategory(str, Enum):
    """Shape of a parsed host."""

    DOMAIN = "domain"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    IP_FUTURE = "ipfuture"
    REGISTERED_NAME = "registered_name"
    EMPTY = "empty"
    NULL = "null"


class Encoding(str, Enum):
    """Rendition selector for host content."""

    ASCII = "ascii"  # RFC 3986, punycode labels
    UNICODE = "unicode"  # RFC 3987, internationalized labels
    RAW = "raw"  # stored content, never transcoded


class HostInfo(BaseModel):
    """Debug snapshot of a host."""

    component: Optional[str] = Field(..., description="Canonical ASCII content")
    category: HostCategory = Field(..., description="Host category")
    labels: list[str] = Field(
        default_factory=list, description="Labels, right-most label first"
    )
    is_absolute: bool = Field(False, description="Ends with the root label")
    ip_version: Optional[str] = Field(None, description="IP version tag")
    zone_identifier: Optional[str] = Field(
        None, description="IPv6 zone identifier (unescaped)"
    )
