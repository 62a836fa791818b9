"""
URI host component parsing and manipulation.

Classifies hosts (domain, IP literal, registered name), transcodes IDNs,
models labels and resolves public suffixes.
"""

from .config import Config, get_config, reset_config
from .errors import (
    HostError,
    HostSyntaxError,
    IDNAConversionError,
    InvalidKey,
    InvalidUriComponent,
    UnknownEncoding,
)
from .host import Host
from .models import Encoding, HostCategory, HostInfo
from .suffix import PublicSuffixResult, PublicSuffixRules

__all__ = [
    "Host",
    "Encoding",
    "HostCategory",
    "HostInfo",
    "PublicSuffixRules",
    "PublicSuffixResult",
    "HostError",
    "HostSyntaxError",
    "IDNAConversionError",
    "InvalidKey",
    "InvalidUriComponent",
    "UnknownEncoding",
    "Config",
    "get_config",
    "reset_config",
]
