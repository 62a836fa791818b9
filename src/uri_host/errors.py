"""
Exceptions raised while parsing or manipulating hosts.

Every exception carries the offending value and the rule it violated, so
callers can report precisely what went wrong without parsing messages.
"""

from typing import Any, Optional


class HostError(Exception):
    """Base class for all uri-host errors."""

    def __init__(self, value: Any, rule: str, message: Optional[str] = None):
        self.value = value
        self.rule = rule
        super().__init__(message or f"The host `{value}` is invalid: {rule}")


class HostSyntaxError(HostError, ValueError):
    """A literal or a label does not match the host grammar."""


class IDNAConversionError(HostSyntaxError):
    """A label cannot be converted between its Unicode and ASCII forms."""

    def __init__(self, value: Any, rule: str):
        super().__init__(value, rule, f"The label `{value}` is not a valid IDN label: {rule}")


class InvalidUriComponent(HostError, ValueError):
    """Individually valid pieces combine into an invalid host."""


class UnknownEncoding(HostError, ValueError):
    """The requested content encoding is not supported."""

    def __init__(self, value: Any):
        super().__init__(
            value,
            "encoding must be one of ascii, unicode or raw",
            f"Unknown host encoding: {value!r}",
        )


class InvalidKey(HostError, IndexError):
    """A label offset does not designate an existing label."""

    def __init__(self, value: Any, count: int):
        super().__init__(
            value,
            f"offset must address one of the {count} labels",
            f"No label found at offset {value!r} (the host has {count} labels)",
        )
