"""
Host value object.

A Host is validated once, at construction, and never changes afterwards:
every with_*/append/prepend call returns a new Host (or the same instance
when the canonical content would not change).

Usage:
    rules = PublicSuffixRules.from_default()
    host = Host("www.Example.co.uk", suffix_rules=rules)
    print(host)                          # www.example.co.uk
    print(host.get_registrable_domain())  # example.co.uk
    print(host.with_sub_domain("shop"))  # shop.example.co.uk
"""

from collections.abc import Iterable, Iterator
from typing import Any, Optional, Union

from .errors import HostSyntaxError, InvalidKey, InvalidUriComponent, UnknownEncoding
from .labels import LabelSequence
from .models import Encoding, HostCategory, HostInfo
from .normalization import (
    TranscodedLabels,
    classify,
    is_ipv4,
    is_ipv6,
    label_to_ascii,
)
from .suffix import (
    PublicSuffixResult,
    SuffixRuleProvider,
    resolve_public_suffix,
    suffix_bounds,
)

HostLike = Union["Host", str, None]

_IP_CATEGORIES = frozenset(
    {HostCategory.IPV4, HostCategory.IPV6, HostCategory.IP_FUTURE}
)

# Literals written between brackets; they never combine with other labels
_BRACKETED_CATEGORIES = frozenset({HostCategory.IPV6, HostCategory.IP_FUTURE})


def _coerce_encoding(encoding: Any) -> Encoding:
    if isinstance(encoding, Encoding):
        return encoding
    try:
        return Encoding(encoding)
    except (TypeError, ValueError) as exc:
        raise UnknownEncoding(encoding) from exc


class Host:
    """
    Immutable URI host component.

    Attributes:
        RFC3986_ENCODING: Selector for the ASCII (punycode) rendition
        RFC3987_ENCODING: Selector for the Unicode rendition
    """

    RFC3986_ENCODING = Encoding.ASCII
    RFC3987_ENCODING = Encoding.UNICODE

    __slots__ = ("_parsed", "_labels", "_forms", "_suffix_rules", "_cache")

    def __init__(
        self,
        host: HostLike = None,
        suffix_rules: Optional[SuffixRuleProvider] = None,
    ):
        """
        Parse and validate a host.

        Args:
            host: Raw host text, another Host, or None for the undefined host
            suffix_rules: Provider used by the public suffix accessors;
                defaults to the provider bound to host when host is a Host

        Raises:
            TypeError: If host is not a string, a Host or None
            HostSyntaxError: If host matches no host grammar
        """
        if isinstance(host, Host):
            if suffix_rules is None:
                suffix_rules = host._suffix_rules
            host = host.get_content()

        parsed = classify(host)
        forms = None
        if parsed.category is HostCategory.DOMAIN:
            forms = TranscodedLabels(parsed.labels, parsed.unicode_labels)

        object.__setattr__(self, "_parsed", parsed)
        object.__setattr__(self, "_labels", LabelSequence(parsed.labels))
        object.__setattr__(self, "_forms", forms)
        object.__setattr__(self, "_suffix_rules", suffix_rules)
        object.__setattr__(self, "_cache", {})

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} instances are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} instances are immutable")

    def __reduce__(self):
        # Unpickling goes through __init__ so the content is validated again
        return (type(self), (self._parsed.content, self._suffix_rules))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Host):
            return NotImplemented
        return self._parsed.content == other._parsed.content

    def __hash__(self) -> int:
        return hash(self._parsed.content)

    def __str__(self) -> str:
        return self.get_uri_component()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._parsed.content!r})"

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    # Content

    @property
    def category(self) -> HostCategory:
        return self._parsed.category

    def get_content(self, encoding: Encoding = Encoding.ASCII) -> Optional[str]:
        """
        Return the host content in the requested rendition.

        Args:
            encoding: Encoding.ASCII (canonical), Encoding.UNICODE, or
                Encoding.RAW (stored content, never transcoded)

        Returns:
            Host text, or None for the undefined host

        Raises:
            UnknownEncoding: If encoding is not a supported selector
        """
        encoding = _coerce_encoding(encoding)
        if encoding is Encoding.UNICODE and self._forms is not None:
            return ".".join(reversed(self._forms.unicode))
        return self._parsed.content

    def get_uri_component(self) -> str:
        """Return the ASCII content as it appears in a URI authority."""
        return self._parsed.content or ""

    def debug_info(self) -> HostInfo:
        return HostInfo(
            component=self._parsed.content,
            category=self._parsed.category,
            labels=list(self._labels),
            is_absolute=self.is_absolute(),
            ip_version=self._parsed.ip_version,
            zone_identifier=self._parsed.zone_id,
        )

    def with_content(self, content: HostLike) -> "Host":
        """Return a host with new content, or self if it canonicalizes the same."""
        host = Host(content, suffix_rules=self._suffix_rules)
        if host == self:
            return self
        return host

    # Predicates

    def is_null(self) -> bool:
        return self._parsed.category is HostCategory.NULL

    def is_empty(self) -> bool:
        """True for both the empty and the undefined host."""
        return self._parsed.category in (HostCategory.EMPTY, HostCategory.NULL)

    def is_domain(self) -> bool:
        return self._parsed.category is HostCategory.DOMAIN

    def is_registered_name(self) -> bool:
        return self._parsed.category is HostCategory.REGISTERED_NAME

    def is_ip(self) -> bool:
        return self._parsed.category in _IP_CATEGORIES

    def is_ipv4(self) -> bool:
        return self._parsed.category is HostCategory.IPV4

    def is_ipv6(self) -> bool:
        return self._parsed.category is HostCategory.IPV6

    def is_ip_future(self) -> bool:
        return self._parsed.category is HostCategory.IP_FUTURE

    def is_absolute(self) -> bool:
        return self._labels.is_absolute

    # IP literals

    def get_ip(self) -> Optional[str]:
        """Return the IP address without brackets, or None for non-IP hosts."""
        return self._parsed.ip

    def get_ip_version(self) -> Optional[str]:
        return self._parsed.ip_version

    def has_zone_identifier(self) -> bool:
        return self._parsed.zone_id is not None

    def without_zone_identifier(self) -> "Host":
        if not self.has_zone_identifier():
            return self
        address = self._parsed.ip.partition("%")[0]
        return self._derive(f"[{address}]", "cannot drop the zone identifier")

    # Labels

    def count(self) -> int:
        return len(self._labels)

    def get_labels(self) -> tuple[str, ...]:
        return self._labels.labels

    def get_label(self, offset: int, default: Optional[str] = None) -> Optional[str]:
        """
        Return the label at offset.

        Non-negative offsets count from the right (0 is the top-level label),
        negative offsets from the left (-1 is the left-most label).
        """
        return self._labels.get(offset, default)

    def keys(self, label: Any = None) -> list[int]:
        """Return every label offset, or the offsets of a given label."""
        if label is None:
            return self._labels.keys()
        return self._labels.keys(self._normalize_label(label))

    def with_label(self, offset: int, label: HostLike) -> "Host":
        """
        Replace the label at offset.

        Raises:
            InvalidKey: If no label lives at offset
            InvalidUriComponent: If the resulting host is invalid
        """
        index = self._labels.index_of(offset)
        if index is None:
            raise InvalidKey(offset, len(self._labels))

        value = self._coerce(label)
        if (value.get_content() or "") == self._labels.labels[index]:
            return self

        labels = self._labels.replace(index, value._labels.relative)
        return self._derive(
            labels.to_host_text(), f"cannot replace label {offset}", keep_ip=True
        )

    def without_label(self, *offsets: int) -> "Host":
        """
        Remove the labels at the given offsets.

        Offsets without a label are ignored.

        Raises:
            TypeError: If an offset is not an integer
        """
        indexes = set()
        for offset in offsets:
            index = self._labels.index_of(offset)
            if index is not None:
                indexes.add(index)

        if not indexes:
            return self

        labels = self._labels.remove(indexes)
        return self._derive(labels.to_host_text(), "cannot remove labels")

    def append(self, label: HostLike) -> "Host":
        """Add labels to the right of the host, before any root label."""
        labels = self._coerce(label)._labels.relative
        if not labels:
            return self
        return self._derive(
            self._labels.append(labels).to_host_text(),
            f"cannot append `{label}`",
            keep_ip=True,
        )

    def prepend(self, label: HostLike) -> "Host":
        """Add labels to the left of the host."""
        labels = self._coerce(label)._labels.relative
        if not labels:
            return self
        return self._derive(
            self._labels.prepend(labels).to_host_text(),
            f"cannot prepend `{label}`",
            keep_ip=True,
        )

    def with_root_label(self) -> "Host":
        """
        Return the absolute (fully qualified) form of the host.

        IP literals cannot carry a root label and are returned unchanged.
        """
        if self.is_ip():
            return self
        labels = self._labels.with_root()
        if labels is self._labels:
            return self
        return self._derive(labels.to_host_text(), "cannot add the root label")

    def without_root_label(self) -> "Host":
        """Return the relative form of the host."""
        labels = self._labels.without_root()
        if labels is self._labels:
            return self
        return self._derive(labels.to_host_text(), "cannot remove the root label")

    # Public suffix

    def with_suffix_rules(self, suffix_rules: Optional[SuffixRuleProvider]) -> "Host":
        """Return the same host bound to another suffix rule provider."""
        if suffix_rules is self._suffix_rules:
            return self
        return Host(self._parsed.content, suffix_rules=suffix_rules)

    def get_public_suffix_result(self) -> PublicSuffixResult:
        """
        Decompose the host with the injected suffix rules.

        Only domain names can be decomposed; other hosts, or hosts without
        suffix rules, yield an empty result.
        """
        result = self._cache.get("public_suffix")
        if result is None:
            if self.is_domain():
                result = resolve_public_suffix(self._labels.relative, self._suffix_rules)
            else:
                result = PublicSuffixResult()
            self._cache["public_suffix"] = result
        return result

    def get_public_suffix(self) -> Optional[str]:
        return self.get_public_suffix_result().public_suffix

    def get_registrable_domain(self) -> Optional[str]:
        return self.get_public_suffix_result().registrable_domain

    def get_sub_domain(self) -> Optional[str]:
        return self.get_public_suffix_result().sub_domain

    def is_public_suffix_valid(self) -> bool:
        return self.get_public_suffix_result().is_valid_suffix

    def with_public_suffix(self, public_suffix: HostLike) -> "Host":
        """Replace the public suffix; an empty value removes it."""
        suffix_size, _ = self._suffix_sizes("public suffix")
        return self._splice(0, suffix_size, public_suffix, "public suffix")

    def with_registrable_domain(self, registrable_domain: HostLike) -> "Host":
        """Replace the registrable domain; an empty value removes it."""
        _, registrable_size = self._suffix_sizes("registrable domain")
        return self._splice(0, registrable_size, registrable_domain, "registrable domain")

    def with_sub_domain(self, sub_domain: HostLike) -> "Host":
        """Replace everything left of the registrable domain."""
        _, registrable_size = self._suffix_sizes("subdomain")
        return self._splice(
            registrable_size, len(self._labels.relative), sub_domain, "subdomain"
        )

    # Construction helpers

    @classmethod
    def create_from_labels(
        cls,
        labels: Iterable[Any],
        absolute: bool = False,
        suffix_rules: Optional[SuffixRuleProvider] = None,
    ) -> "Host":
        """
        Build a host from labels given right-most first.

        Args:
            labels: Strings, integers or Hosts, e.g. ["com", "example", "www"]
            absolute: Add the root label ("www.example.com.")
            suffix_rules: Provider for the public suffix accessors

        Raises:
            TypeError: If labels is not an iterable of labels or absolute
                is not a boolean
            InvalidUriComponent: If the labels do not form a valid host
        """
        if isinstance(labels, (str, bytes)) or not isinstance(labels, Iterable):
            raise TypeError(
                f"labels must be an iterable of labels, got {type(labels).__name__}"
            )
        if not isinstance(absolute, bool):
            raise TypeError(f"absolute must be a boolean, got {type(absolute).__name__}")

        parts = [cls._label_text(label) for label in labels]
        if not parts or parts == [""]:
            return cls("", suffix_rules=suffix_rules)

        if any(is_ipv6(part.partition("%")[0]) for part in parts):
            if absolute or len(parts) > 1:
                raise InvalidUriComponent(
                    parts, "an IPv6 address cannot share a host with other labels"
                )
            return cls.create_from_ip(parts[0], suffix_rules=suffix_rules)

        text = ".".join(reversed(parts))
        if absolute and not text.endswith("."):
            text += "."

        try:
            return cls(text, suffix_rules=suffix_rules)
        except HostSyntaxError as exc:
            raise InvalidUriComponent(text, "labels do not form a valid host") from exc

    @classmethod
    def create_from_ip(
        cls,
        ip: str,
        version_hint: Optional[str] = None,
        suffix_rules: Optional[SuffixRuleProvider] = None,
    ) -> "Host":
        """
        Build a host from a bare IP address.

        Args:
            ip: IPv4 ("127.0.0.1"), IPv6 ("fe80::1%eth0") or IPvFuture
                ("vAF.addr") text
            version_hint: IPvFuture version used when ip has no "v" tag;
                ignored for IPv4 and IPv6 addresses
            suffix_rules: Provider for the public suffix accessors

        Raises:
            HostSyntaxError: If ip is not an IP address
        """
        if not isinstance(ip, str):
            raise TypeError(f"An IP address must be a string, got {type(ip).__name__}")

        if is_ipv4(ip):
            return cls(ip, suffix_rules=suffix_rules)

        address, delimiter, zone_id = ip.partition("%")
        if is_ipv6(address):
            if delimiter:
                return cls(f"[{address}%25{zone_id}]", suffix_rules=suffix_rules)
            return cls(f"[{address}]", suffix_rules=suffix_rules)

        literal = f"v{version_hint}.{ip}" if version_hint else ip
        try:
            return cls(f"[{literal}]", suffix_rules=suffix_rules)
        except HostSyntaxError as exc:
            raise HostSyntaxError(
                ip, "expected an IPv4, IPv6 or IPvFuture address"
            ) from exc

    # Internals

    @staticmethod
    def _label_text(label: Any) -> str:
        if isinstance(label, Host):
            return label.get_content() or ""
        if isinstance(label, int) and not isinstance(label, bool):
            return str(label)
        if isinstance(label, str):
            return label
        raise InvalidUriComponent(
            label, "a label must be a string, an integer or a Host"
        )

    @staticmethod
    def _normalize_label(label: Any) -> str:
        text = Host._label_text(label)
        try:
            return label_to_ascii(text)
        except HostSyntaxError:
            return text.lower()

    def _coerce(self, value: HostLike) -> "Host":
        if isinstance(value, Host):
            return value
        return Host(value)

    def _derive(self, content: Optional[str], rule: str, keep_ip: bool = False) -> "Host":
        """
        Build a sibling host from new content, validating it from scratch.

        Args:
            content: Candidate host text
            rule: Description of the operation, reported on failure
            keep_ip: Refuse to turn a bracketed IP literal into a non-IP host

        Raises:
            InvalidUriComponent: If content is not a valid host
        """
        if content == self._parsed.content:
            return self

        try:
            host = Host(content, suffix_rules=self._suffix_rules)
        except HostSyntaxError as exc:
            raise InvalidUriComponent(content, rule) from exc

        bracketed = self._parsed.category in _BRACKETED_CATEGORIES
        if keep_ip and bracketed and not (host.is_ip() or host.is_empty()):
            raise InvalidUriComponent(
                content, f"{rule}: labels cannot be mixed with an IP literal"
            )

        if host == self:
            return self
        return host

    def _suffix_sizes(self, part: str) -> tuple[int, int]:
        if self.is_ip() or self.is_registered_name():
            raise InvalidUriComponent(
                self._parsed.content,
                f"the {part} can only be changed on a domain name",
            )
        suffix_size, registrable_size, _ = suffix_bounds(
            self._labels.relative, self._suffix_rules
        )
        return suffix_size, registrable_size

    def _splice(self, start: int, stop: int, value: HostLike, part: str) -> "Host":
        replacement = self._coerce(value)
        if replacement.is_absolute() and (start != 0 or not self.is_absolute()):
            raise InvalidUriComponent(
                replacement.get_content(),
                f"an absolute {part} conflicts with the host `{self}`",
            )

        labels = self._labels.splice(start, stop, replacement._labels.relative)
        if labels == self._labels:
            return self
        return self._derive(labels.to_host_text(), f"cannot replace the {part}")
