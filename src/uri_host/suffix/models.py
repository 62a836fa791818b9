"""
Public suffix types shared by the rule source and the resolver.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Sequence


class RuleKind(str, Enum):
    """Public Suffix List rule flavours."""

    NORMAL = "normal"
    WILDCARD = "wildcard"  # "*.ck"
    EXCEPTION = "exception"  # "!www.ck"


@dataclass(frozen=True)
class SuffixMatch:
    """
    Outcome of matching a label sequence against suffix rules.

    Attributes:
        kind: Prevailing rule kind (None when no rule matched)
        matched_labels: Number of right-most labels forming the public suffix
    """

    kind: Optional[RuleKind]
    matched_labels: int

    @property
    def is_known(self) -> bool:
        return self.kind is not None


class SuffixRuleProvider(Protocol):
    """Anything able to match right-most-first ASCII labels to a suffix."""

    def resolve(self, labels: Sequence[str]) -> SuffixMatch: ...


@dataclass(frozen=True)
class PublicSuffixResult:
    """
    Public suffix decomposition of a domain.

    All parts are ASCII, without the root label; None means "no such part".

    Attributes:
        public_suffix: e.g. "com.au"
        registrable_domain: public suffix plus one label, e.g. "waxaudio.com.au"
        sub_domain: labels left of the registrable domain, e.g. "www"
        is_valid_suffix: True when a list rule (not the default) matched
    """

    public_suffix: Optional[str] = None
    registrable_domain: Optional[str] = None
    sub_domain: Optional[str] = None
    is_valid_suffix: bool = False
