"""
Public suffix resolution.

Implements the Public Suffix List algorithm over canonical ASCII labels
stored right-most first:
- try successively longer right-anchored label sequences
- an exception rule prevails; its suffix drops the rule's left-most label
- otherwise the longest matching normal or wildcard rule wins
- with no matching rule, the right-most label is the suffix (not valid)
"""

from typing import Callable, Optional, Sequence

from .models import PublicSuffixResult, RuleKind, SuffixMatch, SuffixRuleProvider


def longest_match(
    labels: Sequence[str], lookup: Callable[[tuple[str, ...]], Optional[RuleKind]]
) -> SuffixMatch:
    """
    Find the prevailing rule for a label sequence.

    Args:
        labels: ASCII labels, right-most label first, without the root label
        lookup: Exact rule lookup for a right-anchored label sequence

    Returns:
        SuffixMatch for the prevailing rule, or the default single-label match
    """
    labels = tuple(labels)
    best: Optional[SuffixMatch] = None

    for size in range(1, len(labels) + 1):
        kind = lookup(labels[:size])
        if kind is RuleKind.EXCEPTION:
            return SuffixMatch(kind=kind, matched_labels=size - 1)
        if kind is not None:
            best = SuffixMatch(kind=kind, matched_labels=size)

    if best is None:
        return SuffixMatch(kind=None, matched_labels=min(1, len(labels)))
    return best


def suffix_bounds(
    labels: Sequence[str], provider: Optional[SuffixRuleProvider]
) -> tuple[int, int, bool]:
    """
    Compute how many right-most labels form each suffix part.

    Args:
        labels: ASCII labels, right-most label first, without the root label
        provider: Suffix rule provider (None applies the default rule only)

    Returns:
        (public suffix size, registrable domain size, suffix validity);
        sizes are clamped to the number of labels
    """
    count = len(labels)
    if count == 0:
        return 0, 0, False

    if provider is None:
        match = SuffixMatch(kind=None, matched_labels=1)
    else:
        match = provider.resolve(tuple(labels))

    suffix_size = min(max(match.matched_labels, 1), count)
    registrable_size = min(suffix_size + 1, count)
    return suffix_size, registrable_size, match.is_known


def _join(labels: Sequence[str]) -> Optional[str]:
    if not labels:
        return None
    return ".".join(reversed(labels))


def resolve_public_suffix(
    labels: Sequence[str], provider: Optional[SuffixRuleProvider]
) -> PublicSuffixResult:
    """
    Decompose a domain into public suffix, registrable domain and subdomain.

    Args:
        labels: ASCII labels, right-most label first, without the root label
        provider: Suffix rule provider; without one nothing can be determined

    Returns:
        PublicSuffixResult (all parts None when provider or labels are missing)
    """
    labels = tuple(labels)
    if provider is None or not labels:
        return PublicSuffixResult()

    suffix_size, registrable_size, is_valid = suffix_bounds(labels, provider)
    has_registrable = registrable_size > suffix_size

    return PublicSuffixResult(
        public_suffix=_join(labels[:suffix_size]),
        registrable_domain=_join(labels[:registrable_size]) if has_registrable else None,
        sub_domain=_join(labels[registrable_size:]) if has_registrable else None,
        is_valid_suffix=is_valid,
    )
