"""
Public suffix support.

Handles Public Suffix List parsing, rule matching and domain decomposition.
"""

from .models import PublicSuffixResult, RuleKind, SuffixMatch, SuffixRuleProvider
from .resolver import longest_match, resolve_public_suffix, suffix_bounds
from .rules import PublicSuffixRules

__all__ = [
    "PublicSuffixResult",
    "RuleKind",
    "SuffixMatch",
    "SuffixRuleProvider",
    "longest_match",
    "resolve_public_suffix",
    "suffix_bounds",
    "PublicSuffixRules",
]
