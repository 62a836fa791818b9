"""
Public Suffix List rule source.

Parses the Public Suffix List format (https://publicsuffix.org/list/):
- one rule per line, comments start with "//"
- "*.ck" is a wildcard rule, "!www.ck" an exception rule
- ICANN and PRIVATE sections are delimited by "===BEGIN/END ... DOMAINS==="

Rules are indexed by their labels, right-most label first, in ASCII form.
Fetching and refreshing the list is left to the caller: a rule source is
built once from text or a file and injected where suffixes are needed.
"""

import logging
import re
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Optional, Union

from publicsuffixlist import PSLFILE

from ..config import get_config
from ..errors import IDNAConversionError
from ..normalization.idna_transcoder import label_to_ascii
from .models import RuleKind, SuffixMatch
from .resolver import longest_match

logger = logging.getLogger(__name__)

_VERSION = re.compile(r"^//\s*VERSION:\s*(?P<version>\S+)")
_SECTION = re.compile(r"^//\s*===(?P<edge>BEGIN|END) (?P<name>ICANN|PRIVATE) DOMAINS===")


class PublicSuffixRules:
    """
    In-memory Public Suffix List.

    Usage:
        rules = PublicSuffixRules.from_default()
        match = rules.resolve(("au", "com", "waxaudio"))
        print(match.matched_labels)  # 2 -> "com.au"
    """

    def __init__(
        self,
        normal: Iterable[tuple[str, ...]] = (),
        wildcard: Iterable[tuple[str, ...]] = (),
        exception: Iterable[tuple[str, ...]] = (),
        version: Optional[str] = None,
    ):
        """
        Build a rule source from pre-split rules.

        Args:
            normal: Rule labels, right-most label first ("co.uk" -> ("uk", "co"))
            wildcard: Labels under a "*" ("*.ck" -> ("ck",))
            exception: Labels of "!" rules ("!www.ck" -> ("ck", "www"))
            version: Version tag of the list, if known
        """
        self._normal = frozenset(normal)
        self._wildcard = frozenset(wildcard)
        self._exception = frozenset(exception)
        self.version = version

    @classmethod
    def from_lines(cls, lines: Iterable[str], only_icann: bool = True) -> "PublicSuffixRules":
        """
        Parse rules from Public Suffix List lines.

        Args:
            lines: Lines of a public_suffix_list.dat file
            only_icann: Skip rules in the PRIVATE DOMAINS section

        Returns:
            PublicSuffixRules holding every parsable rule
        """
        normal: set[tuple[str, ...]] = set()
        wildcard: set[tuple[str, ...]] = set()
        exception: set[tuple[str, ...]] = set()
        version = None
        section = None
        skipped = 0

        for line in lines:
            line = line.strip()
            if not line:
                continue

            if line.startswith("//"):
                version_match = _VERSION.match(line)
                if version_match and version is None:
                    version = version_match.group("version")
                section_match = _SECTION.match(line)
                if section_match:
                    is_begin = section_match.group("edge") == "BEGIN"
                    section = section_match.group("name") if is_begin else None
                continue

            if only_icann and section == "PRIVATE":
                continue

            # Only the first whitespace-delimited token is the rule
            rule = line.split()[0]
            try:
                kind, labels = cls._parse_rule(rule)
            except IDNAConversionError as e:
                logger.warning(f"Skipping unparsable public suffix rule '{rule}': {e}")
                skipped += 1
                continue

            if kind is RuleKind.EXCEPTION:
                exception.add(labels)
            elif kind is RuleKind.WILDCARD:
                wildcard.add(labels)
            else:
                normal.add(labels)

        rules = cls(normal, wildcard, exception, version=version)
        logger.info(
            f"Loaded {len(rules)} public suffix rules "
            f"(version {version or 'unknown'}, {skipped} skipped)"
        )
        return rules

    @classmethod
    def from_string(cls, text: str, only_icann: bool = True) -> "PublicSuffixRules":
        """Parse rules from the text of a Public Suffix List."""
        return cls.from_lines(text.splitlines(), only_icann=only_icann)

    @classmethod
    def from_file(
        cls, path: Union[str, Path], only_icann: bool = True
    ) -> "PublicSuffixRules":
        """Parse rules from a public_suffix_list.dat file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Public suffix list not found: {path}")

        logger.info(f"Reading public suffix list from {path}")
        with path.open(encoding="utf-8") as handle:
            return cls.from_lines(handle, only_icann=only_icann)

    @classmethod
    def from_default(cls) -> "PublicSuffixRules":
        """
        Load the configured list.

        Uses config.public_suffix.source_path when set, otherwise the list
        bundled with the publicsuffixlist distribution.
        """
        config = get_config().public_suffix
        path = config.source_path or Path(PSLFILE)
        return cls.from_file(path, only_icann=config.only_icann)

    @staticmethod
    def _parse_rule(rule: str) -> tuple[RuleKind, tuple[str, ...]]:
        kind = RuleKind.NORMAL
        if rule.startswith("!"):
            kind = RuleKind.EXCEPTION
            rule = rule[1:]
        elif rule.startswith("*."):
            kind = RuleKind.WILDCARD
            rule = rule[2:]

        labels = tuple(
            label if label == "*" else label_to_ascii(label)
            for label in reversed(rule.split("."))
        )
        return kind, labels

    def __len__(self) -> int:
        return len(self._normal) + len(self._wildcard) + len(self._exception)

    def __repr__(self) -> str:
        return f"PublicSuffixRules(rules={len(self)}, version={self.version!r})"

    def get_rule(self, labels: Sequence[str]) -> Optional[RuleKind]:
        """
        Look up the rule matching exactly a right-anchored label sequence.

        Args:
            labels: ASCII labels, right-most label first

        Returns:
            Matching rule kind (exception > normal > wildcard), or None
        """
        labels = tuple(labels)
        if labels in self._exception:
            return RuleKind.EXCEPTION
        if labels in self._normal:
            return RuleKind.NORMAL
        if len(labels) > 1 and labels[:-1] in self._wildcard:
            return RuleKind.WILDCARD
        return None

    def resolve(self, labels: Sequence[str]) -> SuffixMatch:
        """Match labels (right-most first, ASCII) against the list."""
        return longest_match(labels, self.get_rule)
