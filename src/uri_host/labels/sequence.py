"""
Label sequence model.

Labels are stored right-most first: index 0 is the top-level label, or the
empty root label when the host is absolute ("example.com." is stored as
("", "com", "example")).

Offsets address labels from both ends with a single rule:
- offset >= 0 counts from the right (0 is the right-most label)
- offset < 0 counts from the left (-1 is the left-most label)
"""

from collections.abc import Iterable, Iterator
from typing import Optional


def resolve_offset(offset: int, count: int) -> Optional[int]:
    """
    Map a label offset to a storage index.

    Args:
        offset: Signed label offset
        count: Number of labels

    Returns:
        Index in [0, count), or None when no label lives at that offset

    Raises:
        TypeError: If offset is not an integer
    """
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise TypeError(f"A label offset must be an integer, got {type(offset).__name__}")

    index = offset if offset >= 0 else count + offset
    if 0 <= index < count:
        return index
    return None


class LabelSequence:
    """Immutable, offset-addressable sequence of host labels."""

    __slots__ = ("_labels",)

    def __init__(self, labels: Iterable[str] = ()):
        self._labels = tuple(labels)

    def to_host_text(self) -> str:
        """Join the labels back into host text."""
        return ".".join(reversed(self._labels))

    @property
    def labels(self) -> tuple[str, ...]:
        return self._labels

    @property
    def is_absolute(self) -> bool:
        return len(self._labels) > 1 and self._labels[0] == ""

    @property
    def relative(self) -> tuple[str, ...]:
        """Labels without the root label; the empty host has none."""
        if self.is_absolute:
            return self._labels[1:]
        if self._labels == ("",):
            return ()
        return self._labels

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabelSequence):
            return NotImplemented
        return self._labels == other._labels

    def __hash__(self) -> int:
        return hash(self._labels)

    def __repr__(self) -> str:
        return f"LabelSequence({list(self._labels)!r})"

    def index_of(self, offset: int) -> Optional[int]:
        return resolve_offset(offset, len(self._labels))

    def get(self, offset: int, default: Optional[str] = None) -> Optional[str]:
        """Return the label at offset, or default when there is none."""
        index = self.index_of(offset)
        if index is None:
            return default
        return self._labels[index]

    def keys(self, label: Optional[str] = None) -> list[int]:
        """Return all offsets, or the offsets holding label."""
        if label is None:
            return list(range(len(self._labels)))
        return [index for index, value in enumerate(self._labels) if value == label]

    def replace(self, index: int, labels: tuple[str, ...]) -> "LabelSequence":
        """Replace the label at a storage index with zero or more labels."""
        return LabelSequence(self._labels[:index] + labels + self._labels[index + 1 :])

    def remove(self, indexes: Iterable[int]) -> "LabelSequence":
        """Drop the labels at the given storage indexes."""
        dropped = set(indexes)
        return LabelSequence(
            label for index, label in enumerate(self._labels) if index not in dropped
        )

    def append(self, labels: tuple[str, ...]) -> "LabelSequence":
        """Add labels on the right, keeping the root label last."""
        if self.is_absolute:
            return LabelSequence(("",) + labels + self._labels[1:])
        return LabelSequence(labels + self.relative)

    def prepend(self, labels: tuple[str, ...]) -> "LabelSequence":
        """Add labels on the left."""
        if self.is_absolute:
            return LabelSequence(self._labels + labels)
        return LabelSequence(self.relative + labels)

    def splice(self, start: int, stop: int, labels: tuple[str, ...]) -> "LabelSequence":
        """
        Replace relative labels [start, stop) with labels.

        Positions ignore the root label, which is kept when present.
        """
        relative = self.relative
        spliced = relative[:start] + labels + relative[stop:]
        if self.is_absolute and spliced:
            spliced = ("",) + spliced
        return LabelSequence(spliced)

    def with_root(self) -> "LabelSequence":
        if self.is_absolute or not self.relative:
            return self
        return LabelSequence(("",) + self._labels)

    def without_root(self) -> "LabelSequence":
        if not self.is_absolute:
            return self
        return LabelSequence(self._labels[1:])
