"""
IDNA label transcoding.

Converts domain labels between their Unicode (RFC 3987) and ASCII
(RFC 3986, punycode) forms:
- Unicode -> ASCII: UTS #46 compatibility mapping, IDNA2008 checks, punycode
- ASCII -> Unicode: punycode decoding with a re-encoding round-trip check

Labels are processed one at a time; the root label ("") passes through.
"""

import logging
from collections.abc import Iterable
from typing import Optional

import idna

from ..config import get_config
from ..errors import IDNAConversionError

logger = logging.getLogger(__name__)

ACE_PREFIX = "xn--"


def label_to_ascii(label: str, transitional: Optional[bool] = None) -> str:
    """
    Convert a single label to its lower-cased ASCII form.

    Args:
        label: Unicode or ASCII label
        transitional: UTS #46 transitional processing (defaults to config)

    Returns:
        ASCII label, punycode-encoded when it holds non-ASCII code points

    Raises:
        IDNAConversionError: If the label violates the IDNA rules
    """
    if label == "":
        return label

    if label.isascii():
        ascii_label = label.lower()
        try:
            # Enforces letters/digits/hyphen rules and the 63 octet limit
            idna.alabel(ascii_label)
        except idna.IDNAError as exc:
            raise IDNAConversionError(label, str(exc)) from exc
        if ascii_label.startswith(ACE_PREFIX):
            label_to_unicode(ascii_label)
        return ascii_label

    if transitional is None:
        transitional = get_config().idna.transitional

    try:
        mapped = idna.uts46_remap(label, std3_rules=True, transitional=transitional)
    except idna.IDNAError as exc:
        raise IDNAConversionError(label, str(exc)) from exc

    if "." in mapped:
        raise IDNAConversionError(label, "label maps to more than one label")

    try:
        return idna.alabel(mapped).decode("ascii")
    except idna.IDNAError as exc:
        raise IDNAConversionError(label, str(exc)) from exc


def label_to_unicode(label: str) -> str:
    """
    Convert a single ASCII label to its Unicode form.

    A-labels ("xn--" prefix) are decoded and must re-encode to the exact
    same ASCII text; other labels are returned unchanged.

    Raises:
        IDNAConversionError: If decoding fails or the round trip differs
    """
    if not label.lower().startswith(ACE_PREFIX):
        return label

    try:
        decoded = idna.ulabel(label)
        reencoded = idna.alabel(decoded).decode("ascii")
    except idna.IDNAError as exc:
        raise IDNAConversionError(label, str(exc)) from exc

    if reencoded != label.lower():
        raise IDNAConversionError(
            label, f"A-label does not round-trip (re-encodes to {reencoded})"
        )

    return decoded


def map_label(label: str, transitional: Optional[bool] = None) -> str:
    """Apply UTS #46 mapping to a Unicode label, keeping it in Unicode form."""
    if label.isascii():
        return label.lower()

    if transitional is None:
        transitional = get_config().idna.transitional

    try:
        return idna.uts46_remap(label, std3_rules=True, transitional=transitional)
    except idna.IDNAError as exc:
        raise IDNAConversionError(label, str(exc)) from exc


def to_ascii(labels: Iterable[str]) -> tuple[str, ...]:
    """Convert every label to ASCII."""
    return tuple(label_to_ascii(label) for label in labels)


def to_unicode(labels: Iterable[str]) -> tuple[str, ...]:
    """Convert every label to Unicode."""
    return tuple(label_to_unicode(label) for label in labels)


class TranscodedLabels:
    """
    Both renditions of a label sequence.

    Built from whichever form is known; the other one is computed on first
    access and kept for the lifetime of the instance.
    """

    __slots__ = ("_ascii", "_unicode")

    def __init__(
        self,
        ascii_labels: Optional[tuple[str, ...]] = None,
        unicode_labels: Optional[tuple[str, ...]] = None,
    ):
        if ascii_labels is None and unicode_labels is None:
            raise ValueError("TranscodedLabels needs at least one label form")
        self._ascii = ascii_labels
        self._unicode = unicode_labels

    @property
    def ascii(self) -> tuple[str, ...]:
        if self._ascii is None:
            self._ascii = to_ascii(self._unicode)
        return self._ascii

    @property
    def unicode(self) -> tuple[str, ...]:
        if self._unicode is None:
            logger.debug(f"Decoding labels {self._ascii!r} to Unicode")
            self._unicode = to_unicode(self._ascii)
        return self._unicode
