"""
Label-indexed host model.
"""

from .sequence import LabelSequence, resolve_offset

__all__ = [
    "LabelSequence",
    "resolve_offset",
]
