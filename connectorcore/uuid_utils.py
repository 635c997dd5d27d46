"""Identifiers made of four 32-bit words, ordered word by word."""

from __future__ import annotations

from dataclasses import dataclass

_WORD_MAX = 0xFFFFFFFF


@dataclass(frozen=True, order=True)
class Uuid:
    """A 128-bit identifier stored as four unsigned 32-bit elements."""

    elements: tuple[int, int, int, int]

    def __post_init__(self) -> None:
        elements = tuple(self.elements)
        if len(elements) != 4:
            raise ValueError("a Uuid has exactly four elements")
        for element in elements:
            if not isinstance(element, int) or not 0 <= element <= _WORD_MAX:
                raise ValueError(f"element out of 32-bit range: {element!r}")
        object.__setattr__(self, "elements", elements)


def compare_uuid(first: Uuid, second: Uuid) -> int:
    """Return -1, 0 or 1 as ``first`` sorts before, equal to or after ``second``."""
    for left, right in zip(first.elements, second.elements):
        if left < right:
            return -1
        if left > right:
            return 1
    return 0