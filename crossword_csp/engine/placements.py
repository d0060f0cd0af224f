"""Enumerate the ways a word fits into a single board line."""

from __future__ import annotations

from typing import List

from ..core.exceptions import InvalidInputError
from ..core.models import Placement


def generate_placements(word: str, line_length: int) -> List[Placement]:
    """Return every blank-padded placement of ``word`` in a line, leftmost first.

    A word longer than the line simply has no placements.
    """

    if not word:
        raise InvalidInputError("Cannot place an empty word")
    if line_length < 0:
        raise InvalidInputError(f"Line length must be non-negative, got {line_length}")

    padding = line_length - len(word)
    if padding < 0:
        return []
    return [Placement(word=word, row_length=line_length, offset=offset) for offset in range(padding + 1)]


__all__ = ["generate_placements"]
