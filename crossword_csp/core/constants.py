"""Shared constants and enumerations for the crossword search."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


BLANK = "#"

# Parts of speech kept from the BNC lemma list: adverbs, verbs, adjectives, nouns.
DEFAULT_PARTS_OF_SPEECH: Tuple[str, ...] = ("adv", "v", "a", "n")


class MultisetStrategy(str, Enum):
    """How the search undoes word consumption when it backtracks."""

    COPY = "copy"
    JOURNAL = "journal"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_last_row(self, row: int) -> bool:
        return row == self.rows - 1
