"""Data models supporting the crossword search."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

from .constants import BLANK

if TYPE_CHECKING:
    from ..engine.board import Board


@dataclass(frozen=True)
class Placement:
    """One way of writing ``word`` into a line of ``row_length`` cells."""

    word: str
    row_length: int
    offset: int

    @property
    def line(self) -> str:
        trailing = self.row_length - self.offset - len(self.word)
        return BLANK * self.offset + self.word + BLANK * trailing


@dataclass
class SearchStats:
    """Counters collected while exploring the search tree."""

    nodes: int = 0
    rows_written: int = 0
    backtracks: int = 0


@dataclass
class SolveResult:
    solved: bool
    board: Board
    words: List[str]
    stats: SearchStats = field(default_factory=SearchStats)
