"""Row-by-row backtracking search for crossword boards.

Each row receives either one placement of a remaining word or nothing at
all. After a row is written, the column runs it completes are reconciled
against the remaining words, which prunes the branch before recursing. The
first complete board found wins.
"""

from __future__ import annotations

import time
from typing import Iterable, List, Optional, Sequence

from ..core.constants import BLANK, MultisetStrategy
from ..core.exceptions import InvalidInputError
from ..core.models import SearchStats, SolveResult
from ..utils.logger import get_logger
from .board import Board, Journal
from .placements import generate_placements


LOGGER = get_logger(__name__)


def validate_inputs(rows: int, columns: int, words: Iterable[object]) -> None:
    """Reject configuration mistakes before any search starts."""

    if rows < 1 or columns < 1:
        raise InvalidInputError(f"Board dimensions must be positive, got {rows}x{columns}")
    for word in words:
        if not isinstance(word, str):
            raise InvalidInputError(f"Words must be strings, got {word!r}")
        if not word:
            raise InvalidInputError("Words must contain at least one letter")
        if BLANK in word:
            raise InvalidInputError(f"Word {word!r} contains the blank marker {BLANK!r}")


def _rewind(remaining: List[str], journal: Journal) -> None:
    for index, word in reversed(journal):
        remaining.insert(index, word)


class BacktrackingSearch:
    """Fills ``board`` in place, one row per recursion level."""

    def __init__(self, board: Board, strategy: MultisetStrategy = MultisetStrategy.COPY) -> None:
        self.board = board
        self.strategy = MultisetStrategy(strategy)
        self.stats = SearchStats()

    def solve(self, remaining_words: List[str], row_index: int = 0) -> bool:
        """Return True once every row from ``row_index`` down is consistent and no word is left.

        With the journal strategy ``remaining_words`` is mutated in place and
        restored before a failing call returns.
        """

        self.stats.nodes += 1
        if row_index == self.board.rows:
            return not remaining_words

        blank = BLANK * self.board.columns
        if not remaining_words:
            solved = self._attempt_row(remaining_words, row_index, blank)
        else:
            solved = self._try_words(remaining_words, row_index) or self._attempt_row(
                remaining_words, row_index, blank
            )
        if not solved:
            self.stats.backtracks += 1
        return solved

    def _try_words(self, remaining_words: List[str], row_index: int) -> bool:
        for index, word in enumerate(list(remaining_words)):
            for placement in generate_placements(word, self.board.columns):
                if self._attempt_row(remaining_words, row_index, placement.line, taken=index):
                    return True
        return False

    def _attempt_row(
        self,
        remaining_words: List[str],
        row_index: int,
        line: str,
        taken: Optional[int] = None,
    ) -> bool:
        """Write ``line`` and descend if the completed column runs reconcile.

        ``taken`` is the index of the word the line spells, which is removed
        from the branch before reconciling.
        """

        self.board.set_row(row_index, line)
        self.stats.rows_written += 1

        if self.strategy is MultisetStrategy.COPY:
            branch = list(remaining_words)
            if taken is not None:
                del branch[taken]
            if not self.board.reconcile_and_consume(branch, row_index):
                return False
            return self.solve(branch, row_index + 1)

        word = remaining_words.pop(taken) if taken is not None else None
        journal: Journal = []
        if self.board.reconcile_and_consume(remaining_words, row_index, journal) and self.solve(
            remaining_words, row_index + 1
        ):
            return True
        _rewind(remaining_words, journal)
        if word is not None:
            remaining_words.insert(taken, word)
        return False


def solve_board(
    rows: int,
    columns: int,
    words: Sequence[str],
    strategy: MultisetStrategy = MultisetStrategy.COPY,
) -> SolveResult:
    """Design a ``rows x columns`` board using exactly the given word multiset."""

    validate_inputs(rows, columns, words)
    board = Board(rows, columns)
    search = BacktrackingSearch(board, strategy)

    LOGGER.info(
        "Solving %sx%s board with %s words (strategy=%s)",
        rows,
        columns,
        len(words),
        search.strategy.value,
    )
    started = time.perf_counter()
    solved = search.solve(list(words), 0)
    elapsed = time.perf_counter() - started

    if solved:
        LOGGER.info(
            "Board designed in %.2fs (%s nodes, %s backtracks)",
            elapsed,
            search.stats.nodes,
            search.stats.backtracks,
        )
    else:
        LOGGER.info(
            "No board could be designed after %s nodes (%.2fs)",
            search.stats.nodes,
            elapsed,
        )
    return SolveResult(solved=solved, board=board, words=list(words), stats=search.stats)


__all__ = ["BacktrackingSearch", "solve_board", "validate_inputs"]
