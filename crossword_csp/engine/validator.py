"""Deterministic round-trip validation for designed boards."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List

from ..core.exceptions import ValidationError
from ..utils.logger import get_logger
from .board import Board


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Re-scans a solved board and compares its runs with the input words."""

    def validate(self, board: Board, words: Iterable[str]) -> ValidationResult:
        try:
            self._check_cells(board)
            self._check_runs(board, words)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _check_cells(self, board: Board) -> None:
        for r in range(board.rows):
            for c in range(board.columns):
                symbol = board.cell(r, c)
                if not isinstance(symbol, str) or len(symbol) != 1:
                    raise ValidationError(f"Cell ({r},{c}) holds {symbol!r}, expected one symbol")

    def _check_runs(self, board: Board, words: Iterable[str]) -> None:
        found: Counter = Counter()
        for r in range(board.rows):
            found.update(board.row_runs(r))
        for c in range(board.columns):
            found.update(board.column_runs(c))

        # Single letters never form runs, so they cannot be checked here.
        expected = Counter(word for word in words if len(word) > 1)

        missing = expected - found
        if missing:
            raise ValidationError(f"Words missing from board: {sorted(missing.elements())}")
        extra = found - expected
        if extra:
            raise ValidationError(
                f"Board spells words outside the candidate set: {sorted(extra.elements())}"
            )

