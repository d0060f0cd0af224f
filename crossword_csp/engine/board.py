"""Board representation and column consistency checks."""

from __future__ import annotations

from typing import List, MutableSequence, Optional, Tuple

from ..core.constants import BLANK, Bounds
from ..core.exceptions import BoardContractError, InvalidInputError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

Journal = List[Tuple[int, str]]


def split_runs(line: str) -> List[str]:
    """Return the maximal non-blank runs of ``line`` that are at least two letters long."""

    return [run for run in line.split(BLANK) if len(run) > 1]


class Board:
    """A ``rows x columns`` letter grid filled one row at a time by the search."""

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 1 or columns < 1:
            raise InvalidInputError(f"Board dimensions must be positive, got {rows}x{columns}")
        self.bounds = Bounds(rows=rows, cols=columns)
        self.cells: List[List[str]] = [[BLANK] * columns for _ in range(rows)]

    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def columns(self) -> int:
        return self.bounds.cols

    # ------------------------------------------------------------------
    # Row manipulation
    # ------------------------------------------------------------------
    def set_row(self, row_index: int, line: str) -> None:
        if not 0 <= row_index < self.rows:
            raise BoardContractError(f"Row {row_index} outside board with {self.rows} rows")
        if len(line) != self.columns:
            raise BoardContractError(
                f"Line {line!r} has length {len(line)}, board has {self.columns} columns"
            )
        self.cells[row_index] = list(line)

    def fill_blank_row(self, row_index: int) -> None:
        self.set_row(row_index, BLANK * self.columns)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_row(self, row_index: int) -> str:
        return "".join(self.cells[row_index])

    def get_column(self, column: int, last_row: Optional[int] = None) -> str:
        stop = self.rows - 1 if last_row is None else last_row
        return "".join(self.cells[r][column] for r in range(stop + 1))

    def cell(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def row_runs(self, row_index: int) -> List[str]:
        return split_runs(self.get_row(row_index))

    def column_runs(self, column: int) -> List[str]:
        return split_runs(self.get_column(column))

    def rows_as_text(self) -> List[str]:
        return [self.get_row(r) for r in range(self.rows)]

    # ------------------------------------------------------------------
    # Column reconciliation
    # ------------------------------------------------------------------
    def extract_column_runs_up_to(self, column: int, row_index: int) -> List[str]:
        """Return the column run that is completed by the scan down to ``row_index``.

        A letter at ``row_index`` may still continue into the next row, so the
        column is deferred entirely unless ``row_index`` is the last row. A run
        that ended on an earlier scan is not reported again.
        """

        text = self.get_column(column, row_index)
        if text[-1] == BLANK:
            segment = text[:-1]
        elif self.bounds.is_last_row(row_index):
            segment = text
        else:
            return []

        if not segment or segment[-1] == BLANK:
            return []
        run = segment.rsplit(BLANK, 1)[-1]
        return [run] if len(run) > 1 else []

    def extract_all_column_runs_up_to(self, row_index: int) -> List[str]:
        runs: List[str] = []
        for column in range(self.columns):
            runs.extend(self.extract_column_runs_up_to(column, row_index))
        return runs

    def reconcile_and_consume(
        self,
        candidates: MutableSequence[str],
        row_index: int,
        journal: Optional[Journal] = None,
    ) -> bool:
        """Consume every column run completed at ``row_index`` from ``candidates``.

        Fails on the first run that has no remaining occurrence. ``candidates``
        may be partially consumed on failure. Each removal is appended to
        ``journal`` as ``(index, word)`` when one is supplied.
        """

        for run in self.extract_all_column_runs_up_to(row_index):
            try:
                index = candidates.index(run)
            except ValueError:
                LOGGER.debug("Column run %r at row %s is not a remaining word", run, row_index)
                return False
            del candidates[index]
            if journal is not None:
                journal.append((index, run))
        return True

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def copy(self) -> Board:
        clone = Board(self.rows, self.columns)
        clone.cells = [list(row) for row in self.cells]
        return clone

    def to_jsonable(self) -> List[str]:
        return self.rows_as_text()

    def __repr__(self) -> str:
        return f"Board({self.rows}x{self.columns}, rows={self.rows_as_text()!r})"
