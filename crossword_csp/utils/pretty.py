"""Pretty-print helpers for crossword boards."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING

from ..core.constants import BLANK

if TYPE_CHECKING:
    from ..engine.board import Board
    from ..engine.generator import CrosswordResult


def format_board(board: Board) -> str:
    width = board.columns
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(board.rows_as_text()):
        row_render = " ".join(f"{symbol:>2}" for symbol in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_board(board: Board, *, label: str | None = None, stream=None) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(board), file=stream)


def print_solve_stats(result: CrosswordResult, *, stream=None) -> None:
    """Print board + search statistics for a designed crossword."""

    stream = stream or sys.stdout
    board = result.board
    print(format_board(board), file=stream)

    total_cells = board.rows * board.columns
    letter_cells = sum(1 for row in board.rows_as_text() for symbol in row if symbol != BLANK)
    lengths = Counter(len(word) for word in result.words)

    print(file=stream)
    print("--- Board ---", file=stream)
    print(f"  Size:          {board.rows} x {board.columns} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {letter_cells} ({letter_cells / total_cells * 100:.0f}%)", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Words:         {len(result.words)}", file=stream)
    if lengths:
        dist_parts = [f"{length}:{count}" for length, count in sorted(lengths.items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)

    print(file=stream)
    print("--- Search ---", file=stream)
    print(f"  Attempts:      {result.attempts}", file=stream)
    print(f"  Nodes:         {result.stats.nodes}", file=stream)
    print(f"  Rows written:  {result.stats.rows_written}", file=stream)
    print(f"  Backtracks:    {result.stats.backtracks}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
