"""Crossword board design as a constraint satisfaction problem.

This package exposes the public API surface via:

- ``crossword_csp.engine.solver.solve_board``: runs the backtracking search.
- ``crossword_csp.engine.generator.CrosswordGenerator``: selection, search and validation.
- ``crossword_csp.data.lemmas.load_lemmas``: loads and filters candidate words.
"""

from .core.constants import BLANK, MultisetStrategy
from .engine.board import Board
from .engine.generator import CrosswordGenerator, GeneratorConfig
from .engine.placements import generate_placements
from .engine.solver import BacktrackingSearch, solve_board
from .data.lemmas import LemmaConfig, load_lemmas

__all__ = [
    "BLANK",
    "BacktrackingSearch",
    "Board",
    "CrosswordGenerator",
    "GeneratorConfig",
    "LemmaConfig",
    "MultisetStrategy",
    "generate_placements",
    "load_lemmas",
    "solve_board",
]

__version__ = "0.1.0"
