"""Crossword design orchestration.

Picks a word multiset (explicit or drawn from the lemma list), runs the
backtracking search, then re-validates the finished board. Random draws are
retried a few times before giving up.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ..core.constants import MultisetStrategy
from ..core.exceptions import InvalidInputError, NoSolutionError
from ..core.models import SearchStats
from ..data.lemmas import LemmaConfig, load_lemmas
from ..data.selection import WordSelector
from ..utils.logger import get_logger
from .board import Board
from .solver import solve_board, validate_inputs
from .validator import GridValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    rows: int = 15
    columns: int = 15
    lemma_path: Path | str | None = None
    word_limit: int = 10
    seed: Optional[int] = None
    retry_limit: int = 3
    min_word_length: int = 2
    allow_duplicates: bool = False
    strategy: MultisetStrategy = MultisetStrategy.COPY

    @property
    def max_word_length(self) -> int:
        return max(self.rows, self.columns)

    def to_lemma_config(self) -> LemmaConfig:
        if self.lemma_path is None:
            raise InvalidInputError("A lemma list is required when no words are given")
        return LemmaConfig(
            path=self.lemma_path,
            min_length=self.min_word_length,
            max_length=self.max_word_length,
        )


@dataclass
class CrosswordResult:
    board: Board
    words: List[str]
    attempts: int
    stats: SearchStats
    validation_messages: List[str] = field(default_factory=list)
    seed: Optional[int] = None


class CrosswordGenerator:
    """High-level orchestrator: word selection, search, validation."""

    def __init__(
        self,
        config: GeneratorConfig,
        lemmas: Optional[Sequence[str]] = None,
        selector: Optional[WordSelector] = None,
    ) -> None:
        self.config = config
        self.rng = random.Random(config.seed)
        self.validator = GridValidator()
        self._lemmas = list(lemmas) if lemmas is not None else None
        self._selector = selector

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Optional[Sequence[str]] = None) -> CrosswordResult:
        config = self.config
        if config.retry_limit < 1:
            raise InvalidInputError(f"retry_limit must be at least 1, got {config.retry_limit}")
        validate_inputs(config.rows, config.columns, words or [])

        attempts = 1 if words is not None else config.retry_limit
        for attempt in range(1, attempts + 1):
            candidates = list(words) if words is not None else self._draw_words()
            LOGGER.info("Design attempt %s/%s with %s", attempt, attempts, candidates)
            result = solve_board(config.rows, config.columns, candidates, config.strategy)
            if not result.solved:
                LOGGER.warning("Design attempt %s found no board", attempt)
                continue
            validation = self.validator.validate(result.board, candidates)
            if not validation.ok:
                LOGGER.warning("Design attempt %s failed validation: %s", attempt, validation.messages)
                continue
            return CrosswordResult(
                board=result.board,
                words=candidates,
                attempts=attempt,
                stats=result.stats,
                validation_messages=validation.messages,
                seed=config.seed,
            )
        raise NoSolutionError(f"No board could be designed after {attempts} attempt(s)")

    # ------------------------------------------------------------------
    # Word selection
    # ------------------------------------------------------------------
    @property
    def selector(self) -> WordSelector:
        if self._selector is None:
            if self._lemmas is None:
                entries = load_lemmas(self.config.to_lemma_config())
                self._lemmas = [entry.word for entry in entries]
            self._selector = WordSelector(self._lemmas, rng=self.rng)
        return self._selector

    def _draw_words(self) -> List[str]:
        return self.selector.select(
            self.config.word_limit,
            max_length=self.config.max_word_length,
            allow_duplicates=self.config.allow_duplicates,
        )


__all__ = ["CrosswordGenerator", "CrosswordResult", "GeneratorConfig"]
