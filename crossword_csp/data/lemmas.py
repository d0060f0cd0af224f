"""Lemma list loading and part-of-speech filtering.

The BNC lemma list holds one entry per line::

    sort-order frequency word pos

for example ``5 2186369 a det``. Only the configured parts of speech are
kept; by default adverbs, verbs, adjectives and nouns.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set

from ..core.constants import DEFAULT_PARTS_OF_SPEECH
from ..core.exceptions import LemmaLoadError
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)


@dataclass
class LemmaConfig:
    """Configuration for lemma loading and filtering."""

    path: Path | str
    parts_of_speech: Sequence[str] = DEFAULT_PARTS_OF_SPEECH
    min_length: int = 2
    max_length: Optional[int] = None


@dataclass(frozen=True)
class LemmaEntry:
    word: str
    frequency: int
    pos: str


def _parse_int(value: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def parse_lemma_lines(lines: Iterable[str], config: LemmaConfig) -> List[LemmaEntry]:
    allowed = set(config.parts_of_speech)
    seen: Set[str] = set()
    entries: List[LemmaEntry] = []
    for number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        if len(parts) < 4:
            LOGGER.debug("Skipping malformed lemma line %s: %r", number, line)
            continue
        pos = parts[3]
        if pos not in allowed:
            continue
        word = clean_word(parts[2])
        if len(word) < config.min_length:
            continue
        if config.max_length is not None and len(word) > config.max_length:
            continue
        if word in seen:
            continue
        seen.add(word)
        entries.append(LemmaEntry(word=word, frequency=_parse_int(parts[1]), pos=pos))
    return entries


def load_lemmas(config: LemmaConfig) -> List[LemmaEntry]:
    source = Path(config.path)
    if not source.exists():
        raise LemmaLoadError(f"Missing lemma list: {source}")
    try:
        with source.open(encoding="utf-8", errors="replace") as handle:
            entries = parse_lemma_lines(handle, config)
    except OSError as exc:
        raise LemmaLoadError(str(exc)) from exc
    LOGGER.info("Loaded %s lemmas from %s", len(entries), source)
    return entries


def read_word_list(path: Path | str) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise LemmaLoadError(f"Cannot read word list {source}: {exc}") from exc
    words: List[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        words.append(line)
    return words


__all__ = ["LemmaConfig", "LemmaEntry", "load_lemmas", "parse_lemma_lines", "read_word_list"]
