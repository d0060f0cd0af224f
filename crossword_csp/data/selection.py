"""Random selection of the candidate word multiset."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional

from ..core.exceptions import InvalidInputError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class WordSelector:
    """Draws the words a board will be designed from."""

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None) -> None:
        self.words: List[str] = list(words)
        self.rng = rng or random.Random()

    def pool(self, max_length: Optional[int] = None) -> List[str]:
        if max_length is None:
            return list(self.words)
        return [word for word in self.words if len(word) <= max_length]

    def select(
        self,
        count: int,
        max_length: Optional[int] = None,
        allow_duplicates: bool = False,
    ) -> List[str]:
        if count < 0:
            raise InvalidInputError(f"Cannot select a negative number of words: {count}")
        pool = self.pool(max_length)
        if count == 0:
            return []
        if not pool:
            raise InvalidInputError("No candidate words fit the board")
        if allow_duplicates:
            selected = self.rng.choices(pool, k=count)
        else:
            if count > len(pool):
                raise InvalidInputError(
                    f"Requested {count} distinct words but only {len(pool)} are available"
                )
            selected = self.rng.sample(pool, count)
        LOGGER.debug("Selected words: %s", ", ".join(selected))
        return selected


__all__ = ["WordSelector"]
