"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata

WORD_RE = re.compile(r"[^a-z]")


def clean_word(text: str) -> str:
    """Return a normalized lowercase ASCII representation of ``text``.

    Accents are folded onto their base letter; anything that is not a letter
    (digits, hyphens, apostrophes, the blank marker) is dropped.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    folded = "".join(char for char in decomposed if not unicodedata.combining(char))
    return WORD_RE.sub("", folded.lower())


__all__ = ["clean_word"]
