"""
Word source -> WordSet, and target selection.

The engine's WordSet.add() refuses words of the wrong length one at a time;
this module decides what to do about them. By default they are skipped and
counted (word lists scraped from the web are rarely clean), with strict=True
the first bad line aborts the load.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable

from wordstar.engine import LengthMismatch, WordSet
from .io import read_lines

log = logging.getLogger(__name__)


def words_from_lines(lines: Iterable[str], N: int, *, strict: bool = False) -> WordSet:
    """
    Build a WordSet of length-N words from raw lines.

    Blank lines are ignored. Words are normalized (trimmed, lowercased) by the
    WordSet itself.

    Raises:
      InvalidLength  : N <= 0
      LengthMismatch : a non-blank line has the wrong length and strict=True
    """
    words = WordSet(N)
    skipped = 0
    for lineno, raw in enumerate(lines, 1):
        if not raw.strip():
            continue
        try:
            words.add(raw)
        except LengthMismatch as e:
            if strict:
                raise
            skipped += 1
            log.debug("line %d: %s", lineno, e)

    if skipped:
        log.warning("skipped %d word(s) not of length %d", skipped, N)
    return words


def load_wordset(path: Path | str, N: int, *, strict: bool = False) -> WordSet:
    """
    Load a newline-separated word list into a WordSet.
    Raises FileNotFoundError if the path doesn't exist.
    """
    words = words_from_lines(read_lines(path), N, strict=strict)
    log.info("loaded %d %d-letter words from %s", len(words), N, path)
    return words


def pick_target(words: Iterable[str], seed: int | None = None) -> str:
    """
    Pick a target word. The pool is sorted first so a given seed always
    yields the same word regardless of set iteration order.

    Raises ValueError on an empty pool.
    """
    pool = sorted(words)
    if not pool:
        raise ValueError("cannot pick a target from an empty word list")
    return random.Random(seed).choice(pool)
