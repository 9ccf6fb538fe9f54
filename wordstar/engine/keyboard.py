"""
Keyboard hints aggregated over every guess in a game.

Initially no character has a state. Each accepted guess contributes one
state per character, and the view keeps the best one seen so far:
a letter found MISPLACED and later CORRECT shows CORRECT, and a later
MISPLACED for the same letter never downgrades it.

ABSENT is final in both directions. For a fixed target a letter is either
in the word or not, so seeing it ABSENT in one guess and present in another
means the scores were computed wrongly; that raises InconsistentCharState
instead of being papered over.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .errors import InconsistentCharState
from .scoring import CharState, GuessResult

log = logging.getLogger(__name__)


class KeyboardView:
    def __init__(self):
        self._keys: Dict[str, CharState] = {}

    def _check(self, char: str, state: CharState) -> Optional[CharState]:
        """Return the current state for `char`; raise if `state` contradicts it."""
        prev = self._keys.get(char)
        if prev is not None and (prev is CharState.ABSENT) != (state is CharState.ABSENT):
            raise InconsistentCharState(char, prev, state)
        return prev

    def record(self, char: str, state: CharState) -> CharState:
        """Merge one (char, state) and return the aggregate state for `char`."""
        prev = self._check(char, state)
        if prev is None:
            self._keys[char] = state
            return state

        merged = max(prev, state)
        if merged is not prev:
            log.debug("keyboard: %r %s -> %s", char, prev.name, merged.name)
        self._keys[char] = merged
        return merged

    def record_guess(self, result: GuessResult) -> None:
        """
        Merge a whole guess.

        A guess can legitimately score the same letter differently at two
        positions ("ovolo" vs "colon": o is Y, Y, then - for the surplus copy),
        so states are first collapsed to the best per letter within the guess.
        """
        best: Dict[str, CharState] = {}
        for ch, state in result:
            best[ch] = max(best.get(ch, state), state)

        # all-or-nothing: check every letter before writing any
        for ch, state in best.items():
            self._check(ch, state)
        for ch, state in best.items():
            self.record(ch, state)

    def get(self, char: str) -> Optional[CharState]:
        return self._keys.get(char)

    def letters(self, state: CharState) -> List[str]:
        """Characters currently in `state`, sorted."""
        return sorted(ch for ch, s in self._keys.items() if s is state)

    def as_dict(self) -> Dict[str, CharState]:
        return dict(self._keys)

    def __contains__(self, char: object) -> bool:
        return char in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        inner = ", ".join(f"{ch}={s.symbol}" for ch, s in sorted(self._keys.items()))
        return f"KeyboardView({inner})"
