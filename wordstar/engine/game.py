"""
Game session: one round against one hidden target.

    session = GameSession(words, "colon", max_attempts=6)
    result = session.submit("clone")   # -> GuessResult, pattern "GYYY-"
    session.state                      # GameState.PLAYING

State machine:
    PLAYING --win--> WON
    PLAYING --last attempt missed--> LOST
WON and LOST are terminal; submit() on them raises NoAttemptsRemaining.

Guesses outside the dictionary raise InvalidGuess and do not count as an
attempt. The session is a plain object owned by one caller; the WordSet it
holds is only read and may be shared between sessions.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Tuple

from .errors import (
    InvalidGuess,
    InvalidLength,
    LengthMismatch,
    NoAttemptsRemaining,
    TargetNotInDictionary,
)
from .keyboard import KeyboardView
from .scoring import GuessResult, char_positions, evaluate_positions
from .wordset import WordSet, normalize

log = logging.getLogger(__name__)

# Classic Wordle rules; both are overridable per session.
DEFAULT_WORD_LENGTH = 5
DEFAULT_MAX_ATTEMPTS = 6


class GameState(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class GameSession:
    def __init__(self, words: WordSet, target: str, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        """
        Raises:
          InvalidLength         : max_attempts is not positive
          LengthMismatch        : target length differs from the dictionary's
          TargetNotInDictionary : target is not a dictionary member
        """
        if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts <= 0:
            raise InvalidLength(f"max_attempts must be positive; got {max_attempts!r}")

        t = normalize(target)
        if len(t) != words.word_length:
            raise LengthMismatch(t, words.word_length)
        if t not in words:
            raise TargetNotInDictionary("target word not present in dictionary")

        self._words = words
        self._target = t
        self._target_positions = char_positions(t)
        self._max_attempts = max_attempts
        self._history: List[GuessResult] = []
        self._keyboard = KeyboardView()
        self._state = GameState.PLAYING

    # ---- read accessors ----

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def history(self) -> Tuple[GuessResult, ...]:
        return tuple(self._history)

    @property
    def keyboard_view(self) -> KeyboardView:
        return self._keyboard

    @property
    def word_length(self) -> int:
        return self._words.word_length

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def attempts_used(self) -> int:
        return len(self._history)

    @property
    def attempts_remaining(self) -> int:
        return self._max_attempts - len(self._history)

    @property
    def is_over(self) -> bool:
        return self._state is not GameState.PLAYING

    @property
    def target(self) -> str:
        return self._target

    def is_valid_guess(self, word: str) -> bool:
        """Would submit() accept this word (ignoring the game state)?"""
        return word in self._words

    # ---- transitions ----

    def _allow_more_guesses(self) -> bool:
        return self._state is GameState.PLAYING and len(self._history) < self._max_attempts

    def submit(self, guess: str) -> GuessResult:
        """
        Submit one guess and return its feedback.

        Raises:
          NoAttemptsRemaining : the game is already won or lost
          InvalidGuess        : not a dictionary word; nothing changes
        """
        if not self._allow_more_guesses():
            raise NoAttemptsRemaining(
                f"no more guesses allowed (state={self._state.value}, "
                f"attempts={len(self._history)}/{self._max_attempts})"
            )

        g = normalize(guess)
        if g not in self._words:
            log.debug("rejected guess %r", guess)
            raise InvalidGuess(guess)

        result = evaluate_positions(g, self._target_positions)
        # keyboard first: if it rejects the guess, no attempt is recorded
        self._keyboard.record_guess(result)
        self._history.append(result)

        if result.is_win:
            self._state = GameState.WON
        elif len(self._history) == self._max_attempts:
            self._state = GameState.LOST

        log.debug("guess %d/%d %s %s -> %s", len(self._history), self._max_attempts,
                  g, result.pattern, self._state.value)
        return result

    def __repr__(self) -> str:
        return (f"GameSession(state={self._state.value}, "
                f"attempts={len(self._history)}/{self._max_attempts})")
