"""
Exception types raised by the engine.

Three families:

  - configuration : bad word length, bad target, bad attempt budget.
                    Raised at construction; retrying with the same inputs
                    fails the same way.
  - rejected input: InvalidGuess. Normal control flow for a front end, the
                    session is untouched and the player may try again.
  - contract      : NoAttemptsRemaining (submit after the game ended) and
                    InconsistentCharState (keyboard merge that cannot happen
                    for a fixed target). These indicate a bug in the caller
                    or in the engine itself.
"""

from __future__ import annotations


class WordleError(Exception):
    """Base class for every error raised by wordstar."""


# ---- configuration ----

class InvalidLength(WordleError, ValueError):
    """A word length or attempt budget that is not a positive integer."""


class LengthMismatch(WordleError, ValueError):
    """A word whose length differs from the dictionary's word length."""

    def __init__(self, word: str, expected: int):
        self.word = word
        self.expected = expected
        self.actual = len(word)
        super().__init__(
            f"incorrect word length for {word!r}. Actual: {self.actual}, Expected: {expected}"
        )


class TargetNotInDictionary(WordleError, ValueError):
    """The target word is not a member of the session's dictionary."""


# ---- rejected input ----

class InvalidGuess(WordleError, ValueError):
    """Guess is not in the dictionary (or has the wrong length). No attempt consumed."""

    def __init__(self, guess: str):
        self.guess = guess
        super().__init__(f"{guess!r} is not a valid word")


# ---- contract violations ----

class NoAttemptsRemaining(WordleError, RuntimeError):
    """submit() called on a session that is already won or lost."""


class InconsistentCharState(WordleError, AssertionError):
    """A character was scored both absent and present for the same target."""

    def __init__(self, char: str, previous, new):
        self.char = char
        self.previous = previous
        self.new = new
        super().__init__(
            f"invalid state: character {char}. previous state: {previous.name} "
            f"incompatible with new state: {new.name}"
        )
