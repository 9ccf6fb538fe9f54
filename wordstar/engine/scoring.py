"""
Wordle-style scoring (feedback) for a single (guess, target) pair.

Conventions (pattern symbols):
  - 'G'  : CORRECT   = correct letter in the correct position
  - 'Y'  : MISPLACED = letter is in the target, but elsewhere
  - '-'  : ABSENT    = letter not present (or present fewer times than guessed)

Algorithm (per distinct target letter, position-set based):
  1) Every guess position starts ABSENT.
  2) For letter c: T = positions of c in target, G = positions of c in guess.
     T & G are exact hits -> CORRECT.
  3) extra = |T| - |T & G| target copies are still unclaimed. The leftmost
     `extra` positions of G - T become MISPLACED; any surplus stays ABSENT.

Because each letter is handled independently and the tie-break is by
position, the result does not depend on the order letters are visited in.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterator, List, NamedTuple, Set, Tuple

from .wordset import normalize


class CharState(IntEnum):
    """Feedback for one cell. Ordered: ABSENT < MISPLACED < CORRECT."""
    ABSENT = 1
    MISPLACED = 2
    CORRECT = 3

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    CharState.ABSENT: "-",
    CharState.MISPLACED: "Y",
    CharState.CORRECT: "G",
}


class CharFeedback(NamedTuple):
    char: str
    state: CharState


@dataclass(frozen=True)
class GuessResult:
    """Per-position feedback for one guess, in guess order."""
    feedback: Tuple[CharFeedback, ...]

    @property
    def is_win(self) -> bool:
        return all(fb.state is CharState.CORRECT for fb in self.feedback)

    @property
    def word(self) -> str:
        return "".join(fb.char for fb in self.feedback)

    @property
    def pattern(self) -> str:
        """Compact form, e.g. 'G-YY-'."""
        return "".join(fb.state.symbol for fb in self.feedback)

    def __len__(self) -> int:
        return len(self.feedback)

    def __iter__(self) -> Iterator[CharFeedback]:
        return iter(self.feedback)

    def __getitem__(self, i: int) -> CharFeedback:
        return self.feedback[i]


def char_positions(word: str) -> Dict[str, Set[int]]:
    """
    Map each character to the set of indexes it occupies.
    Example: "hello" -> {"h": {0}, "e": {1}, "l": {2, 3}, "o": {4}}
    """
    out: Dict[str, Set[int]] = defaultdict(set)
    for i, ch in enumerate(word):
        out[ch].add(i)
    return dict(out)


def evaluate_positions(guess: str, target_positions: Dict[str, Set[int]]) -> GuessResult:
    """
    Score `guess` against a target given as its char_positions() map.

    Sessions precompute the map once per target; evaluate() is the
    one-shot form.
    """
    states: List[CharState] = [CharState.ABSENT] * len(guess)
    guess_positions = char_positions(guess)

    for ch, t_pos in target_positions.items():
        g_pos = guess_positions.get(ch)
        if not g_pos:
            continue  # letter not guessed; nothing to mark

        exact = t_pos & g_pos
        for i in exact:
            states[i] = CharState.CORRECT

        extra = len(t_pos) - len(exact)
        if extra > 0:
            # leftmost non-exact guess copies claim the remaining target copies
            for i in sorted(g_pos - t_pos)[:extra]:
                states[i] = CharState.MISPLACED

    return GuessResult(tuple(CharFeedback(ch, s) for ch, s in zip(guess, states)))


def evaluate(guess: str, target: str) -> GuessResult:
    """
    Compute per-position feedback for `guess` against `target`.

    Preconditions:
      - len(guess) == len(target); callers (GameSession) have already checked
        dictionary membership, which implies matching length.

    Examples:
      evaluate("clone", "colon").pattern -> "GYYY-"
      evaluate("ovolo", "colon").pattern -> "Y-YY-"
    """
    assert len(guess) == len(target), "Guess and target must be the same length"
    return evaluate_positions(guess, char_positions(target))


def score(guess: str, answer: str) -> str:
    """
    Pattern string for `guess` against `answer` (case-insensitive).

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    return evaluate(normalize(guess), normalize(answer)).pattern
