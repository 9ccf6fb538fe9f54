from .errors import (
    WordleError,
    InvalidLength,
    LengthMismatch,
    TargetNotInDictionary,
    InvalidGuess,
    NoAttemptsRemaining,
    InconsistentCharState,
)
from .wordset import WordSet, normalize
from .scoring import CharState, CharFeedback, GuessResult, evaluate, score
from .keyboard import KeyboardView
from .game import GameSession, GameState, DEFAULT_WORD_LENGTH, DEFAULT_MAX_ATTEMPTS

__all__ = [
    "WordleError", "InvalidLength", "LengthMismatch", "TargetNotInDictionary",
    "InvalidGuess", "NoAttemptsRemaining", "InconsistentCharState",
    "WordSet", "normalize",
    "CharState", "CharFeedback", "GuessResult", "evaluate", "score",
    "KeyboardView",
    "GameSession", "GameState", "DEFAULT_WORD_LENGTH", "DEFAULT_MAX_ATTEMPTS",
]
