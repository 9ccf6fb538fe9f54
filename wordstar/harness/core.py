"""
Session driver primitives.

- GameConfig / new_session: turn word list paths + rules into a ready GameSession.
- run_session: feed guesses from any iterable (stdin, a script, a test list)
  into a session until the game ends or the source runs dry.

These functions are UI-agnostic so they can back the terminal CLI, a
notebook, or a future service without changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from wordstar.datasets import load_wordset, pick_target
from wordstar.engine import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_WORD_LENGTH,
    GameSession,
    GameState,
    GuessResult,
    InvalidGuess,
)

log = logging.getLogger(__name__)

DEFAULT_DICTIONARY = str(Path(__file__).resolve().parent.parent / "datasets" / "data" / "words_5.txt")


@dataclass
class GameConfig:
    """Everything needed to start one round."""
    word_length: int = DEFAULT_WORD_LENGTH
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    dictionary_path: str = DEFAULT_DICTIONARY
    targets_path: Optional[str] = None   # pool for the hidden word; defaults to the dictionary
    target: Optional[str] = None         # fixed hidden word (testing / daily puzzles)
    seed: Optional[int] = None           # target pick seed
    strict: bool = False                 # abort on malformed word list lines


def new_session(cfg: GameConfig) -> GameSession:
    """
    Load word lists and build a session.

    Raises FileNotFoundError for missing lists, and the engine's configuration
    errors (InvalidLength, LengthMismatch, TargetNotInDictionary) for bad rules
    or a bad target.
    """
    words = load_wordset(cfg.dictionary_path, cfg.word_length, strict=cfg.strict)

    if cfg.target is not None:
        target = cfg.target
    elif cfg.targets_path is not None:
        pool = load_wordset(cfg.targets_path, cfg.word_length, strict=cfg.strict)
        target = pick_target(pool, seed=cfg.seed)
    else:
        target = pick_target(words, seed=cfg.seed)

    session = GameSession(words, target, max_attempts=cfg.max_attempts)
    log.info("new session: N=%d, max_attempts=%d, dictionary=%d words",
             cfg.word_length, cfg.max_attempts, len(words))
    return session


def run_session(
        session: GameSession,
        guesses: Iterable[str],
        *,
        on_result: Callable[[GuessResult], None] | None = None,
        on_reject: Callable[[str], None] | None = None,
) -> Dict:
    """
    Play guesses into `session` until it is won/lost or `guesses` is exhausted.

    Rejected words are passed to `on_reject` and skipped; they cost no attempt.
    Guesses left over once the game has ended are not consumed.

    Returns:
        dict with keys:
            success (bool), guesses (int, accepted only), rejected (list[str]),
            history (list[(word, pattern)]), state (str),
            answer (str, or None while the game is still running)
    """
    rejected: List[str] = []
    if session.is_over:
        guesses = ()

    for g in guesses:
        try:
            result = session.submit(g)
        except InvalidGuess:
            rejected.append(g)
            if on_reject is not None:
                on_reject(g)
            continue
        if on_result is not None:
            on_result(result)
        # stop pulling from the source as soon as the game ends
        if session.is_over:
            break

    history: List[Tuple[str, str]] = [(r.word, r.pattern) for r in session.history]
    return {
        "success": session.state is GameState.WON,
        "guesses": session.attempts_used,
        "rejected": rejected,
        "history": history,
        "state": session.state.value,
        "answer": session.target if session.is_over else None,
    }
