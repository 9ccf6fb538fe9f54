# apps/cli/play.py
"""
CLI entry point: play one round of wordstar in the terminal.

This script:
  1) Optionally validates the word lists (prints counts + SHA, targets ⊆ dictionary).
  2) Loads the dictionary, picks (or takes) the hidden word, builds a session.
  3) Reads guesses from stdin, printing the board after every accepted guess,
     until the game is won, lost, or stdin closes.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --N 5 --dictionary my_words.txt --seed 7 --no-color
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Iterator

from wordstar.datasets import validate_wordlists, pretty_summary
from wordstar.engine import DEFAULT_MAX_ATTEMPTS, DEFAULT_WORD_LENGTH, GameState, WordleError
from wordstar.harness import GameConfig, new_session, run_session, render_board
from wordstar.harness.core import DEFAULT_DICTIONARY


def _read_guesses(prompt: Callable[[], str]) -> Iterator[str]:
    """Yield stripped lines from stdin until EOF; blank lines are skipped."""
    while True:
        try:
            line = input(prompt())
        except EOFError:
            print()
            return
        if line.strip():
            yield line.strip()


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, build the session and run the interactive loop.
    Returns the process exit status.
    """
    ap = argparse.ArgumentParser(description="wordstar: guess the hidden word")
    ap.add_argument("--N", type=int, default=DEFAULT_WORD_LENGTH, help="word length")
    ap.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS,
                    help="number of accepted guesses allowed")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help="path to the list of allowed words (one per line)")
    ap.add_argument("--targets", help="optional pool for the hidden word (should be ⊆ dictionary)")
    ap.add_argument("--target", help="play against this word instead of a random one")
    ap.add_argument("--seed", type=int, help="RNG seed for the target pick (reproducible games)")
    ap.add_argument("--strict", action="store_true",
                    help="abort on word list lines of the wrong length instead of skipping them")
    ap.add_argument("--color", action=argparse.BooleanOptionalAction, default=None,
                    help="ANSI colors (default: on when stdout is a terminal)")
    ap.add_argument("--validate", action="store_true",
                    help="validate the word lists, print a summary and exit")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    if args.validate:
        rep = validate_wordlists(args.N, args.dictionary, args.targets)
        print(pretty_summary(rep))
        for issue in rep["issues"]:
            print(f"  - {issue}")
        return 0 if rep["passed"] else 1

    cfg = GameConfig(
        word_length=args.N,
        max_attempts=args.max_attempts,
        dictionary_path=args.dictionary,
        targets_path=args.targets,
        target=args.target,
        seed=args.seed,
        strict=args.strict,
    )
    try:
        session = new_session(cfg)
    except (WordleError, FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    color = sys.stdout.isatty() if args.color is None else args.color

    print(f"Guess the {session.word_length}-letter word. "
          f"You have {session.max_attempts} attempts.\n")

    def show(_result):
        print(render_board(session, color=color))
        print()

    def reject(word):
        print(f"{word} is not a valid word.")

    run_session(session, _read_guesses(lambda: f"[{session.attempts_used + 1}] > "),
                on_result=show, on_reject=reject)

    if session.state is GameState.WON:
        print(f"You win! Solved in {session.attempts_used}/{session.max_attempts}.")
    elif session.state is GameState.LOST:
        print(f"You lost. Answer: {session.target}")
    else:
        print("Game abandoned.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
