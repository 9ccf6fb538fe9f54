"""
Plain-text rendering of a session for terminals.

Two modes:
  - color=True : ANSI background colors (green / yellow / red), as on the
                 classic board.
  - color=False: each letter followed by its pattern symbol ('G', 'Y', '-'),
                 so output stays readable in logs and non-tty pipes.
Keys never guessed are shown bare (uncolored, no symbol).
"""

from __future__ import annotations

from typing import List, Optional

from wordstar.engine import CharState, GameSession, GuessResult, KeyboardView

QWERTY_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")

_ANSI_BG = {
    CharState.CORRECT: "\x1b[30;42m",
    CharState.MISPLACED: "\x1b[30;43m",
    CharState.ABSENT: "\x1b[30;41m",
}
_ANSI_RESET = "\x1b[0m"


def _cell(ch: str, state: Optional[CharState], color: bool) -> str:
    if state is None:
        return f" {ch} " if color else f"{ch} "
    if color:
        return f"{_ANSI_BG[state]} {ch} {_ANSI_RESET}"
    return f"{ch}{state.symbol}"


def render_result(result: GuessResult, color: bool = False) -> str:
    """One board row, e.g. 'cG lY oY nY e-'."""
    sep = "" if color else " "
    return sep.join(_cell(ch, state, color) for ch, state in result)


def render_keyboard(view: KeyboardView, color: bool = False) -> str:
    """
    Qwerty rows with hints. Each row is indented by its index to mimic the
    key stagger. Letters outside a-z (other alphabets) go on a final row.
    """
    sep = "" if color else " "
    lines: List[str] = []
    for idx, row in enumerate(QWERTY_ROWS):
        cells = sep.join(_cell(ch, view.get(ch), color) for ch in row)
        lines.append(" " * idx + cells)

    extra = sorted(ch for ch in view.as_dict() if not any(ch in r for r in QWERTY_ROWS))
    if extra:
        lines.append(sep.join(_cell(ch, view.get(ch), color) for ch in extra))
    return "\n".join(lines)


def render_board(session: GameSession, color: bool = False) -> str:
    """All guesses so far, blank rows for remaining attempts, then the keyboard."""
    rows = [render_result(r, color) for r in session.history]
    blank = ("   " if color else "_  ") * session.word_length
    rows += [blank.rstrip()] * session.attempts_remaining
    return "\n".join(rows) + "\n\n" + render_keyboard(session.keyboard_view, color)
