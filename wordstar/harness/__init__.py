from .core import GameConfig, new_session, run_session
from .render import render_result, render_keyboard, render_board

__all__ = ["GameConfig", "new_session", "run_session",
           "render_result", "render_keyboard", "render_board"]
