import curses
import logging
from typing import Callable, Optional

from app_state import AppState, InputMode
from record_parser import LoadError, parse


logger = logging.getLogger(__name__)

ENTER_KEYS = (10, 13, curses.KEY_ENTER)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)
ESC = 27

# key codes that are not key presses
NON_KEY_EVENTS = (-1, curses.KEY_RESIZE, curses.KEY_MOUSE)


def normalize_key(ch):
    """
    get_wch() yields a str for characters and an int for special keys.
    Printable characters come back as str, everything else as an int code.
    """
    if isinstance(ch, str):
        if len(ch) == 1 and not ch.isprintable():
            return ord(ch)
        return ch
    if 32 <= ch <= 126:
        return chr(ch)
    return ch


class InputController:
    def __init__(self, state: AppState, loader: Optional[Callable] = None):
        self.state = state
        self._load = loader or parse

    def handle_key(self, ch):
        ch = normalize_key(ch)
        if ch in NON_KEY_EVENTS:
            return

        if self.state.mode is InputMode.NORMAL:
            self._handle_normal(ch)
        else:
            self._handle_editing(ch)

    def submit(self):
        """Load the buffer's path; returns True when the series was replaced."""
        state = self.state
        path = state.path_buffer
        try:
            series = self._load(path, state.variant)
        except LoadError as e:
            state.last_error = f"Error: {e}"
            logger.warning("Load failed for %r: %s", path, e)
            return False
        state.series = series
        state.last_error = None
        state.mode = InputMode.NORMAL
        logger.info("Loaded %d records from %r", len(series), path)
        return True

    # ---------- internals ----------
    def _handle_normal(self, ch):
        if ch == "e":
            self.state.mode = InputMode.EDITING
        elif ch == "q":
            logger.info("Quit requested")
            self.state.quit()

    def _handle_editing(self, ch):
        if ch in ENTER_KEYS:
            self.submit()
            return

        if ch == ESC:
            self.state.mode = InputMode.NORMAL
            return

        if ch in BACKSPACE_KEYS:
            self.state.path_buffer = self.state.path_buffer[:-1]
            return

        if isinstance(ch, str) and ch.isprintable():
            self.state.path_buffer += ch
