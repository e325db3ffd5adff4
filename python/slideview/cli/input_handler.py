"""Single-keypress reader for the terminal frontend.

Arrow keys and WASD map to directions; a few letters map to actions.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from slidepuzzle.models.board import Direction


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    ch = msvcrt.getwch()
    # Arrow keys arrive as a prefix byte followed by a scan code.
    if ch in ("\x00", "\xe0"):
        return _WIN_ARROWS.get(msvcrt.getwch(), "")
    return ch


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_DIRECTION_KEYS: dict[str, Direction] = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

_ACTION_KEYS: dict[str, str] = {
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "h": "help",
    "?": "help",
}

_ARROW_MAP: dict[str, Direction] = {
    "A": Direction.UP,
    "B": Direction.DOWN,
    "C": Direction.RIGHT,
    "D": Direction.LEFT,
}

_WIN_ARROWS: dict[str, str] = {"H": "w", "P": "s", "K": "a", "M": "d"}


def read_key() -> Direction | str:
    """Block for one keypress and return a ``Direction`` or an action name.

    Action names are ``"quit"``, ``"restart"`` and ``"help"``; anything
    unrecognised comes back as ``""``.
    """
    ch = _getch()

    # Unix arrow keys: ESC [ A/B/C/D
    if ch == "\x1b":
        if _getch() == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"  # bare Escape

    key = ch.lower()
    if key in _DIRECTION_KEYS:
        return _DIRECTION_KEYS[key]
    return _ACTION_KEYS.get(key, "")
