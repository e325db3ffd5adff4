"""Notification channel between a session and its hosts.

Renderers and HUDs subscribe by event name; handlers receive the
emitting session as ``sender`` and the payload as keyword arguments.
"""

from __future__ import annotations

from typing import Any, Callable

from blinker import Signal


class EventBus:
    """Simple event bus leveraging blinker Signal objects."""

    def __init__(self) -> None:
        self._signals: dict[str, Signal] = {}

    def subscribe(self, name: str, fn: Callable[..., Any]) -> None:
        sig = self._signals.setdefault(name, Signal(name))
        # Strong reference: hosts often subscribe bound methods or lambdas.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn: Callable[..., Any]) -> None:
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, sender: object, name: str, **payload: Any) -> None:
        sig = self._signals.get(name)
        if sig:
            sig.send(sender, **payload)


# -- board --------------------------------------------------------------------
EVENT_BOARD_CREATED = "board_created"        # payload: width, height, cells, regions
EVENT_TILES_SWAPPED = "tiles_swapped"        # payload: index_a, index_b, shuffling
EVENT_SHUFFLE_COMPLETE = "shuffle_complete"  # payload: steps

# -- hud ----------------------------------------------------------------------
EVENT_MOVE_COUNT_CHANGED = "move_count_changed"  # payload: moves
EVENT_EMPTY_FILLED = "empty_filled"              # payload: index, region
EVENT_PUZZLE_SOLVED = "puzzle_solved"            # payload: moves

# -- lifecycle ----------------------------------------------------------------
EVENT_SESSION_STATE = "session_state_changed"    # payload: old, new
