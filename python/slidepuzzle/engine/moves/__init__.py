from slidepuzzle.engine.moves.gestures import SWIPE_THRESHOLD, resolve_gesture
from slidepuzzle.engine.moves.moves import MoveEngine, MoveOutcome, MoveResult

__all__ = [
    "SWIPE_THRESHOLD",
    "MoveEngine",
    "MoveOutcome",
    "MoveResult",
    "resolve_gesture",
]
