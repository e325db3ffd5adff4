"""Sliding tile puzzle core: board, shuffle, moves and session lifecycle."""

from slidepuzzle.config import PuzzleConfig
from slidepuzzle.engine.moves import MoveEngine, MoveOutcome, MoveResult
from slidepuzzle.engine.session import PuzzleSession, SessionState
from slidepuzzle.engine.shuffler import ShuffleStep, Shuffler
from slidepuzzle.events import EventBus
from slidepuzzle.models import EMPTY, Board, Direction

__all__ = [
    "EMPTY",
    "Board",
    "Direction",
    "EventBus",
    "MoveEngine",
    "MoveOutcome",
    "MoveResult",
    "PuzzleConfig",
    "PuzzleSession",
    "SessionState",
    "ShuffleStep",
    "Shuffler",
]
