"""Exception hierarchy for the sliding puzzle core.

Only setup-time problems are raised.  Illegal moves during play are
ordinary, frequent input and are reported as ``MoveResult`` values.
"""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by the puzzle core."""


class InvalidDimensionsError(PuzzleError, ValueError):
    """Rows/cols do not describe a grid of at least two cells."""

    def __init__(self, width: object, height: object) -> None:
        super().__init__(
            f"A board needs positive dimensions and at least 2 cells, "
            f"got {width}×{height}."
        )
        self.width = width
        self.height = height


class InvalidBoardError(PuzzleError, ValueError):
    """An explicit cell list does not describe a legal board."""


class SameIndexError(PuzzleError, ValueError):
    """A swap was requested between a cell and itself."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Cannot swap cell {index} with itself.")
        self.index = index


class ConfigError(PuzzleError, ValueError):
    """A configuration value is out of range."""


class MissingResourceError(PuzzleError):
    """An external resource (e.g. the source image) could not be found."""

    def __init__(self, kind: str, location: object) -> None:
        super().__init__(f"{kind} not found: {location}")
        self.kind = kind
        self.location = location


class SessionStateError(PuzzleError, RuntimeError):
    """An operation was called in a session state that does not allow it."""
