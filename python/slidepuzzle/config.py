"""Session configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from slidepuzzle.errors import ConfigError, InvalidDimensionsError, MissingResourceError

LOGGER = logging.getLogger(__name__)

DEFAULT_ROWS = 3
DEFAULT_COLS = 3
DEFAULT_SHUFFLE_MOVES = 200
RECOMMENDED_SHUFFLE_MOVES = range(10, 1001)


@dataclass
class PuzzleConfig:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    shuffle_moves: int = DEFAULT_SHUFFLE_MOVES
    image: Optional[Path] = None
    seed: Optional[int] = None
    avoid_backtrack: bool = False

    def validate(self) -> PuzzleConfig:
        """Raise on anything that must stop a session from starting.

        Returns ``self`` so calls can be chained.
        """
        if (
            not isinstance(self.rows, int)
            or not isinstance(self.cols, int)
            or self.rows < 1
            or self.cols < 1
            or self.rows * self.cols < 2
        ):
            raise InvalidDimensionsError(self.cols, self.rows)

        if self.shuffle_moves < 0:
            raise ConfigError(
                f"shuffle_moves must be non-negative, got {self.shuffle_moves}."
            )
        if self.shuffle_moves not in RECOMMENDED_SHUFFLE_MOVES:
            LOGGER.warning(
                "shuffle_moves=%d is outside the recommended range %d-%d",
                self.shuffle_moves,
                RECOMMENDED_SHUFFLE_MOVES.start,
                RECOMMENDED_SHUFFLE_MOVES.stop - 1,
            )

        if self.image is not None:
            self.image = Path(self.image).expanduser()
            if not self.image.is_file():
                raise MissingResourceError("Source image", self.image)

        return self
