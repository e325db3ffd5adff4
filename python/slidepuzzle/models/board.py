"""Board model for the sliding puzzle game."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Mapping, Optional

from slidepuzzle.errors import (
    InvalidBoardError,
    InvalidDimensionsError,
    SameIndexError,
)

LOGGER = logging.getLogger(__name__)

# Marker stored in the single empty cell.
EMPTY = None

Cell = Optional[int]


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        """``(d_row, d_col)`` step; UP decreases the row index."""
        return _OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_vector(cls, dx: float, dy: float) -> Direction:
        """Resolve a displacement to its dominant axis.

        ``dy > 0`` is a visual "up" swipe.  Ties go to the vertical axis.
        """
        if abs(dx) > abs(dy):
            return cls.RIGHT if dx > 0 else cls.LEFT
        return cls.UP if dy > 0 else cls.DOWN


_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Cells are stored row-major in a flat list.  Tile ``i`` belongs at
    index ``i``; ``EMPTY`` marks the one free cell.
    """

    width: int
    height: int
    cells: list[Cell]
    _empty_index: int = field(init=False, repr=False, compare=False)
    _homes: Mapping[int, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _check_dimensions(self.width, self.height)
        self.cells = list(self.cells)
        size = self.width * self.height
        if len(self.cells) != size:
            raise InvalidBoardError(
                f"Expected {size} cells for a {self.width}×{self.height} board, "
                f"got {len(self.cells)}."
            )
        empties = [i for i, cell in enumerate(self.cells) if cell is EMPTY]
        if len(empties) != 1:
            raise InvalidBoardError(
                f"A board holds exactly one empty cell, found {len(empties)}."
            )
        tiles = sorted(cell for cell in self.cells if cell is not EMPTY)
        if tiles != list(range(size - 1)):
            raise InvalidBoardError(
                f"Tiles must be 0..{size - 2}, each exactly once."
            )
        self._empty_index = empties[0]
        self._homes = MappingProxyType({tile: tile for tile in tiles})

    # -- construction helpers -------------------------------------------------

    @classmethod
    def create(cls, width: int, height: int) -> Board:
        """Return the solved board: tile ``i`` at index ``i``, empty last."""
        _check_dimensions(width, height)
        size = width * height
        cells: list[Cell] = list(range(size - 1))
        cells.append(EMPTY)
        return cls(width=width, height=height, cells=cells)

    @classmethod
    def from_flat(cls, width: int, height: int, flat: list[Cell]) -> Board:
        """Create a board from a flat row-major cell list.

        Example::

            Board.from_flat(3, 3, [0, 1, 2, 3, 4, 5, 6, None, 7])
        """
        return cls(width=width, height=height, cells=flat)

    # -- geometry -------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.width * self.height

    def row_col(self, index: int) -> tuple[int, int]:
        self._check_index(index)
        return divmod(index, self.width)

    def index_of(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"({row}, {col}) is outside the board.")
        return row * self.width + col

    def neighbor(self, index: int, direction: Direction) -> int | None:
        """Return the index next to *index* in *direction*, or ``None``."""
        row, col = self.row_col(index)
        dr, dc = direction.offset
        nr, nc = row + dr, col + dc
        if 0 <= nr < self.height and 0 <= nc < self.width:
            return nr * self.width + nc
        return None

    def neighbors_of(self, index: int) -> list[int]:
        """Grid-adjacent indices in up, down, left, right order."""
        result: list[int] = []
        for direction in Direction:
            n = self.neighbor(index, direction)
            if n is not None:
                result.append(n)
        return result

    # -- queries --------------------------------------------------------------

    @property
    def empty_index(self) -> int:
        return self._empty_index

    def cell_at(self, index: int) -> Cell:
        self._check_index(index)
        return self.cells[index]

    def cell_index_of(self, tile: int) -> int:
        self.home_index_of(tile)
        return self.cells.index(tile)

    def home_index_of(self, tile: int) -> int:
        try:
            return self._homes[tile]
        except KeyError:
            raise KeyError(f"No tile {tile!r} on this board.") from None

    def is_solved(self) -> bool:
        """Check if all tiles are in their home positions."""
        return all(
            cell is EMPTY or self._homes[cell] == i
            for i, cell in enumerate(self.cells)
        )

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* is home.  The empty cell never is."""
        cell = self.cell_at(index)
        return cell is not EMPTY and self._homes[cell] == index

    # -- mutation -------------------------------------------------------------

    def swap(self, index_a: int, index_b: int) -> None:
        """Exchange two cells.  Adjacency is the caller's business."""
        self._check_index(index_a)
        self._check_index(index_b)
        if index_a == index_b:
            raise SameIndexError(index_a)

        cells = self.cells
        cells[index_a], cells[index_b] = cells[index_b], cells[index_a]
        if self._empty_index == index_a:
            self._empty_index = index_b
        elif self._empty_index == index_b:
            self._empty_index = index_a

        if cells[self._empty_index] is not EMPTY:
            raise InvalidBoardError(
                f"Empty cell expected at {self._empty_index} after swapping "
                f"{index_a} and {index_b}; cells were changed outside swap()."
            )
        LOGGER.debug("swap %d <-> %d (empty at %d)", index_a, index_b, self._empty_index)

    def copy(self) -> Board:
        return Board(width=self.width, height=self.height, cells=self.cells[:])

    # -- helpers --------------------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"Cell index {index} is outside 0..{self.size - 1}.")


def _check_dimensions(width: int, height: int) -> None:
    if (
        not isinstance(width, int)
        or not isinstance(height, int)
        or width < 1
        or height < 1
        or width * height < 2
    ):
        raise InvalidDimensionsError(width, height)
