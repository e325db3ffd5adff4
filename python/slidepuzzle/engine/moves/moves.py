"""Move validation and execution as a pure function of (board, move)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from slidepuzzle.models.board import EMPTY, Board, Direction

LOGGER = logging.getLogger(__name__)


class MoveOutcome(StrEnum):
    MOVED = "moved"
    BLOCKED = "blocked"
    NO_MOVE = "no_move"


@dataclass(frozen=True)
class MoveResult:
    outcome: MoveOutcome
    from_index: int | None = None
    to_index: int | None = None
    solved: bool = False

    @property
    def moved(self) -> bool:
        return self.outcome is MoveOutcome.MOVED

    @property
    def new_empty_index(self) -> int | None:
        """The cell the tile left; only meaningful for ``MOVED``."""
        return self.from_index if self.moved else None

    @classmethod
    def no_move(cls, source_index: int | None = None) -> MoveResult:
        return cls(MoveOutcome.NO_MOVE, from_index=source_index)

    @classmethod
    def blocked(
        cls, source_index: int | None = None, target_index: int | None = None
    ) -> MoveResult:
        return cls(MoveOutcome.BLOCKED, from_index=source_index, to_index=target_index)


class MoveEngine:
    """Stateless move logic; all methods are static."""

    @staticmethod
    def try_move(board: Board, source_index: int, direction: Direction) -> MoveResult:
        """Slide the tile at *source_index* one cell in *direction*.

        Returns ``NO_MOVE`` when the source is not a tile or the target lies
        outside the grid, ``BLOCKED`` when the target is occupied, and
        ``MOVED`` after swapping the tile into the empty cell.
        """
        if not 0 <= source_index < board.size:
            return MoveResult.no_move(source_index)
        if board.cell_at(source_index) is EMPTY:
            return MoveResult.no_move(source_index)

        target_index = board.neighbor(source_index, direction)
        if target_index is None:
            LOGGER.debug("move %d %s: off the board", source_index, direction)
            return MoveResult.no_move(source_index)

        if board.cell_at(target_index) is not EMPTY:
            LOGGER.debug(
                "move %d %s: blocked by %d", source_index, direction, target_index
            )
            return MoveResult.blocked(source_index, target_index)

        board.swap(source_index, target_index)
        return MoveResult(
            MoveOutcome.MOVED,
            from_index=source_index,
            to_index=target_index,
            solved=board.is_solved(),
        )

    @staticmethod
    def source_for(board: Board, direction: Direction) -> int | None:
        """Return the tile that would slide in *direction* into the empty cell.

        E.g. ``Direction.UP`` picks the tile **below** the empty cell.
        """
        return board.neighbor(board.empty_index, direction.opposite)
