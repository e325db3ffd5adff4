"""Scrambles boards into solvable, unsolved positions."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterator

from slidepuzzle.config import DEFAULT_SHUFFLE_MOVES
from slidepuzzle.errors import ConfigError
from slidepuzzle.models.board import Board

LOGGER = logging.getLogger(__name__)

MIN_CORRECTIVE_MOVES = 20


@dataclass(frozen=True)
class ShuffleStep:
    """One legal move of the walk.

    ``to_index`` held the empty cell before the swap, ``from_index``
    holds it afterwards.
    """

    from_index: int
    to_index: int


class ShuffleRun:
    """A lazy, cancellable random walk over one board.

    Each ``next()`` performs exactly one swap, so the board is consistent
    at every yield point.  A run cannot be restarted; iterate it once.
    """

    def __init__(
        self,
        board: Board,
        moves: int,
        rng: random.Random,
        *,
        avoid_backtrack: bool = False,
    ) -> None:
        self.board = board
        self.moves = moves
        self.log: list[ShuffleStep] = []
        self.corrected = False
        self._rng = rng
        self._avoid_backtrack = avoid_backtrack
        self._cancelled = False
        self._steps = self._walk()

    def __iter__(self) -> ShuffleRun:
        return self

    def __next__(self) -> ShuffleStep:
        if self._cancelled:
            raise StopIteration
        return next(self._steps)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Abandon the walk; the board keeps its last completed step."""
        if not self._cancelled:
            LOGGER.debug("shuffle cancelled after %d steps", len(self.log))
        self._cancelled = True
        self._steps.close()

    def run(self) -> list[ShuffleStep]:
        """Drive the walk to completion and return its move log."""
        for _ in self:
            pass
        return self.log

    # -- walk -----------------------------------------------------------------

    def _walk(self) -> Iterator[ShuffleStep]:
        board = self.board
        for _ in range(self.moves):
            yield self._step()

        if board.is_solved():
            corrective = max(MIN_CORRECTIVE_MOVES, board.size)
            LOGGER.info(
                "board still solved after %d moves, corrective walk of %d",
                self.moves,
                corrective,
            )
            self.corrected = True
            for _ in range(corrective):
                yield self._step()
            # Any single move off a solved board unsolves it.
            while board.is_solved():
                yield self._step()

        LOGGER.debug("shuffle finished after %d steps", len(self.log))

    def _step(self) -> ShuffleStep:
        board = self.board
        empty = board.empty_index
        candidates = board.neighbors_of(empty)
        if self._avoid_backtrack and self.log and len(candidates) > 1:
            previous = self.log[-1].to_index
            candidates = [c for c in candidates if c != previous]

        source = self._rng.choice(candidates)
        board.swap(source, empty)
        step = ShuffleStep(from_index=source, to_index=empty)
        self.log.append(step)
        return step


class Shuffler:
    """Creates solvable puzzles by random-walking from the solved state."""

    def __init__(
        self,
        shuffle_moves: int = DEFAULT_SHUFFLE_MOVES,
        rng: random.Random | None = None,
        *,
        avoid_backtrack: bool = False,
    ) -> None:
        if shuffle_moves < 0:
            raise ConfigError(
                f"shuffle_moves must be non-negative, got {shuffle_moves}."
            )
        self.shuffle_moves = shuffle_moves
        self.rng = rng if rng is not None else random.Random()
        self.avoid_backtrack = avoid_backtrack

    def steps(self, board: Board) -> ShuffleRun:
        """Return a lazy walk over *board*; nothing moves until iterated."""
        return ShuffleRun(
            board,
            self.shuffle_moves,
            self.rng,
            avoid_backtrack=self.avoid_backtrack,
        )

    def shuffle(self, board: Board) -> list[ShuffleStep]:
        """Scramble *board* in-place and return the move log."""
        return self.steps(board).run()

    @staticmethod
    def replay(board: Board, log: list[ShuffleStep]) -> Board:
        """Apply a recorded walk to *board* in-place and return it."""
        for step in log:
            if board.empty_index != step.to_index:
                raise ValueError(
                    f"Step {step} does not start at the empty cell "
                    f"{board.empty_index}."
                )
            board.swap(step.from_index, step.to_index)
        return board
