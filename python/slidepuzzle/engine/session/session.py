"""Session lifecycle: create, shuffle, play, lock on solve."""

from __future__ import annotations

import logging
import random
from enum import StrEnum
from typing import Iterator

from slidepuzzle.config import PuzzleConfig
from slidepuzzle.engine.moves import SWIPE_THRESHOLD, MoveEngine, MoveResult, resolve_gesture
from slidepuzzle.engine.shuffler import ShuffleRun, ShuffleStep, Shuffler
from slidepuzzle.errors import SessionStateError
from slidepuzzle.events import (
    EVENT_BOARD_CREATED,
    EVENT_EMPTY_FILLED,
    EVENT_MOVE_COUNT_CHANGED,
    EVENT_PUZZLE_SOLVED,
    EVENT_SESSION_STATE,
    EVENT_SHUFFLE_COMPLETE,
    EVENT_TILES_SWAPPED,
    EventBus,
)
from slidepuzzle.models.board import Board, Direction
from slidepuzzle.models.regions import ImageRegion, tile_regions

LOGGER = logging.getLogger(__name__)


class SessionState(StrEnum):
    IDLE = "idle"
    SHUFFLING = "shuffling"
    PLAYING = "playing"
    SOLVED = "solved"


class PuzzleSession:
    """Owns the board and gates who may move it.

    The shuffle can be driven one step at a time through
    ``shuffle_steps()`` (hosts that animate it) or all at once with
    ``run_shuffle()``.  Both end in ``PLAYING`` with a zero move count.
    """

    def __init__(
        self,
        config: PuzzleConfig | None = None,
        bus: EventBus | None = None,
        shuffler: Shuffler | None = None,
    ) -> None:
        self.config = (config or PuzzleConfig()).validate()
        self.bus = bus if bus is not None else EventBus()
        self.shuffler = shuffler or Shuffler(
            self.config.shuffle_moves,
            random.Random(self.config.seed),
            avoid_backtrack=self.config.avoid_backtrack,
        )
        self.state = SessionState.IDLE
        self.board: Board | None = None
        self.move_count = 0
        self.image_size: tuple[int, int] | None = None
        self.filled_index: int | None = None
        self._regions: dict[int, ImageRegion] | None = None
        self._run: ShuffleRun | None = None
        self._solved_fired = False

    # -- lifecycle ------------------------------------------------------------

    def start(self, image_size: tuple[int, int] | None = None) -> None:
        """Create a fresh board and enter ``SHUFFLING``.

        A shuffle still in progress on the previous board is cancelled.
        """
        if self._run is not None:
            self._run.cancel()
        if image_size is not None:
            self.image_size = image_size
        cfg = self.config

        regions = None
        if self.image_size is not None:
            regions = tile_regions(cfg.cols, cfg.rows, *self.image_size)
        board = Board.create(cfg.cols, cfg.rows)

        self.board = board
        self._regions = regions
        self.move_count = 0
        self.filled_index = None
        self._solved_fired = False
        self._run = self.shuffler.steps(board)

        LOGGER.info("new %d×%d board", cfg.cols, cfg.rows)
        self.bus.emit(
            self,
            EVENT_BOARD_CREATED,
            width=board.width,
            height=board.height,
            cells=list(board.cells),
            regions=regions,
        )
        self._set_state(SessionState.SHUFFLING)

    def restart(self) -> None:
        """Abandon the current board (mid-shuffle or not) and start over."""
        LOGGER.info("restart requested in state %s", self.state)
        self.start()

    def shuffle_steps(self) -> Iterator[ShuffleStep]:
        """Yield shuffle steps one at a time; enters ``PLAYING`` at the end."""
        if self.state is not SessionState.SHUFFLING or self._run is None:
            raise SessionStateError(f"No shuffle to run in state {self.state}.")
        return self._drive(self._run)

    def run_shuffle(self) -> list[ShuffleStep]:
        """Run the whole shuffle synchronously and return its move log."""
        run = self._run
        for _ in self.shuffle_steps():
            pass
        assert run is not None
        return run.log

    # -- play -----------------------------------------------------------------

    def try_move(self, source_index: int, direction: Direction) -> MoveResult:
        if self.state is not SessionState.PLAYING:
            LOGGER.debug("move ignored in state %s", self.state)
            return MoveResult.blocked(source_index)
        assert self.board is not None

        result = MoveEngine.try_move(self.board, source_index, direction)
        if not result.moved:
            return result

        self.move_count += 1
        LOGGER.debug("move %d: %d -> %d", self.move_count, result.from_index, result.to_index)
        self.bus.emit(
            self,
            EVENT_TILES_SWAPPED,
            index_a=result.from_index,
            index_b=result.to_index,
            shuffling=False,
        )
        self.bus.emit(self, EVENT_MOVE_COUNT_CHANGED, moves=self.move_count)

        if result.solved and not self._solved_fired:
            self._enter_solved()
        return result

    def swipe(
        self,
        source_index: int,
        dx: float,
        dy: float,
        threshold: float = SWIPE_THRESHOLD,
    ) -> MoveResult:
        """Apply a drag gesture that started on *source_index*."""
        direction = resolve_gesture(dx, dy, threshold)
        if direction is None:
            return MoveResult.no_move(source_index)
        return self.try_move(source_index, direction)

    def move_toward_empty(self, direction: Direction) -> MoveResult:
        """Slide whichever tile can move in *direction* into the empty cell."""
        if self.state is not SessionState.PLAYING:
            return MoveResult.blocked()
        assert self.board is not None
        source = MoveEngine.source_for(self.board, direction)
        if source is None:
            return MoveResult.no_move()
        return self.try_move(source, direction)

    # -- queries --------------------------------------------------------------

    @property
    def is_solved(self) -> bool:
        return self.state is SessionState.SOLVED

    @property
    def regions(self) -> dict[int, ImageRegion] | None:
        return self._regions

    @property
    def shuffle_log(self) -> list[ShuffleStep]:
        """Steps taken so far by the current board's shuffle."""
        return list(self._run.log) if self._run is not None else []

    # -- helpers --------------------------------------------------------------

    def _drive(self, run: ShuffleRun) -> Iterator[ShuffleStep]:
        for step in run:
            if self._run is not run:
                return
            self.bus.emit(
                self,
                EVENT_TILES_SWAPPED,
                index_a=step.from_index,
                index_b=step.to_index,
                shuffling=True,
            )
            yield step
        # start() swaps in a new run; the abandoned one must not finish.
        if self._run is run and self.state is SessionState.SHUFFLING:
            self._finish_shuffle(run)

    def _finish_shuffle(self, run: ShuffleRun) -> None:
        self.move_count = 0
        self.bus.emit(self, EVENT_SHUFFLE_COMPLETE, steps=len(run.log))
        self._set_state(SessionState.PLAYING)
        self.bus.emit(self, EVENT_MOVE_COUNT_CHANGED, moves=0)

    def _enter_solved(self) -> None:
        assert self.board is not None
        self._solved_fired = True
        self._set_state(SessionState.SOLVED)

        index = self.board.empty_index
        self.filled_index = index
        region = self._regions.get(index) if self._regions else None
        self.bus.emit(self, EVENT_EMPTY_FILLED, index=index, region=region)
        self.bus.emit(self, EVENT_PUZZLE_SOLVED, moves=self.move_count)
        LOGGER.info("solved in %d moves", self.move_count)

    def _set_state(self, new: SessionState) -> None:
        old, self.state = self.state, new
        if old is not new:
            LOGGER.info("session %s -> %s", old, new)
            self.bus.emit(self, EVENT_SESSION_STATE, old=old, new=new)
