"""MoveEngine and gesture resolution."""

from __future__ import annotations

import random

import pytest
from conftest import direction_between

from slidepuzzle.engine.moves import MoveEngine, MoveOutcome, resolve_gesture
from slidepuzzle.engine.shuffler import Shuffler
from slidepuzzle.models.board import EMPTY, Board, Direction


# -- try_move -----------------------------------------------------------------


def test_top_left_up_is_no_move(board_3x3: Board) -> None:
    result = MoveEngine.try_move(board_3x3, 0, Direction.UP)
    assert result.outcome is MoveOutcome.NO_MOVE
    assert not result.moved
    assert board_3x3 == Board.create(3, 3)


def test_move_into_empty(board_3x3: Board) -> None:
    result = MoveEngine.try_move(board_3x3, 7, Direction.RIGHT)
    assert result.outcome is MoveOutcome.MOVED
    assert (result.from_index, result.to_index) == (7, 8)
    assert result.new_empty_index == 7
    assert not result.solved
    assert board_3x3.cells[7:] == [EMPTY, 7]


def test_occupied_target_is_blocked(board_3x3: Board) -> None:
    result = MoveEngine.try_move(board_3x3, 4, Direction.RIGHT)
    assert result.outcome is MoveOutcome.BLOCKED
    assert result.to_index == 5
    assert result.new_empty_index is None
    assert board_3x3 == Board.create(3, 3)


@pytest.mark.parametrize("source", [8, 9, -1, 100])
def test_empty_or_missing_source_is_no_move(board_3x3: Board, source: int) -> None:
    result = MoveEngine.try_move(board_3x3, source, Direction.LEFT)
    assert result.outcome is MoveOutcome.NO_MOVE
    assert board_3x3 == Board.create(3, 3)


def test_move_reports_solved() -> None:
    board = Board.from_flat(3, 3, [0, 1, 2, 3, 4, 5, 6, EMPTY, 7])
    result = MoveEngine.try_move(board, 8, Direction.LEFT)
    assert result.moved
    assert result.solved
    assert board.is_solved()


@pytest.mark.parametrize("seed", range(8))
def test_move_and_reverse_restores_board(seed: int) -> None:
    board = Board.create(4, 3)
    Shuffler(60, random.Random(seed)).shuffle(board)
    snapshot = board.copy()

    empty = board.empty_index
    for source in board.neighbors_of(empty):
        direction = direction_between(board, source, empty)
        there = MoveEngine.try_move(board, source, direction)
        assert there.moved
        back = MoveEngine.try_move(board, there.to_index, direction.opposite)
        assert back.moved
        assert board == snapshot


# -- source_for ---------------------------------------------------------------


@pytest.mark.parametrize(
    "direction,expected",
    [
        (Direction.RIGHT, 7),
        (Direction.DOWN, 5),
        (Direction.LEFT, None),
        (Direction.UP, None),
    ],
)
def test_source_for_solved_board(
    board_3x3: Board, direction: Direction, expected: int | None
) -> None:
    assert MoveEngine.source_for(board_3x3, direction) == expected


def test_source_for_center_gap() -> None:
    board = Board.from_flat(3, 3, [0, 1, 2, 3, EMPTY, 5, 6, 7, 4])
    assert MoveEngine.source_for(board, Direction.UP) == 7
    assert MoveEngine.source_for(board, Direction.LEFT) == 5
    result = MoveEngine.try_move(board, 7, Direction.UP)
    assert result.moved
    assert board.empty_index == 7


# -- gestures -----------------------------------------------------------------


@pytest.mark.parametrize(
    "dx,dy,expected",
    [
        (50, 10, Direction.RIGHT),
        (-50, 10, Direction.LEFT),
        (10, 50, Direction.UP),
        (10, -50, Direction.DOWN),
        (40, 40, Direction.UP),
        (40, 0, Direction.RIGHT),
    ],
)
def test_resolve_gesture(dx: float, dy: float, expected: Direction) -> None:
    assert resolve_gesture(dx, dy) is expected


@pytest.mark.parametrize("dx,dy", [(0, 0), (20, 20), (-39, 0), (0, 39.9)])
def test_short_gesture_is_ignored(dx: float, dy: float) -> None:
    assert resolve_gesture(dx, dy) is None


def test_custom_threshold() -> None:
    assert resolve_gesture(5, 0, threshold=4) is Direction.RIGHT
    assert resolve_gesture(5, 0, threshold=6) is None
