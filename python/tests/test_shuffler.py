"""Shuffler: solvability by construction, never-solved output, laziness."""

from __future__ import annotations

import random

import pytest

from slidepuzzle.engine.shuffler import ShuffleStep, Shuffler
from slidepuzzle.errors import ConfigError
from slidepuzzle.models.board import EMPTY, Board


# -- helpers ------------------------------------------------------------------


def _assert_consistent(board: Board) -> None:
    assert [c for c in board.cells if c is EMPTY] == [EMPTY]
    assert board.cells[board.empty_index] is EMPTY
    assert sorted(c for c in board.cells if c is not EMPTY) == list(range(board.size - 1))


# -- post-conditions ----------------------------------------------------------


@pytest.mark.parametrize("width,height", [(1, 2), (2, 1), (2, 2), (3, 3), (4, 3)])
@pytest.mark.parametrize("moves", [0, 1, 2, 50])
def test_shuffled_board_is_never_solved(width: int, height: int, moves: int) -> None:
    for seed in range(15):
        board = Board.create(width, height)
        Shuffler(moves, random.Random(seed)).shuffle(board)
        assert not board.is_solved()
        _assert_consistent(board)


@pytest.mark.parametrize("seed", range(10))
def test_shuffle_replays_from_solved_state(seed: int) -> None:
    board = Board.create(4, 4)
    log = Shuffler(200, random.Random(seed)).shuffle(board)

    replayed = Shuffler.replay(Board.create(4, 4), log)
    assert replayed == board


def test_every_step_is_a_legal_move(rng: random.Random) -> None:
    board = Board.create(3, 3)
    empty = board.empty_index
    for step in Shuffler(100, rng).steps(board):
        assert step.to_index == empty
        assert step.from_index in board.neighbors_of(step.to_index)
        empty = step.from_index
        assert board.empty_index == empty


def test_zero_moves_triggers_corrective_walk(rng: random.Random) -> None:
    board = Board.create(3, 3)
    run = Shuffler(0, rng).steps(board)
    log = run.run()

    assert run.corrected
    assert len(log) >= 20
    assert not board.is_solved()


def test_corrective_walk_scales_with_board(rng: random.Random) -> None:
    board = Board.create(6, 5)
    run = Shuffler(0, rng).steps(board)
    assert len(run.run()) >= 30


def test_no_correction_when_already_scrambled() -> None:
    # A single step off the solved board always unsolves it.
    board = Board.create(3, 3)
    run = Shuffler(1, random.Random(0)).steps(board)
    assert len(run.run()) == 1
    assert not run.corrected


def test_same_seed_same_shuffle() -> None:
    a, b = Board.create(3, 4), Board.create(3, 4)
    log_a = Shuffler(80, random.Random(99)).shuffle(a)
    log_b = Shuffler(80, random.Random(99)).shuffle(b)
    assert log_a == log_b
    assert a == b


def test_avoid_backtrack_never_undoes_previous_step(rng: random.Random) -> None:
    board = Board.create(3, 3)
    log = Shuffler(300, rng, avoid_backtrack=True).shuffle(board)
    for prev, step in zip(log, log[1:]):
        assert step.from_index != prev.to_index


def test_negative_moves_rejected() -> None:
    with pytest.raises(ConfigError):
        Shuffler(-1)


# -- step iterator ------------------------------------------------------------


def test_steps_are_lazy(rng: random.Random) -> None:
    board = Board.create(3, 3)
    run = Shuffler(10, rng).steps(board)
    assert board.is_solved()
    assert run.log == []

    first = next(run)
    assert isinstance(first, ShuffleStep)
    assert run.log == [first]
    assert board.empty_index == first.from_index


def test_cancel_leaves_consistent_board(rng: random.Random) -> None:
    board = Board.create(4, 4)
    run = Shuffler(500, rng).steps(board)
    for _ in range(7):
        next(run)
    run.cancel()

    assert run.cancelled
    with pytest.raises(StopIteration):
        next(run)
    assert len(run.log) == 7
    _assert_consistent(board)
    assert Shuffler.replay(Board.create(4, 4), run.log) == board


def test_run_cannot_restart(rng: random.Random) -> None:
    board = Board.create(3, 3)
    run = Shuffler(5, rng).steps(board)
    assert len(run.run()) == 5
    assert list(run) == []


def test_replay_rejects_foreign_log() -> None:
    log = [ShuffleStep(from_index=0, to_index=1)]
    with pytest.raises(ValueError):
        Shuffler.replay(Board.create(3, 3), log)
