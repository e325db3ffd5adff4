"""Shared fixtures for the puzzle core tests."""

from __future__ import annotations

import random
from functools import partial
from typing import Any

import pytest

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

ALL_EVENTS = (
    EVENT_BOARD_CREATED,
    EVENT_TILES_SWAPPED,
    EVENT_SHUFFLE_COMPLETE,
    EVENT_MOVE_COUNT_CHANGED,
    EVENT_EMPTY_FILLED,
    EVENT_PUZZLE_SOLVED,
    EVENT_SESSION_STATE,
)


class Recorder:
    """Collects every session event in emission order."""

    def __init__(self, bus: EventBus) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []
        for name in ALL_EVENTS:
            bus.subscribe(name, partial(self._record, name))

    def _record(self, name: str, sender: object, **payload: Any) -> None:
        self.events.append((name, payload))

    def named(self, name: str) -> list[dict[str, Any]]:
        return [payload for n, payload in self.events if n == name]

    def names(self) -> list[str]:
        return [n for n, _ in self.events]


def direction_between(board: Board, source: int, target: int) -> Direction:
    """Return the direction that leads from *source* to the adjacent *target*."""
    for direction in Direction:
        if board.neighbor(source, direction) == target:
            return direction
    raise AssertionError(f"{source} and {target} are not adjacent")


@pytest.fixture
def board_3x3() -> Board:
    return Board.create(3, 3)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def recorder(bus: EventBus) -> Recorder:
    return Recorder(bus)
