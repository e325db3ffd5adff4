"""Configuration validation, image regions, and the event bus."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from slidepuzzle.config import PuzzleConfig
from slidepuzzle.errors import ConfigError, InvalidDimensionsError, MissingResourceError
from slidepuzzle.events import EventBus
from slidepuzzle.models.regions import ImageRegion, tile_regions


# -- config -------------------------------------------------------------------


def test_config_defaults() -> None:
    cfg = PuzzleConfig().validate()
    assert (cfg.rows, cfg.cols, cfg.shuffle_moves) == (3, 3, 200)
    assert cfg.image is None


@pytest.mark.parametrize("rows,cols", [(1, 1), (0, 3), (3, -1)])
def test_config_rejects_dimensions(rows: int, cols: int) -> None:
    with pytest.raises(InvalidDimensionsError):
        PuzzleConfig(rows=rows, cols=cols).validate()


def test_config_rejects_negative_moves() -> None:
    with pytest.raises(ConfigError):
        PuzzleConfig(shuffle_moves=-5).validate()


@pytest.mark.parametrize("moves,warns", [(0, True), (9, True), (10, False), (1000, False), (1001, True)])
def test_config_warns_outside_recommended_range(
    caplog: pytest.LogCaptureFixture, moves: int, warns: bool
) -> None:
    with caplog.at_level(logging.WARNING, logger="slidepuzzle.config"):
        PuzzleConfig(shuffle_moves=moves).validate()
    assert ("recommended range" in caplog.text) is warns


def test_config_image_must_exist(tmp_path: Path) -> None:
    image = tmp_path / "tiles.png"
    with pytest.raises(MissingResourceError) as info:
        PuzzleConfig(image=image).validate()
    assert info.value.location == image

    image.write_bytes(b"\x89PNG")
    assert PuzzleConfig(image=str(image)).validate().image == image


# -- regions ------------------------------------------------------------------


def test_regions_use_bottom_left_origin() -> None:
    regions = tile_regions(3, 3, 300, 300)
    assert len(regions) == 9
    assert regions[0] == ImageRegion(0, 200, 100, 100)
    assert regions[2] == ImageRegion(200, 200, 100, 100)
    assert regions[6] == ImageRegion(0, 0, 100, 100)
    assert regions[8] == ImageRegion(200, 0, 100, 100)


def test_regions_non_square_grid() -> None:
    regions = tile_regions(4, 2, 400, 100)
    assert regions[0] == ImageRegion(0, 50, 100, 50)
    assert regions[7] == ImageRegion(300, 0, 100, 50)


def test_region_flip_to_top_left() -> None:
    regions = tile_regions(3, 3, 300, 300)
    assert regions[0].to_top_left(300) == ImageRegion(0, 0, 100, 100)
    assert regions[7].to_top_left(300) == ImageRegion(100, 200, 100, 100)


def test_region_flip_with_remainder() -> None:
    # 310 px high leaves 10 px unused at the top of a bottom-left layout.
    regions = tile_regions(3, 3, 300, 310)
    assert regions[0] == ImageRegion(0, 206, 100, 103)
    assert regions[0].to_top_left(310) == ImageRegion(0, 1, 100, 103)


def test_centered_square_keeps_aspect() -> None:
    wide = tile_regions(4, 2, 400, 100)[0]
    assert wide.centered_square() == ImageRegion(25, 50, 50, 50)

    tall = ImageRegion(10, 0, 40, 100)
    assert tall.centered_square() == ImageRegion(10, 30, 40, 40)

    square = ImageRegion(0, 0, 100, 100)
    assert square.centered_square() == square


def test_regions_reject_tiny_image() -> None:
    with pytest.raises(ConfigError):
        tile_regions(4, 4, 3, 3)


def test_regions_reject_bad_grid() -> None:
    with pytest.raises(InvalidDimensionsError):
        tile_regions(1, 1, 100, 100)


# -- event bus ----------------------------------------------------------------


def test_event_bus_emit_subscribe() -> None:
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received["sender"] = sender
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("me", "test", value=42, msg="hello")

    assert received == {"sender": "me", "value": 42, "msg": "hello"}


def test_event_bus_unsubscribe() -> None:
    bus = EventBus()
    calls = []

    def handler(sender, **kwargs):
        calls.append(kwargs)

    bus.subscribe("tick", handler)
    bus.emit(None, "tick", n=1)
    bus.unsubscribe("tick", handler)
    bus.emit(None, "tick", n=2)
    bus.emit(None, "never-subscribed")

    assert calls == [{"n": 1}]
