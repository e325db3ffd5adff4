"""Turns raw pointer displacement into a move direction."""

from __future__ import annotations

import logging
import math

from slidepuzzle.models.board import Direction

LOGGER = logging.getLogger(__name__)

# Minimum drag distance, in host units, before a gesture counts as a swipe.
SWIPE_THRESHOLD = 40.0


def resolve_gesture(
    dx: float, dy: float, threshold: float = SWIPE_THRESHOLD
) -> Direction | None:
    """Return the swipe direction for ``(dx, dy)``, or ``None`` for a tap.

    ``dy`` grows upwards.  Hosts whose y axis points down pass ``-dy``.
    """
    if math.hypot(dx, dy) < threshold:
        return None
    direction = Direction.from_vector(dx, dy)
    LOGGER.debug("gesture (%.1f, %.1f) -> %s", dx, dy, direction)
    return direction
