"""Lane stagger geometry for a standard 400 m track."""

import math

from trackpace.core.constants import LANE_WIDTH_M, STANDARD_LAP_M
from trackpace.core.errors import InvalidInputError


def lane_adjustment_factor(lane: int) -> float:
    """Return the distance multiplier for running in `lane`.

    Lane 1 is the 400 m reference. Each lane further out adds one full
    circle of lane width over the two bends:

        lap(lane) = 400 + 2 * pi * (lane - 1) * 1.22

    The factor is lap(lane) / 400. The upper bound is not enforced.
    """
    if isinstance(lane, bool) or not isinstance(lane, int):
        raise InvalidInputError("lane must be an integer")
    if lane < 1:
        raise InvalidInputError("lane must be >= 1")
    if lane == 1:
        return 1.0
    lane_distance = STANDARD_LAP_M + 2 * math.pi * (lane - 1) * LANE_WIDTH_M
    return lane_distance / STANDARD_LAP_M


def effective_lap_distance(lane: int) -> float:
    """Meters covered in one lap of `lane`."""
    return STANDARD_LAP_M * lane_adjustment_factor(lane)
