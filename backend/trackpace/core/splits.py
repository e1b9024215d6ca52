"""Split generation for track sessions.

Two marking bases are supported:

  - fixed interval: a mark every `basis_m` meters of nominal distance, plus
    the finish. Times are computed on the lane-adjusted distance.
  - lap fraction: a mark every quarter lap of the lane's own lap, plus the
    finish. Marks are already in lane-adjusted meters.

Both bases time the same lane-adjusted run, so for a given distance, speed
and lane they finish at the same total time.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from trackpace.core.constants import (
    DEFAULT_BASIS_M,
    FINISH_LABEL,
    FINISH_TOLERANCE_M,
    LAP_FRACTIONS,
    MAX_SPLITS,
)
from trackpace.core.errors import InvalidInputError, require_positive
from trackpace.core.track import effective_lap_distance, lane_adjustment_factor

logger = logging.getLogger(__name__)


class BasisMode(str, Enum):
    fixed = "fixed"
    lap = "lap"


@dataclass(frozen=True)
class FixedSplit:
    mark: float      # nominal meters from the start
    interval: float  # seconds since previous mark
    running: float   # seconds since start

    @property
    def label(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class LapSplit:
    mark: float      # lane-adjusted meters from the start
    interval: float
    running: float
    label: str       # e.g. "3/4 lap", "2 lap", "Finish"


Split = Union[FixedSplit, LapSplit]


def _speed_ms(speed_kmh: float) -> float:
    return (speed_kmh * 1000) / 3600


def _check_mark_count(length_m: float, step_m: float) -> None:
    if math.ceil(length_m / step_m) > MAX_SPLITS:
        raise InvalidInputError(f"too many splits (limit {MAX_SPLITS}); use a larger basis")


def calculate_splits(
    distance_m: float,
    speed_kmh: float,
    lane: int,
    basis_m: float = DEFAULT_BASIS_M,
) -> tuple[FixedSplit, ...]:
    """Fixed-interval splits every `basis_m` meters, ending at `distance_m`.

    The last interval is shorter than the basis when the distance is not a
    multiple of it.
    """
    distance_m = require_positive("distance_m", distance_m)
    speed_kmh = require_positive("speed_kmh", speed_kmh)
    basis_m = require_positive("basis_m", basis_m)
    adjustment = lane_adjustment_factor(lane)
    speed_ms = _speed_ms(speed_kmh)
    _check_mark_count(distance_m, basis_m)

    # Multiples are computed as k * basis rather than accumulated so long
    # runs with fractional bases do not drift.
    marks: list[float] = []
    k = 1
    while k * basis_m < distance_m:
        marks.append(k * basis_m)
        k += 1
    marks.append(distance_m)

    splits: list[FixedSplit] = []
    previous = 0.0
    for mark in marks:
        running = (mark * adjustment) / speed_ms
        splits.append(FixedSplit(mark=mark, interval=running - previous, running=running))
        previous = running

    logger.debug(
        "fixed splits: distance=%.1f speed=%.2f lane=%d basis=%.1f -> %d marks",
        distance_m, speed_kmh, lane, basis_m, len(splits),
    )
    return tuple(splits)


def _lap_label(lap_number: int, suffix: str) -> str:
    if not suffix:
        return f"{lap_number + 1} lap"
    if lap_number == 0:
        return f"{suffix} lap"
    return f"{lap_number} {suffix} lap"


def calculate_lap_splits(
    distance_m: float,
    speed_kmh: float,
    lane: int,
) -> tuple[LapSplit, ...]:
    """Quarter-lap splits measured on the lane's own lap.

    `distance_m` is the nominal distance; in lanes beyond 1 the run is
    `distance_m * factor` long on the ground, and every mark and the finish
    are reported in those lane-adjusted meters.

    A whole-lap mark that lands on the end keeps its lap label ("2 lap" for
    800 m in lane 1); a part-lap mark there becomes "Finish". Otherwise a
    "Finish" mark is appended at the end.
    """
    distance_m = require_positive("distance_m", distance_m)
    speed_kmh = require_positive("speed_kmh", speed_kmh)
    lap_m = effective_lap_distance(lane)
    total_m = distance_m * lane_adjustment_factor(lane)
    speed_ms = _speed_ms(speed_kmh)
    _check_mark_count(total_m, lap_m / len(LAP_FRACTIONS))

    marks: list[tuple[float, str]] = []
    lap_number = 0
    reached_finish = False
    while not reached_finish and lap_number * lap_m < total_m:
        for fraction, suffix in LAP_FRACTIONS:
            mark = (lap_number + fraction) * lap_m
            if mark > total_m + FINISH_TOLERANCE_M:
                reached_finish = True
                break
            if mark >= total_m - FINISH_TOLERANCE_M:
                # Coincides with the end; clamp so the last mark is exact
                label = FINISH_LABEL if suffix else _lap_label(lap_number, suffix)
                marks.append((total_m, label))
                reached_finish = True
                break
            marks.append((mark, _lap_label(lap_number, suffix)))
        lap_number += 1
    if not marks or marks[-1][0] != total_m:
        marks.append((total_m, FINISH_LABEL))

    splits: list[LapSplit] = []
    previous = 0.0
    for mark, label in marks:
        running = mark / speed_ms
        splits.append(LapSplit(mark=mark, interval=running - previous, running=running, label=label))
        previous = running

    logger.debug(
        "lap splits: distance=%.1f speed=%.2f lane=%d lap=%.3f -> %d marks",
        distance_m, speed_kmh, lane, lap_m, len(splits),
    )
    return tuple(splits)


def generate_splits(
    distance_m: float,
    speed_kmh: float,
    lane: int,
    basis_m: float = DEFAULT_BASIS_M,
    mode: BasisMode = BasisMode.fixed,
) -> tuple[Split, ...]:
    """Dispatch to the fixed-interval or lap-fraction calculator.

    `mark` is nominal meters in fixed mode and lane-adjusted meters in lap
    mode; in lanes beyond 1 a lap-mode sheet ends at `distance_m * factor`.
    Both end at the same running time.
    """
    if BasisMode(mode) is BasisMode.lap:
        return calculate_lap_splits(distance_m, speed_kmh, lane)
    return calculate_splits(distance_m, speed_kmh, lane, basis_m)
