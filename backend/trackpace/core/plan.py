"""Run parameters and the pure derivation of a full pacing plan.

Exactly one of speed, pace or finish time is authoritative at a time (the
field the runner last edited). The other two are always derived from it;
derived values are never written back into the source, so there is no
rounding feedback between the three.
"""

from dataclasses import dataclass
from enum import Enum

from trackpace.core.constants import DEFAULT_BASIS_M
from trackpace.core.conversions import (
    pace_from_speed,
    speed_from_pace,
    speed_from_total_time,
    total_time_from_speed,
)
from trackpace.core.errors import require_positive
from trackpace.core.splits import BasisMode, Split, generate_splits
from trackpace.core.track import lane_adjustment_factor


class PaceSource(str, Enum):
    speed = "speed"  # km/h
    pace = "pace"    # seconds per km
    time = "time"    # seconds for the whole distance


@dataclass(frozen=True)
class RunParameters:
    distance_m: float
    source: PaceSource
    value: float
    lane: int = 1
    basis_m: float = DEFAULT_BASIS_M
    mode: BasisMode = BasisMode.fixed


@dataclass(frozen=True)
class RunPlan:
    parameters: RunParameters
    speed_kmh: float
    pace_s_per_km: float
    total_time_s: float
    lane_factor: float
    splits: tuple[Split, ...]

    @property
    def finish_time_s(self) -> float:
        """Lane-adjusted time at the final mark."""
        return self.splits[-1].running


def canonical_speed(params: RunParameters) -> float:
    """Normalize the authoritative field to km/h."""
    source = PaceSource(params.source)
    if source is PaceSource.pace:
        return speed_from_pace(params.value)
    if source is PaceSource.time:
        return speed_from_total_time(params.distance_m, params.value)
    return require_positive("speed_kmh", params.value)


def derive_plan(params: RunParameters) -> RunPlan:
    """Compute speed, pace, total time and splits for `params`.

    Total time is for the nominal distance; the lane-adjusted time is the
    last split's running time.
    """
    speed_kmh = canonical_speed(params)
    source = PaceSource(params.source)

    # Echo the authoritative value untouched instead of re-deriving it
    pace = params.value if source is PaceSource.pace else pace_from_speed(speed_kmh)
    total = (
        params.value
        if source is PaceSource.time
        else total_time_from_speed(params.distance_m, speed_kmh)
    )

    return RunPlan(
        parameters=params,
        speed_kmh=speed_kmh,
        pace_s_per_km=float(pace),
        total_time_s=float(total),
        lane_factor=lane_adjustment_factor(params.lane),
        splits=generate_splits(
            params.distance_m, speed_kmh, params.lane, params.basis_m, params.mode
        ),
    )
