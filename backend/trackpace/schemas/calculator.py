from typing import Optional, Union

from pydantic import BaseModel, model_validator

from trackpace.core.splits import BasisMode


class CalculatorRequest(BaseModel):
    """Calculator inputs: distance, lane, basis and exactly one pace source."""

    distance_m: float
    lane: Optional[int] = None      # falls back to settings.default_lane
    basis_m: Optional[float] = None  # falls back to settings.default_basis_m
    mode: BasisMode = BasisMode.fixed

    # Pace sources. pace and target_time take seconds or "M:SS.s"
    speed_kmh: Optional[float] = None
    pace: Optional[Union[float, str]] = None         # per km
    target_time: Optional[Union[float, str]] = None  # for the whole distance

    @model_validator(mode="after")
    def _one_pace_source(self):
        given = [
            f for f in ("speed_kmh", "pace", "target_time")
            if getattr(self, f) is not None
        ]
        if len(given) != 1:
            raise ValueError("Provide exactly one of speed_kmh, pace or target_time")
        return self


class SplitRead(BaseModel):
    idx: int
    mark_m: float
    label: Optional[str] = None
    interval_s: float
    running_s: float
    running: str  # 'MM:SS.cc'


class CalculatorResponse(BaseModel):
    distance_m: float
    lane: int
    basis_m: float
    mode: BasisMode

    speed_kmh: float
    pace_s_per_km: float
    pace: str          # e.g. "4:00.0/km"
    total_time_s: float
    total_time: str    # 'MM:SS.s' for the nominal distance
    finish_time_s: float  # lane-adjusted, equals the last split's running
    lane_factor: float

    splits: list[SplitRead]


class LaneRead(BaseModel):
    lane: int
    factor: float
    lap_distance_m: float
