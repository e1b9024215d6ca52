import logging

from fastapi import APIRouter, HTTPException

from trackpace.core.config import settings
from trackpace.core.constants import TRACK_LANES
from trackpace.core.plan import PaceSource, RunParameters, RunPlan, derive_plan
from trackpace.core.time_utils import (
    format_pace,
    format_time,
    format_time_with_ms,
    parse_minutes_seconds,
)
from trackpace.core.track import effective_lap_distance, lane_adjustment_factor
from trackpace.schemas.calculator import (
    CalculatorRequest,
    CalculatorResponse,
    LaneRead,
    SplitRead,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculator", tags=["calculator"])


def _seconds(value) -> float:
    """Accept seconds as a number or an 'M:SS.s' string."""
    if isinstance(value, str):
        return parse_minutes_seconds(value)
    return float(value)


def build_parameters(payload: CalculatorRequest) -> RunParameters:
    """Map a request onto immutable run parameters.

    Raises ValueError for malformed time strings.
    """
    if payload.speed_kmh is not None:
        source, value = PaceSource.speed, float(payload.speed_kmh)
    elif payload.pace is not None:
        source, value = PaceSource.pace, _seconds(payload.pace)
    else:
        source, value = PaceSource.time, _seconds(payload.target_time)

    return RunParameters(
        distance_m=payload.distance_m,
        source=source,
        value=value,
        lane=payload.lane if payload.lane is not None else settings.default_lane,
        basis_m=payload.basis_m if payload.basis_m is not None else settings.default_basis_m,
        mode=payload.mode,
    )


def plan_from_request(payload: CalculatorRequest) -> RunPlan:
    """Derive a plan, turning input errors into 422 responses."""
    try:
        return derive_plan(build_parameters(payload))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


def split_rows(splits) -> list[SplitRead]:
    return [
        SplitRead(
            idx=i,
            mark_m=s.mark,
            label=s.label,
            interval_s=s.interval,
            running_s=s.running,
            running=format_time_with_ms(s.running),
        )
        for i, s in enumerate(splits, start=1)
    ]


@router.post("", response_model=CalculatorResponse)
def calculate(payload: CalculatorRequest):
    plan = plan_from_request(payload)
    params = plan.parameters
    logger.info(
        "calculated %s splits: %.1fm lane %d at %.2f km/h (%s)",
        params.mode.value, params.distance_m, params.lane, plan.speed_kmh, params.source.value,
    )

    return CalculatorResponse(
        distance_m=params.distance_m,
        lane=params.lane,
        basis_m=params.basis_m,
        mode=params.mode,
        speed_kmh=plan.speed_kmh,
        pace_s_per_km=plan.pace_s_per_km,
        pace=format_pace(plan.pace_s_per_km),
        total_time_s=plan.total_time_s,
        total_time=format_time(plan.total_time_s),
        finish_time_s=plan.finish_time_s,
        lane_factor=plan.lane_factor,
        splits=split_rows(plan.splits),
    )


@router.get("/lanes", response_model=list[LaneRead])
def list_lanes():
    """Stagger factor and lap length for every lane on the track."""
    return [
        LaneRead(
            lane=lane,
            factor=lane_adjustment_factor(lane),
            lap_distance_m=effective_lap_distance(lane),
        )
        for lane in range(1, TRACK_LANES + 1)
    ]
