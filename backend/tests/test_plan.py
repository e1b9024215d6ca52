from dataclasses import FrozenInstanceError, replace

import pytest

from trackpace.core.errors import InvalidInputError
from trackpace.core.plan import PaceSource, RunParameters, derive_plan
from trackpace.core.splits import BasisMode


def test_speed_source_derives_pace_and_time():
    plan = derive_plan(RunParameters(distance_m=800, source=PaceSource.speed, value=15.0))
    assert plan.speed_kmh == 15.0
    assert plan.pace_s_per_km == pytest.approx(240.0)
    assert plan.total_time_s == pytest.approx(192.0)
    assert plan.lane_factor == 1.0
    assert len(plan.splits) == 8
    assert plan.finish_time_s == pytest.approx(192.0)


def test_pace_source_is_echoed_untouched():
    plan = derive_plan(RunParameters(distance_m=800, source=PaceSource.pace, value=247.0))
    assert plan.pace_s_per_km == 247.0
    assert plan.speed_kmh == pytest.approx(3600 / 247.0)


def test_time_source_is_echoed_untouched():
    plan = derive_plan(RunParameters(distance_m=800, source=PaceSource.time, value=192.0))
    assert plan.total_time_s == 192.0
    assert plan.speed_kmh == pytest.approx(15.0)
    assert plan.pace_s_per_km == pytest.approx(240.0)


def test_lane_changes_finish_time_not_nominal_total():
    base = RunParameters(distance_m=400, source=PaceSource.speed, value=12.0, basis_m=200)
    lane8 = derive_plan(replace(base, lane=8))
    assert lane8.total_time_s == pytest.approx(120.0)
    assert lane8.finish_time_s == pytest.approx(136.1, abs=0.05)


def test_lap_mode_plan():
    params = RunParameters(
        distance_m=900, source=PaceSource.speed, value=15.0, mode=BasisMode.lap
    )
    plan = derive_plan(params)
    assert plan.splits[-1].label == "Finish"
    assert plan.finish_time_s == pytest.approx(216.0)


def test_parameters_are_immutable_and_recompute_wholesale():
    params = RunParameters(distance_m=800, source=PaceSource.speed, value=15.0)
    with pytest.raises(FrozenInstanceError):
        params.lane = 2  # type: ignore[misc]
    first = derive_plan(params)
    second = derive_plan(replace(params, distance_m=1000))
    assert first.splits[-1].mark == 800
    assert second.splits[-1].mark == 1000
    assert derive_plan(params) == first


@pytest.mark.parametrize(
    "source,value",
    [(PaceSource.speed, 0), (PaceSource.pace, -1), (PaceSource.time, 0)],
)
def test_invalid_source_value_rejected(source, value):
    with pytest.raises(InvalidInputError):
        derive_plan(RunParameters(distance_m=800, source=source, value=value))
