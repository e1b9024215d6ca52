import pytest

from trackpace.core.conversions import (
    pace_from_speed,
    speed_from_pace,
    speed_from_total_time,
    total_time_from_speed,
)
from trackpace.core.errors import InvalidInputError


def test_800m_at_15kmh_pace_and_total_time():
    assert pace_from_speed(15.0) == pytest.approx(240.0)
    assert total_time_from_speed(800, 15.0) == pytest.approx(192.0)


def test_speed_from_pace_and_from_total_time():
    assert speed_from_pace(240.0) == pytest.approx(15.0)
    assert speed_from_total_time(800, 192.0) == pytest.approx(15.0)
    assert speed_from_total_time(5000, 20 * 60) == pytest.approx(15.0)


@pytest.mark.parametrize("speed", [0.5, 9.87, 15.0, 21.1, 36.0])
def test_pace_speed_round_trip(speed):
    assert speed_from_pace(pace_from_speed(speed)) == pytest.approx(speed, rel=1e-12)


def test_derived_values_are_not_rounded():
    # 4:07/km is 14.5748... km/h; rounding to 2 places would lose this
    assert speed_from_pace(247.0) == pytest.approx(3600 / 247.0, rel=1e-15)


@pytest.mark.parametrize("pace", [0, -240, float("nan")])
def test_non_positive_pace_rejected(pace):
    with pytest.raises(InvalidInputError):
        speed_from_pace(pace)


def test_non_positive_time_or_distance_rejected():
    with pytest.raises(InvalidInputError):
        speed_from_total_time(800, 0)
    with pytest.raises(InvalidInputError):
        speed_from_total_time(0, 192)
    with pytest.raises(InvalidInputError):
        total_time_from_speed(800, 0)
    with pytest.raises(InvalidInputError):
        pace_from_speed(-1)
