"""Speed / pace / finish time conversions (metric only).

speed is km/h, pace is seconds per km, total time is seconds for a given
distance in meters. Each helper takes one quantity as authoritative and
derives another from it; none of them round.
"""

from trackpace.core.constants import SECONDS_PER_HOUR
from trackpace.core.errors import require_positive


def speed_from_pace(pace_s_per_km: float) -> float:
    """4:00/km (240 s) -> 15.0 km/h"""
    pace_s_per_km = require_positive("pace", pace_s_per_km)
    return SECONDS_PER_HOUR / pace_s_per_km


def speed_from_total_time(distance_m: float, total_time_s: float) -> float:
    """800 m in 192 s -> 15.0 km/h"""
    distance_m = require_positive("distance_m", distance_m)
    total_time_s = require_positive("total_time", total_time_s)
    return (distance_m / total_time_s) * 3.6


def pace_from_speed(speed_kmh: float) -> float:
    speed_kmh = require_positive("speed_kmh", speed_kmh)
    return SECONDS_PER_HOUR / speed_kmh


def total_time_from_speed(distance_m: float, speed_kmh: float) -> float:
    distance_m = require_positive("distance_m", distance_m)
    speed_kmh = require_positive("speed_kmh", speed_kmh)
    return distance_m / ((speed_kmh * 1000) / 3600)
