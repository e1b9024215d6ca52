"""Plain-text export of a split table, for sharing a session."""

from typing import Optional, Sequence

from trackpace.core.conversions import pace_from_speed
from trackpace.core.splits import Split
from trackpace.core.time_utils import format_pace, format_time_with_ms


def share_text(
    name: str,
    distance_m: float,
    speed_kmh: float,
    lane: int,
    splits: Sequence[Split],
    date_label: Optional[str] = None,
) -> str:
    """Render a session like:

        Session 800m (Oct 19, 2026 07:00)
        800m @ 15.00 km/h (4:00.0/km), lane 1
        100m    24.00s  00:24.00
        ...
        Finish: 03:12.00

    Lap-fraction splits are listed with their lane-adjusted mark and label.
    """
    header = name if not date_label else f"{name} ({date_label})"
    lines = [
        header,
        f"{distance_m:g}m @ {speed_kmh:.2f} km/h ({format_pace(pace_from_speed(speed_kmh))}), lane {lane}",
    ]
    for s in splits:
        label = s.label
        mark = f"{s.mark:g}m" if not label else f"{s.mark:.1f}m {label}"
        lines.append(f"{mark:<18}{s.interval:>8.2f}s  {format_time_with_ms(s.running)}")
    if splits:
        lines.append(f"Finish: {format_time_with_ms(splits[-1].running)}")
    return "\n".join(lines)
