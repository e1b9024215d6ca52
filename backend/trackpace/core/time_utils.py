import math


def parse_minutes_seconds(value: str) -> float:
    """
    Convert 'M:SS.s' (or 'H:MM:SS.s') -> total seconds (float).
    Example: '4:00' -> 240.0, '3:12.5' -> 192.5
    A bare number is taken as seconds.
    """
    s = value.strip()
    if s == "":
        raise ValueError("Time must not be empty")

    parts = s.split(":")
    if len(parts) > 3:
        raise ValueError("Time must be in M:SS or H:MM:SS format")
    try:
        numbers = [float(p) for p in parts]
    except ValueError:
        raise ValueError("Time must be in M:SS or H:MM:SS format")
    if any(n < 0 or not math.isfinite(n) for n in numbers):
        raise ValueError("Time components must be non-negative")
    if len(numbers) > 1 and numbers[-1] >= 60:
        raise ValueError("Seconds must be below 60")

    total = 0.0
    for n in numbers:
        total = total * 60 + n
    return total


def format_time(seconds: float) -> str:
    """
    Format seconds -> 'MM:SS.s'.
    Example: 192.0 -> '03:12.0'
    """
    mins = int(seconds // 60)
    secs = seconds - mins * 60
    text = f"{secs:04.1f}"
    # 59.96 rounds up to '60.0'; carry into the minutes
    if text == "60.0":
        mins += 1
        text = "00.0"
    return f"{mins:02d}:{text}"


def format_time_with_ms(seconds: float) -> str:
    """
    Format seconds -> 'MM:SS.cc' (hundredths are truncated, not rounded).
    Example: 136.1 -> '02:16.10'
    """
    hundredths = int(math.floor(seconds * 100 + 1e-6))
    mins, rest = divmod(hundredths, 6000)
    secs, cc = divmod(rest, 100)
    return f"{mins:02d}:{secs:02d}.{cc:02d}"


def format_pace(pace_s_per_km: float) -> str:
    """
    Format pace seconds per km -> 'M:SS.s/km'.
    Example: 240.0 -> '4:00.0/km'
    """
    mins = int(pace_s_per_km // 60)
    secs = pace_s_per_km - mins * 60
    text = f"{secs:04.1f}"
    if text == "60.0":
        mins += 1
        text = "00.0"
    return f"{mins}:{text}/km"
