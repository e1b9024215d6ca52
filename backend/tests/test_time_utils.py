import pytest

from trackpace.core.share import share_text
from trackpace.core.splits import calculate_lap_splits, calculate_splits
from trackpace.core.time_utils import (
    format_pace,
    format_time,
    format_time_with_ms,
    parse_minutes_seconds,
)


def test_parse_minutes_seconds():
    assert parse_minutes_seconds("4:00") == 240.0
    assert parse_minutes_seconds("3:12.5") == 192.5
    assert parse_minutes_seconds("1:02:03") == 3723.0
    assert parse_minutes_seconds(" 75 ") == 75.0


@pytest.mark.parametrize("bad", ["", "abc", "4:75", "1:2:3:4", "-1:00"])
def test_parse_minutes_seconds_rejects_malformed(bad):
    with pytest.raises(ValueError):
        parse_minutes_seconds(bad)


def test_format_time():
    assert format_time(192.0) == "03:12.0"
    assert format_time(59.96) == "01:00.0"
    assert format_time(5.24) == "00:05.2"


def test_format_time_with_ms_truncates_hundredths():
    assert format_time_with_ms(192.0) == "03:12.00"
    assert format_time_with_ms(136.1) == "02:16.10"
    assert format_time_with_ms(24.999) == "00:24.99"
    assert format_time_with_ms(800 / (15 * 1000 / 3600)) == "03:12.00"


def test_format_pace():
    assert format_pace(240.0) == "4:00.0/km"
    assert format_pace(247.35) == "4:07.3/km"


def test_share_text_fixed_basis():
    text = share_text("Session 800m", 800, 15.0, 1, calculate_splits(800, 15.0, 1, 200))
    lines = text.splitlines()
    assert lines[0] == "Session 800m"
    assert lines[1] == "800m @ 15.00 km/h (4:00.0/km), lane 1"
    assert lines[2].startswith("200m")
    assert "48.00s" in lines[2]
    assert lines[-1] == "Finish: 03:12.00"


def test_share_text_lap_basis_includes_labels_and_date():
    text = share_text(
        "Track 900", 900, 15.0, 1, calculate_lap_splits(900, 15.0, 1),
        date_label="Oct 19, 2026 07:00:00",
    )
    assert text.splitlines()[0] == "Track 900 (Oct 19, 2026 07:00:00)"
    assert "400.0m 1 lap" in text
    assert "900.0m Finish" in text
