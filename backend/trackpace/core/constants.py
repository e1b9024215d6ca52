"""Shared track and pacing constants.

Centralizes the geometry and conversion values used by the split
calculator so we can document and adjust them in one place.
"""

# Length of lane 1 on a standard outdoor track (meters)
STANDARD_LAP_M = 400.0

# Standard lane width (meters)
LANE_WIDTH_M = 1.22

# Lanes offered by the calculator; higher lanes are computed but not listed
TRACK_LANES = 8

SECONDS_PER_HOUR = 3600.0

# Default fixed-interval basis (meters)
DEFAULT_BASIS_M = 100.0

# Lap-fraction marks, as (fraction, label suffix)
LAP_FRACTIONS = (
    (0.25, "1/4"),
    (0.5, "1/2"),
    (0.75, "3/4"),
    (1.0, ""),
)

# A lap-fraction mark this close to the end coincides with it (meters)
FINISH_TOLERANCE_M = 0.1

FINISH_LABEL = "Finish"

APP_VERSION = "1.0.0"

# Upper bound on marks per split sheet
MAX_SPLITS = 10_000
