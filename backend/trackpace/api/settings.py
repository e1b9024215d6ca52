from fastapi import APIRouter

from trackpace.core.config import settings
from trackpace.core.constants import APP_VERSION, LANE_WIDTH_M, STANDARD_LAP_M, TRACK_LANES

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
def get_settings():
    """Calculator defaults shown on the settings screen."""
    return {
        "lane_width_m": LANE_WIDTH_M,
        "lap_distance_m": STANDARD_LAP_M,
        "lanes": TRACK_LANES,
        "default_basis_m": settings.default_basis_m,
        "default_lane": settings.default_lane,
        "version": APP_VERSION,
    }
