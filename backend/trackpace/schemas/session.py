from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from trackpace.core.splits import BasisMode
from trackpace.schemas.calculator import CalculatorRequest, SplitRead


class SessionCreate(CalculatorRequest):
    """Save a calculated run. Splits are recomputed server-side."""

    name: Optional[str] = None  # defaults to "Session {distance}m"


class SessionRead(BaseModel):
    """Schema returned to the frontend when reading a saved session."""

    id: int
    name: str
    created_at: datetime
    distance_m: float
    speed_kmh: float
    lane: int
    basis_m: float
    mode: BasisMode
    total_time_s: float
    total_time: str  # 'MM:SS.cc'
    splits: list[SplitRead]


class SessionRename(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        return v


class SessionBulkDelete(BaseModel):
    ids: list[int]
