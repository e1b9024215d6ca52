from sqlalchemy import Column, Integer, String, DateTime, Float
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from trackpace.db import Base


class SavedSession(Base):
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String, nullable=False)

    # Calculator inputs the splits were derived from
    distance_m = Column(Float, nullable=False)
    speed_kmh = Column(Float, nullable=False)
    lane = Column(Integer, nullable=False, server_default="1")
    basis_m = Column(Float, nullable=False, server_default="100")
    mode = Column(String(10), nullable=False, server_default="fixed")  # fixed, lap

    # Lane-adjusted time at the final mark
    total_time_s = Column(Float, nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    splits = relationship(
        "SessionSplit",
        order_by="SessionSplit.idx",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
