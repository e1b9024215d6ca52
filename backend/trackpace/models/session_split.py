from sqlalchemy import Column, Integer, ForeignKey, Float, String
from trackpace.db import Base


class SessionSplit(Base):
    __tablename__ = "session_splits"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("sessions.id", ondelete="CASCADE"), nullable=False, index=True)

    idx = Column(Integer, nullable=False)  # 1-based split index
    mark_m = Column(Float, nullable=False)
    label = Column(String, nullable=True)  # lap-fraction mode only
    interval_s = Column(Float, nullable=False)
    running_s = Column(Float, nullable=False)
