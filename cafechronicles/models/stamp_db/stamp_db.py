from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from cafechronicles.core.database import Base


class Stamp(Base):
    __tablename__ = "stamps"
    __table_args__ = (
        # One stamp per user, café and day window
        UniqueConstraint("user_id", "cafe_id", "claim_day", name="uq_stamps_user_cafe_day"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    cafe_id = Column(Integer, ForeignKey("cafes.id"), nullable=False, index=True)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)  # UTC, naive
    claim_day = Column(Date, nullable=False)

    verification_distance = Column(Integer, nullable=True)  # meters
    verification_method = Column(String(32), nullable=True)  # 'haversine' | 'google_maps'

    user = relationship("User", back_populates="stamps")
    cafe = relationship("Cafe", back_populates="stamps")
