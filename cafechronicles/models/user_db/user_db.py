from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from cafechronicles.core.database import Base
from datetime import datetime


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    stamps = relationship("Stamp", back_populates="user")
