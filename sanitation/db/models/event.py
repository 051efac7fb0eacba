from sqlalchemy import Boolean, Column, Date, DateTime, Integer, String
from sqlalchemy.sql import func

from sanitation.db.session import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    organizer = Column(String, nullable=False)
    venue = Column(String, nullable=False)
    date = Column(Date, nullable=False, index=True)
    category = Column(String, nullable=True)
    description = Column(String, nullable=True)
    poster_url = Column(String, nullable=True)
    max_participants = Column(Integer, nullable=True)
    # Set by staff outside this service
    is_approved = Column(Boolean, default=False, nullable=False)
    created_by = Column(String(64), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
