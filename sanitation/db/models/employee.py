from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String
from sqlalchemy.sql import func

from sanitation.db.session import Base


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    # Municipal staff code, e.g. "NMC-SW-0042"
    employee_id = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    job = Column(String, nullable=False)
    zone = Column(String, nullable=False)
    main_area = Column(String, nullable=True)
    age = Column(Integer, nullable=True)
    photo_url = Column(String, nullable=True)
    # Running mean of all encouragement ratings; only the encouragement flow writes it
    rating = Column(Float, default=0.0, nullable=True)
    total_ratings = Column(Integer, default=0, nullable=True)
    is_active = Column(Boolean, default=True, nullable=True)
    user_id = Column(String(64), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
