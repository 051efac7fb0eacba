from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.sql import func

from sanitation.db.models.types import StringList
from sanitation.db.session import Base


class Complaint(Base):
    __tablename__ = "complaints"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'in_progress', 'resolved', 'rejected')",
            name="complaints_status_check",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    # Account id issued by the auth provider
    user_id = Column(String(64), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("complaint_categories.id"), nullable=True)
    subcategory = Column(String, nullable=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    address = Column(String, nullable=False)
    zone = Column(String, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    photo_url = Column(String, nullable=True)
    reason = Column(StringList, nullable=True)
    # pending | in_progress | resolved | rejected
    status = Column(String, default="pending", nullable=False)
    assigned_employee_id = Column(Integer, nullable=True)
    resolved_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
