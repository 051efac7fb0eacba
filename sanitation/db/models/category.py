from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from sanitation.db.models.types import JsonDocument
from sanitation.db.session import Base


class ComplaintCategory(Base):
    __tablename__ = "complaint_categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=True)
    # Icon reference understood by the UI (e.g. "trash-2")
    icon = Column(String, nullable=True)
    # Ordered list of subcategory labels
    subcategories = Column(JsonDocument, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
