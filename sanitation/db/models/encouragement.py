from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.sql import func

from sanitation.db.session import Base


class EmployeeEncouragement(Base):
    __tablename__ = "employee_encouragements"
    __table_args__ = (
        UniqueConstraint("user_id", "employee_id", name="employee_encouragements_user_employee_key"),
    )

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(64), nullable=False, index=True)
    username = Column(String, nullable=True)
    address = Column(String, nullable=True)
    # 1..5
    rating = Column(Integer, nullable=True)
    description = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
