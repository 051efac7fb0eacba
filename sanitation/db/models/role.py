from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String
from sqlalchemy.sql import func

from sanitation.db.session import Base


class UserRole(Base):
    __tablename__ = "user_roles"
    __table_args__ = (
        CheckConstraint("role IN ('citizen', 'employee', 'admin')", name="user_roles_role_check"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), unique=True, nullable=False, index=True)
    # citizen | employee | admin
    role = Column(String, default="citizen", nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
