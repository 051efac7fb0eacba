from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from sanitation.db.models import Complaint, ComplaintCategory
from sanitation.db.repository.base import flush_or_raise


def get_category(db: Session, category_id: int) -> ComplaintCategory | None:
    return db.get(ComplaintCategory, category_id)


def list_categories(db: Session) -> list[ComplaintCategory]:
    return list(db.execute(select(ComplaintCategory).order_by(ComplaintCategory.name)).scalars())


def insert_complaint(db: Session, user_id: str, fields: dict[str, Any]) -> Complaint:
    complaint = Complaint(user_id=user_id, **fields)
    db.add(complaint)
    flush_or_raise(db)
    db.refresh(complaint)
    return complaint


def list_complaints_for_user(db: Session, user_id: str) -> list[Complaint]:
    stmt = (
        select(Complaint)
        .where(Complaint.user_id == user_id)
        .order_by(Complaint.created_at.desc(), Complaint.id.desc())
    )
    return list(db.execute(stmt).scalars())
