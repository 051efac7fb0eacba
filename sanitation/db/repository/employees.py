from typing import Any

from sqlalchemy import Float, cast, func, or_, select, update
from sqlalchemy.orm import Session

from sanitation.db.models import Employee, EmployeeEncouragement
from sanitation.db.repository.base import flush_or_raise
from sanitation.errors import AlreadyEncouragedError


def get_employee(db: Session, employee_id: int) -> Employee | None:
    return db.get(Employee, employee_id)


def list_active_employees(db: Session, zone: str | None = None, query: str | None = None) -> list[Employee]:
    stmt = select(Employee).where(Employee.is_active.is_(True))
    if zone:
        stmt = stmt.where(Employee.zone == zone)
    if query:
        needle = f"%{query.strip().lower()}%"
        stmt = stmt.where(or_(func.lower(Employee.name).like(needle), func.lower(Employee.job).like(needle)))
    stmt = stmt.order_by(func.coalesce(Employee.rating, 0.0).desc(), Employee.id.asc())
    return list(db.execute(stmt).scalars())


def insert_encouragement(db: Session, user_id: str, employee_id: int, fields: dict[str, Any]) -> EmployeeEncouragement:
    encouragement = EmployeeEncouragement(user_id=user_id, employee_id=employee_id, **fields)
    db.add(encouragement)
    flush_or_raise(db, AlreadyEncouragedError)
    db.refresh(encouragement)
    return encouragement


def apply_rating(db: Session, employee_id: int, rating: int) -> int:
    """Fold one rating into the employee's running mean in a single UPDATE.

    Both SET expressions read the pre-update row, so concurrent raters cannot
    overwrite each other's contribution. Returns the number of rows touched.
    """
    old_rating = cast(func.coalesce(Employee.rating, 0.0), Float)
    old_total = func.coalesce(Employee.total_ratings, 0)
    stmt = (
        update(Employee)
        .where(Employee.id == employee_id)
        .values(
            rating=(old_rating * old_total + rating) / (old_total + 1),
            total_ratings=old_total + 1,
        )
        .execution_options(synchronize_session=False)
    )
    return db.execute(stmt).rowcount or 0
