import logging

from sanitation.client.db.psql import session_scope
from sanitation.db.repository import employees as employee_repo
from sanitation.errors import NotFoundError, ValidationError
from sanitation.model.employee.employee_response import EmployeeResponse, EncouragementResponse
from sanitation.model.employee.encouragement_request import EncouragementRequest
from sanitation.service.validation import optional_text, require_text, require_user

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def validate_rating(rating) -> int:
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise ValidationError("Rating must be a whole number between 1 and 5")
    if rating < MIN_RATING or rating > MAX_RATING:
        raise ValidationError("Rating must be between 1 and 5")
    return rating


def submit_encouragement(user_id: str | None, employee_id: int, req: EncouragementRequest) -> EncouragementResponse:
    """Record one citizen's rating for an employee and fold it into the running mean.

    The insert and the aggregate update share one transaction. A repeat rating
    by the same user fails on the unique (user, employee) constraint during the
    insert flush, so the aggregate is never touched in that case.
    """
    owner = require_user(user_id)
    rating = validate_rating(req.rating)
    fields = {
        "username": require_text(req.username, "Name"),
        "address": require_text(req.address, "Address"),
        "rating": rating,
        "description": optional_text(req.description),
    }

    with session_scope() as db:
        employee = employee_repo.get_employee(db, employee_id)
        if employee is None:
            raise NotFoundError("Employee not found")
        encouragement = employee_repo.insert_encouragement(db, owner, employee_id, fields)
        if employee_repo.apply_rating(db, employee_id, rating) != 1:
            raise NotFoundError("Employee not found")
        db.refresh(employee)
        logger.info(
            "encouragement id=%s employee=%s rating=%s new_mean=%s total=%s",
            encouragement.id,
            employee_id,
            rating,
            employee.rating,
            employee.total_ratings,
        )
        return EncouragementResponse(
            id=encouragement.id,
            employee_id=employee_id,
            username=encouragement.username,
            rating=rating,
            description=encouragement.description,
            created_at=encouragement.created_at,
            employee=_employee_response(employee),
        )


def list_employees(zone: str | None = None, query: str | None = None) -> list[EmployeeResponse]:
    with session_scope() as db:
        rows = employee_repo.list_active_employees(db, zone=optional_text(zone), query=optional_text(query))
        return [_employee_response(row) for row in rows]


def _employee_response(employee) -> EmployeeResponse:
    return EmployeeResponse(
        id=employee.id,
        employee_id=employee.employee_id,
        name=employee.name,
        job=employee.job,
        zone=employee.zone,
        main_area=employee.main_area,
        age=employee.age,
        photo_url=employee.photo_url,
        rating=employee.rating or 0.0,
        total_ratings=employee.total_ratings or 0,
    )
