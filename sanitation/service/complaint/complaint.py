import logging

from sanitation.client.db.psql import session_scope
from sanitation.db.repository import complaints as complaint_repo
from sanitation.errors import SelectionRequiredError
from sanitation.model.complaint.complaint_request import ComplaintRequest
from sanitation.model.complaint.complaint_response import CategoryResponse, ComplaintResponse
from sanitation.service.validation import optional_text, require_text, require_user

logger = logging.getLogger(__name__)


def submit_complaint(user_id: str | None, req: ComplaintRequest) -> ComplaintResponse:
    owner = require_user(user_id)
    subcategory = optional_text(req.subcategory)
    if req.category_id is None or subcategory is None:
        raise SelectionRequiredError()
    address = require_text(req.address, "Address")

    fields = {
        "category_id": req.category_id,
        "subcategory": subcategory,
        "title": optional_text(req.title) or subcategory,
        "description": optional_text(req.description),
        "address": address,
        "zone": optional_text(req.zone),
        "latitude": req.latitude,
        "longitude": req.longitude,
        "photo_url": optional_text(req.photo_url),
        "reason": [r.strip() for r in req.reason or [] if r and r.strip()],
        "status": "pending",
    }
    with session_scope() as db:
        complaint = complaint_repo.insert_complaint(db, owner, fields)
        logger.info("complaint submitted id=%s user=%s", complaint.id, owner)
        return ComplaintResponse.model_validate(complaint)


def list_my_complaints(user_id: str | None) -> list[ComplaintResponse]:
    owner = require_user(user_id)
    with session_scope() as db:
        rows = complaint_repo.list_complaints_for_user(db, owner)
        return [ComplaintResponse.model_validate(row) for row in rows]


def list_categories() -> list[CategoryResponse]:
    with session_scope() as db:
        return [
            CategoryResponse(
                id=row.id,
                name=row.name,
                description=row.description,
                icon=row.icon,
                subcategories=list(row.subcategories or []),
            )
            for row in complaint_repo.list_categories(db)
        ]
