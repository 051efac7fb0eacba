import logging

from sanitation.client.db.psql import session_scope
from sanitation.db.repository import contact as contact_repo
from sanitation.model.contact.contact_request import ContactRequest
from sanitation.model.contact.contact_response import ContactResponse
from sanitation.service.validation import require_text

logger = logging.getLogger(__name__)


def submit_contact_message(req: ContactRequest) -> ContactResponse:
    name = require_text(req.name, "Name")
    email = require_text(req.email, "Email")
    message = require_text(req.message, "Message")
    with session_scope() as db:
        contact = contact_repo.insert_contact_message(db, name, email, message)
        logger.info("contact message id=%s", contact.id)
        return ContactResponse.model_validate(contact)
