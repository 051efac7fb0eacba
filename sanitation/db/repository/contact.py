from sqlalchemy.orm import Session

from sanitation.db.models import ContactMessage
from sanitation.db.repository.base import flush_or_raise


def insert_contact_message(db: Session, name: str, email: str, message: str) -> ContactMessage:
    contact = ContactMessage(name=name, email=email, message=message, is_read=False)
    db.add(contact)
    flush_or_raise(db)
    db.refresh(contact)
    return contact
