import logging

from sqlalchemy import func, select

from sanitation.client.db.psql import session_scope
from sanitation.db.models import ComplaintCategory

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = (
    {
        "name": "Garbage Collection",
        "icon": "trash-2",
        "description": "Household and street waste pickup",
        "subcategories": ["Garbage Overflow", "Missed Collection", "Improper Dumping"],
    },
    {
        "name": "Public Hygiene",
        "icon": "sparkles",
        "description": "Public toilets and street cleaning",
        "subcategories": ["Public Toilet Issue", "Street Sweeping"],
    },
    {
        "name": "Drainage",
        "icon": "droplets",
        "description": "Blocked or overflowing drains",
        "subcategories": ["Drainage Problem", "Other"],
    },
)


def seed_categories() -> int:
    """Insert the default complaint categories into an empty table."""
    with session_scope() as db:
        if db.execute(select(func.count()).select_from(ComplaintCategory)).scalar_one():
            return 0
        for item in DEFAULT_CATEGORIES:
            db.add(ComplaintCategory(**item))
    logger.info("seeded %s complaint categories", len(DEFAULT_CATEGORIES))
    return len(DEFAULT_CATEGORIES)
