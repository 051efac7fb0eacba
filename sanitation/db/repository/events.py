from datetime import date
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from sanitation.db.models import Event, EventRegistration
from sanitation.db.repository.base import flush_or_raise
from sanitation.errors import AlreadyRegisteredError


def insert_event(db: Session, created_by: str, fields: dict[str, Any]) -> Event:
    event = Event(created_by=created_by, is_approved=False, **fields)
    db.add(event)
    flush_or_raise(db)
    db.refresh(event)
    return event


def get_event(db: Session, event_id: int) -> Event | None:
    return db.get(Event, event_id)


def list_events(db: Session, approved_only: bool, from_date: date | None = None) -> list[Event]:
    stmt = select(Event)
    if approved_only:
        stmt = stmt.where(Event.is_approved.is_(True))
    if from_date is not None:
        stmt = stmt.where(Event.date >= from_date)
    stmt = stmt.order_by(Event.date.asc(), Event.id.asc())
    return list(db.execute(stmt).scalars())


def insert_registration(db: Session, user_id: str, event_id: int, status: str) -> EventRegistration:
    registration = EventRegistration(user_id=user_id, event_id=event_id, status=status)
    db.add(registration)
    flush_or_raise(db, AlreadyRegisteredError)
    db.refresh(registration)
    return registration


def delete_registration(db: Session, user_id: str, event_id: int) -> int:
    stmt = delete(EventRegistration).where(
        EventRegistration.user_id == user_id,
        EventRegistration.event_id == event_id,
    )
    return db.execute(stmt).rowcount or 0


def list_registrations_for_user(db: Session, user_id: str) -> list[EventRegistration]:
    stmt = (
        select(EventRegistration)
        .where(EventRegistration.user_id == user_id)
        .order_by(EventRegistration.created_at.desc(), EventRegistration.id.desc())
    )
    return list(db.execute(stmt).unique().scalars())
