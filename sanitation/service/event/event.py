import logging
from datetime import date

import sanitation.config.config as configs
from sanitation.client.db.psql import session_scope
from sanitation.db.repository import events as event_repo
from sanitation.errors import NotFoundError, ValidationError
from sanitation.model.event.event_request import EventRequest
from sanitation.model.event.event_response import EventResponse, RegistrationResponse
from sanitation.service.validation import optional_text, require_text, require_user

logger = logging.getLogger(__name__)


def submit_event(user_id: str | None, req: EventRequest) -> EventResponse:
    owner = require_user(user_id)
    fields = {
        "name": require_text(req.name, "Event name", 3),
        "organizer": require_text(req.organizer, "Organizer", 2),
        "venue": require_text(req.venue, "Venue", 5),
        "date": req.date,
        "category": optional_text(req.category),
        "description": optional_text(req.description),
        "poster_url": optional_text(req.poster_url),
        "max_participants": req.max_participants,
    }
    if req.max_participants is not None and req.max_participants < 1:
        raise ValidationError("Max participants must be positive")

    with session_scope() as db:
        event = event_repo.insert_event(db, owner, fields)
        logger.info("event submitted id=%s user=%s approved=%s", event.id, owner, event.is_approved)
        return EventResponse.model_validate(event)


def list_events(upcoming: bool = False) -> list[EventResponse]:
    from_date = date.today() if upcoming else None
    with session_scope() as db:
        rows = event_repo.list_events(db, approved_only=configs.EVENTS_REQUIRE_APPROVAL, from_date=from_date)
        return [EventResponse.model_validate(row) for row in rows]


def register_for_event(user_id: str | None, event_id: int) -> RegistrationResponse:
    owner = require_user(user_id)
    with session_scope() as db:
        if event_repo.get_event(db, event_id) is None:
            raise NotFoundError("Event not found")
        registration = event_repo.insert_registration(db, owner, event_id, configs.REGISTRATION_STATUS)
        logger.info("event registration id=%s event=%s user=%s", registration.id, event_id, owner)
        return RegistrationResponse.model_validate(registration)


def cancel_registration(user_id: str | None, event_id: int) -> None:
    owner = require_user(user_id)
    with session_scope() as db:
        deleted = event_repo.delete_registration(db, owner, event_id)
    logger.info("event registration cancelled event=%s user=%s deleted=%s", event_id, owner, deleted)


def list_my_registrations(user_id: str | None) -> list[RegistrationResponse]:
    owner = require_user(user_id)
    with session_scope() as db:
        rows = event_repo.list_registrations_for_user(db, owner)
        return [RegistrationResponse.model_validate(row) for row in rows]
