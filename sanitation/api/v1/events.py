from typing import List

from fastapi import APIRouter, Depends, Response

from sanitation.api.deps import current_user_id
from sanitation.model.event.event_request import EventRequest
from sanitation.model.event.event_response import EventResponse, RegistrationResponse
from sanitation.service.event import event as event_service

router = APIRouter(tags=["events"])


@router.get("/events", response_model=List[EventResponse])
def list_events(upcoming: bool = False):
    return event_service.list_events(upcoming=upcoming)


@router.post("/events", response_model=EventResponse, status_code=201)
def submit_event(req: EventRequest, user_id: str | None = Depends(current_user_id)):
    return event_service.submit_event(user_id, req)


@router.get("/events/registrations/mine", response_model=List[RegistrationResponse])
def my_registrations(user_id: str | None = Depends(current_user_id)):
    return event_service.list_my_registrations(user_id)


@router.post("/events/{event_id}/registration", response_model=RegistrationResponse, status_code=201)
def register(event_id: int, user_id: str | None = Depends(current_user_id)):
    return event_service.register_for_event(user_id, event_id)


@router.delete("/events/{event_id}/registration", status_code=204)
def cancel_registration(event_id: int, user_id: str | None = Depends(current_user_id)):
    event_service.cancel_registration(user_id, event_id)
    return Response(status_code=204)
