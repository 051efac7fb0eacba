import datetime as dt
from pydantic import BaseModel, ConfigDict
from typing import Optional


class EventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    organizer: str
    venue: str
    date: dt.date
    category: Optional[str] = None
    description: Optional[str] = None
    poster_url: Optional[str] = None
    max_participants: Optional[int] = None
    is_approved: bool


class RegisteredEvent(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    organizer: str
    date: dt.date
    venue: str
    category: Optional[str] = None


class RegistrationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    event_id: int
    status: Optional[str] = None
    created_at: dt.datetime
    event: Optional[RegisteredEvent] = None
