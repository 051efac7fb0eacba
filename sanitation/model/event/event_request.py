import datetime as dt
from pydantic import BaseModel, Field
from typing import Optional


class EventRequest(BaseModel):
    name: str = Field(..., description="At least 3 characters")
    organizer: str = Field(..., description="At least 2 characters")
    venue: str = Field(..., description="At least 5 characters")
    date: dt.date
    category: Optional[str] = None
    description: Optional[str] = None
    poster_url: Optional[str] = None
    max_participants: Optional[int] = None
