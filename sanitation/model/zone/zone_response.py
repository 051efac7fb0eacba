from pydantic import BaseModel
from typing import List, Literal


class PickupSlot(BaseModel):
    day: str
    time: str
    type: Literal["wet", "dry", "both"]


class ZoneResponse(BaseModel):
    id: int
    name: str
    areas: List[str]
    schedule: List[PickupSlot]
