from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import Optional


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    employee_id: str
    name: str
    job: str
    zone: str
    main_area: Optional[str] = None
    age: Optional[int] = None
    photo_url: Optional[str] = None
    rating: float = 0.0
    total_ratings: int = 0


class EncouragementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    employee_id: int
    username: Optional[str] = None
    rating: int
    description: Optional[str] = None
    created_at: datetime
    employee: EmployeeResponse
