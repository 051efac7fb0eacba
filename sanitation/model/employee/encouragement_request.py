from pydantic import BaseModel, Field
from typing import Optional


class EncouragementRequest(BaseModel):
    username: str = Field(..., description="Name shown next to the rating")
    address: str
    rating: int = Field(..., description="Whole stars, 1 to 5")
    description: Optional[str] = None
