from pydantic import BaseModel, Field
from typing import List, Optional


class ComplaintRequest(BaseModel):
    category_id: Optional[int] = Field(None, description="Selected complaint category")
    subcategory: Optional[str] = Field(None, description="Selected subcategory label")
    address: str = Field(..., description="Where the issue is")
    title: Optional[str] = None
    description: Optional[str] = None
    zone: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    reason: Optional[List[str]] = None
    photo_url: Optional[str] = None
