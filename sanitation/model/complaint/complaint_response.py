from datetime import datetime
from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class ComplaintResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    category_id: Optional[int] = None
    subcategory: Optional[str] = None
    title: str
    description: Optional[str] = None
    address: str
    zone: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    photo_url: Optional[str] = None
    reason: Optional[List[str]] = None
    status: str
    created_at: datetime
    updated_at: Optional[datetime] = None


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    subcategories: List[str] = []
