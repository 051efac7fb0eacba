from pydantic import BaseModel
from typing import Optional


class AssistantRequest(BaseModel):
    question: str
    topic: Optional[str] = None
