from datetime import date
from pydantic import BaseModel, ConfigDict
from typing import Optional


class UserInfo(BaseModel):
    id: str
    email: Optional[str] = None


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None


class SessionResponse(BaseModel):
    access_token: str
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    user: UserInfo


class SignUpResponse(BaseModel):
    user: Optional[UserInfo] = None
    message: str


class MeResponse(BaseModel):
    user: UserInfo
    profile: Optional[ProfileResponse] = None
    role: Optional[str] = None
