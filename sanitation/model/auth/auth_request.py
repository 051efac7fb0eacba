from datetime import date
from pydantic import BaseModel, EmailStr, Field, model_validator
from typing import Literal, Optional


class SignInRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class SignUpRequest(BaseModel):
    first_name: str = Field(..., min_length=2)
    middle_name: Optional[str] = None
    last_name: str = Field(..., min_length=2)
    email: EmailStr
    password: str = Field(..., min_length=6)
    confirm_password: str
    address: str = Field(..., min_length=5)
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    role: Literal["citizen", "employee", "admin"] = "citizen"

    @model_validator(mode="after")
    def passwords_match(self) -> "SignUpRequest":
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self

    def profile_fields(self) -> dict:
        return {
            "first_name": self.first_name,
            "middle_name": self.middle_name or None,
            "last_name": self.last_name,
            "address": self.address,
            "date_of_birth": self.date_of_birth,
            "gender": self.gender or None,
            "email": str(self.email),
        }


class ProfileUpdateRequest(BaseModel):
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
