"""
Food Ordering API — Auth and user schemas
"""
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, Field, field_validator

from foodorder.schemas.common import ApiModel
from foodorder.schemas.records import UserRecord

PHONE_PATTERN = r"^\+?[0-9][0-9\s\-()]{6,19}$"


class RegisterRequest(ApiModel):
    name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    phone: str | None = Field(None, pattern=PHONE_PATTERN)
    role: Literal["customer", "restaurant"] = "customer"
    addresses: list[str] = Field(default_factory=list)

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return value.lower()


class LoginRequest(ApiModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class RefreshRequest(BaseModel):
    refresh_token: str


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds


class UserUpdateRequest(ApiModel):
    name: str | None = Field(None, min_length=2, max_length=50)
    phone: str | None = Field(None, pattern=PHONE_PATTERN)
    addresses: list[str] | None = None


class UserBrief(ApiModel):
    id: str
    name: str
    email: str
    phone: str | None = None

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserBrief":
        return cls(id=user.id, name=user.name, email=user.email, phone=user.phone)


class UserOut(UserBrief):
    role: str
    addresses: list[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserOut":
        return cls.model_validate(user.model_dump(exclude={"password_hash"}))
