from pydantic import EmailStr, Field
from typing import Optional
from uuid import UUID

from app.common.schemas import CamelModel


class SignupRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    timezone: Optional[str] = None


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class AuthResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    expires_in_seconds: int
    user_id: UUID
    email: str
    timezone: str
