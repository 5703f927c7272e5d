"""Pydantic models for API request/response."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from domain.model.user import Role, User


class CamelModel(BaseModel):
    """JSON bodies use camelCase keys; Python code uses snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateUserRequest(CamelModel):
    """Request model for account registration."""
    email: EmailStr
    password: str = Field(..., min_length=8, description="Plain text password, at least 8 characters")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[Role] = Field(None, description="Defaults to USER")


class UserResponse(CamelModel):
    """Public view of an account. Never carries the password hash."""
    id: str = Field(..., description="User ID")
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Role
    active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(**user.to_public())


class LoginRequest(CamelModel):
    """Request model for login."""
    email: EmailStr
    password: str


class JwtResponse(CamelModel):
    """Response model for a successful login."""
    token: str
    type: str = Field("Bearer", description="Token type for the Authorization header")
    user_id: str
    email: str
    role: str


class TokenValidationRequest(CamelModel):
    token: str
