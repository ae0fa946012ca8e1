"""
Pydantic schemas for user-related request/response validation.

`UserPublic` is the only shape in which a user leaves the service layer:
it has no password field, so anything built from it cannot leak one.
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from eventhub.models.user import User, UserRole


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)


class UserPublic(BaseModel):
    id: str
    name: str
    email: str
    role: UserRole
    created_at: datetime

    model_config = {"from_attributes": True}

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def to_public(user: User) -> UserPublic:
    return UserPublic.model_validate(user)
