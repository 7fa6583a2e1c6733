"""User profile models."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, EmailStr


class UserRole(StrEnum):
    """Role chosen when the profile is created."""

    SWIMMER = "swimmer"
    COACH = "coach"


class UserProfile(BaseModel):
    """Row of the users table, 1:1 with the backend auth user."""

    id: str
    email: EmailStr
    name: str
    role: UserRole = UserRole.SWIMMER
    avatar_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_coach(self) -> bool:
        return self.role == UserRole.COACH

    @property
    def is_swimmer(self) -> bool:
        return self.role == UserRole.SWIMMER


class UserProfileUpdate(BaseModel):
    """Partial profile update."""

    name: str | None = None
    role: UserRole | None = None
    avatar_url: str | None = None
