"""Team models for coaches and their swimmers."""

import secrets
import string
from datetime import datetime

from pydantic import BaseModel, field_validator

TEAM_CODE_LENGTH = 6
TEAM_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_team_code() -> str:
    """Generate a six-character join code (e.g. "K3Z9QA")."""
    return "".join(secrets.choice(TEAM_CODE_ALPHABET) for _ in range(TEAM_CODE_LENGTH))


class MemberRef(BaseModel):
    """User fields joined onto a team membership."""

    id: str
    name: str
    email: str | None = None
    avatar_url: str | None = None


class TeamMember(BaseModel):
    """A swimmer's membership in a team."""

    id: str | None = None
    team_id: str | None = None
    user_id: str
    joined_at: datetime | None = None
    user: MemberRef | None = None


class Team(BaseModel):
    """A coach's team. Swimmers join it with ``team_code``."""

    id: str | None = None
    name: str
    description: str | None = None
    logo_url: str | None = None
    team_code: str
    coach_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # Loaded with the team_members relation, not always present
    members: list[TeamMember] = []

    @field_validator("team_code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        v = v.strip().upper()
        if len(v) != TEAM_CODE_LENGTH or any(c not in TEAM_CODE_ALPHABET for c in v):
            raise ValueError(f"Team code must be {TEAM_CODE_LENGTH} letters or digits")
        return v

    def __str__(self) -> str:
        return self.name
