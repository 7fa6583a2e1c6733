"""Pydantic models for swimlog."""

from swimlog.models.stroke import STANDARD_DISTANCES, Stroke
from swimlog.models.team import MemberRef, Team, TeamMember, generate_team_code
from swimlog.models.time_entry import (
    SwimmerRef,
    TimeEntry,
    TimeEntryCreate,
    TimeEntryUpdate,
)
from swimlog.models.user import UserProfile, UserProfileUpdate, UserRole

__all__ = [
    # Stroke
    "STANDARD_DISTANCES",
    "Stroke",
    # Team
    "MemberRef",
    "Team",
    "TeamMember",
    "generate_team_code",
    # Time entry
    "SwimmerRef",
    "TimeEntry",
    "TimeEntryCreate",
    "TimeEntryUpdate",
    # User
    "UserProfile",
    "UserProfileUpdate",
    "UserRole",
]
