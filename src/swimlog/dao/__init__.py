"""Data Access Objects for swimlog database operations."""

from swimlog.dao.base import BaseDAO, SupabaseClient
from swimlog.dao.team_dao import TeamDAO
from swimlog.dao.time_entry_dao import TimeEntryDAO
from swimlog.dao.user_dao import UserDAO

__all__ = [
    # Base
    "BaseDAO",
    "SupabaseClient",
    # DAOs
    "TeamDAO",
    "TimeEntryDAO",
    "UserDAO",
]
