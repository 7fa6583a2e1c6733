"""FastAPI dependencies for dependency injection.

Usage in routes:
    from swimlog.api.dependencies import TimeEntryServiceDep

    @router.get("/times")
    def list_times(swimmer_id: str, service: TimeEntryServiceDep):
        return service.list_entries(swimmer_id)
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from supabase import Client, create_client

from swimlog.config import Settings, get_settings
from swimlog.dao.team_dao import TeamDAO
from swimlog.dao.time_entry_dao import TimeEntryDAO
from swimlog.dao.user_dao import UserDAO
from swimlog.services.entry_service import TimeEntryService


def get_settings_dep() -> Settings:
    """Get application settings (dependency wrapper)."""
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_settings_dep)]


@lru_cache
def get_supabase_client(supabase_url: str, supabase_key: str) -> Client:
    """Create cached Supabase client."""
    return create_client(supabase_url, supabase_key)


def get_supabase(settings: SettingsDep) -> Client:
    """Get Supabase client for database operations."""
    if not settings.has_supabase:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database is not configured",
        )
    return get_supabase_client(
        settings.supabase_url,
        settings.supabase_key.get_secret_value(),
    )


SupabaseDep = Annotated[Client, Depends(get_supabase)]


def get_time_entry_dao(client: SupabaseDep) -> TimeEntryDAO:
    """Get TimeEntryDAO instance."""
    return TimeEntryDAO(client)


def get_team_dao(client: SupabaseDep) -> TeamDAO:
    """Get TeamDAO instance."""
    return TeamDAO(client)


def get_user_dao(client: SupabaseDep) -> UserDAO:
    """Get UserDAO instance."""
    return UserDAO(client)


TimeEntryDAODep = Annotated[TimeEntryDAO, Depends(get_time_entry_dao)]
TeamDAODep = Annotated[TeamDAO, Depends(get_team_dao)]
UserDAODep = Annotated[UserDAO, Depends(get_user_dao)]


def get_time_entry_service(store: TimeEntryDAODep) -> TimeEntryService:
    """Get TimeEntryService backed by the request's DAO."""
    return TimeEntryService(store)


TimeEntryServiceDep = Annotated[TimeEntryService, Depends(get_time_entry_service)]
