"""Base DAO with Supabase client connection."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from supabase import Client, create_client

from swimlog.config import get_settings

T = TypeVar("T", bound=BaseModel)


class SupabaseClient:
    """Lazily created Supabase client shared by DAOs that aren't given one."""

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """Get or create the client from settings."""
        if cls._instance is None:
            settings = get_settings()
            if not settings.has_supabase:
                raise RuntimeError(
                    "SUPABASE_URL and SUPABASE_KEY environment variables must be set"
                )
            cls._instance = create_client(
                settings.supabase_url,
                settings.supabase_key.get_secret_value(),
            )

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the shared client (tests, settings reload)."""
        cls._instance = None


class BaseDAO(Generic[T]):
    """Base Data Access Object with common row operations."""

    table_name: str
    model_class: type[T]

    def __init__(self, client: Client | None = None):
        """Initialize the DAO.

        Args:
            client: Supabase client. If not provided, uses the shared one.
        """
        self.client = client or SupabaseClient.get_client()

    @property
    def table(self):
        """Query builder for this DAO's table."""
        return self.client.table(self.table_name)

    def get_by_id(self, id: str) -> T | None:
        """Get a single record by ID, or None."""
        result = self.table.select("*").eq("id", id).execute()
        if not result.data:
            return None
        return self._to_model(result.data[0])

    def create(self, model: T) -> T:
        """Insert a record and return it as stored."""
        result = self.table.insert(self._to_db(model)).execute()
        return self._to_model(result.data[0])

    def partial_update(self, id: str, updates: dict[str, Any]) -> T | None:
        """Write only the given columns.

        Returns:
            The updated model, or None if no row has that ID
        """
        if not updates:
            return self.get_by_id(id)

        result = self.table.update(updates).eq("id", id).execute()
        if not result.data:
            return None
        return self._to_model(result.data[0])

    def delete(self, id: str) -> bool:
        """Delete by ID. Returns False if nothing was deleted."""
        result = self.table.delete().eq("id", id).execute()
        return len(result.data) > 0

    def _to_model(self, row: dict) -> T:
        """Convert a database row to a model. Override for joined columns."""
        return self.model_class(**row)

    def _to_db(self, model: T) -> dict:
        """Convert a model to a database row (JSON-safe, no None values)."""
        return model.model_dump(mode="json", exclude_none=True)
