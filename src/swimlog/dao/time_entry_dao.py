"""Data Access Object for practice time entries."""

from supabase import Client

from swimlog.dao.base import BaseDAO
from swimlog.models.time_entry import SwimmerRef, TimeEntry, TimeEntryCreate, TimeEntryUpdate

# Entry columns plus the swimmer's profile fields
SELECT_WITH_SWIMMER = "*, users (id, name, email)"


class TimeEntryDAO(BaseDAO[TimeEntry]):
    """DAO for the time_entries table."""

    table_name = "time_entries"
    model_class = TimeEntry

    def __init__(self, client: Client | None = None):
        super().__init__(client)

    def create_entry(self, entry: TimeEntryCreate) -> TimeEntry:
        """Insert an entry and return it with the swimmer joined.

        Args:
            entry: Validated insert payload

        Returns:
            The stored TimeEntry
        """
        inserted = self.table.insert(entry.model_dump(mode="json", exclude_none=True)).execute()
        row = inserted.data[0]

        joined = self.table.select(SELECT_WITH_SWIMMER).eq("id", row["id"]).execute()
        return self._to_model(joined.data[0] if joined.data else row)

    def get_entry(self, entry_id: str) -> TimeEntry | None:
        """Get one entry with the swimmer joined."""
        result = self.table.select(SELECT_WITH_SWIMMER).eq("id", entry_id).execute()
        if not result.data:
            return None
        return self._to_model(result.data[0])

    def list_entries(self, swimmer_id: str, team_id: str | None = None) -> list[TimeEntry]:
        """List entries, newest first.

        Args:
            swimmer_id: Swimmer whose own entries are listed
            team_id: When given, list the team's entries instead (coach view)

        Returns:
            List of TimeEntries
        """
        query = self.table.select(SELECT_WITH_SWIMMER)
        if team_id:
            query = query.eq("team_id", team_id)
        else:
            query = query.eq("swimmer_id", swimmer_id)

        result = query.order("created_at", desc=True).execute()
        return [self._to_model(row) for row in result.data]

    def update_entry(self, entry_id: str, updates: TimeEntryUpdate) -> TimeEntry | None:
        """Write the fields set on ``updates``. Returns None if the entry is missing."""
        return self.partial_update(entry_id, updates.model_dump(exclude_unset=True))

    def delete_entry(self, entry_id: str) -> bool:
        return self.delete(entry_id)

    def _to_model(self, row: dict) -> TimeEntry:
        """Convert a row (optionally with a joined ``users`` object) to a TimeEntry."""
        data = dict(row)
        swimmer = data.pop("users", None)
        return TimeEntry(
            **data,
            swimmer=SwimmerRef(**swimmer) if swimmer else None,
        )
