"""Shared fixtures: an in-memory time entry store and sample entries."""

from datetime import UTC, datetime, timedelta

import pytest

from swimlog.config import get_settings
from swimlog.models import SwimmerRef, TimeEntry, TimeEntryCreate, TimeEntryUpdate


class InMemoryTimeEntryStore:
    """TimeEntryStore backed by a dict.

    ``create_entry`` raises for any entry whose test set is in ``fail_test_sets``.
    """

    def __init__(self, fail_test_sets: set[str] | None = None):
        self.entries: dict[str, TimeEntry] = {}
        self.fail_test_sets = fail_test_sets or set()
        self._counter = 0
        self._start = datetime(2025, 1, 14, 7, 0, tzinfo=UTC)

    def create_entry(self, entry: TimeEntryCreate) -> TimeEntry:
        if entry.test_set in self.fail_test_sets:
            raise RuntimeError("insert failed")
        self._counter += 1
        created_at = self._start + timedelta(hours=self._counter)
        stored = TimeEntry(
            id=f"entry-{self._counter}",
            created_at=created_at,
            updated_at=created_at,
            swimmer=SwimmerRef(id=entry.swimmer_id, name="Test Swimmer"),
            **entry.model_dump(),
        )
        self.entries[stored.id] = stored
        return stored

    def get_entry(self, entry_id: str) -> TimeEntry | None:
        return self.entries.get(entry_id)

    def list_entries(self, swimmer_id: str, team_id: str | None = None) -> list[TimeEntry]:
        if team_id:
            matches = [e for e in self.entries.values() if e.team_id == team_id]
        else:
            matches = [e for e in self.entries.values() if e.swimmer_id == swimmer_id]
        return sorted(matches, key=lambda e: e.created_at, reverse=True)

    def update_entry(self, entry_id: str, updates: TimeEntryUpdate) -> TimeEntry | None:
        existing = self.entries.get(entry_id)
        if existing is None:
            return None
        updated = existing.model_copy(update=updates.model_dump(exclude_unset=True))
        self.entries[entry_id] = updated
        return updated

    def delete_entry(self, entry_id: str) -> bool:
        return self.entries.pop(entry_id, None) is not None


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def swimmer_id() -> str:
    return "9b2f6c1e-swimmer"


@pytest.fixture
def team_id() -> str:
    return "4d1a7e0c-team"


@pytest.fixture
def sample_blob() -> str:
    """One valid line followed by a line with too few fields."""
    return (
        "John Doe, Freestyle, 100, 1:02.45, Time Trial, Great technique\n"
        "Bad Row, OnlyThreeFields, 50"
    )


@pytest.fixture
def store() -> InMemoryTimeEntryStore:
    return InMemoryTimeEntryStore()


@pytest.fixture
def failing_store():
    """Factory for a store that rejects the given test sets."""

    def _make(*test_sets: str) -> InMemoryTimeEntryStore:
        return InMemoryTimeEntryStore(fail_test_sets=set(test_sets))

    return _make


def _make_entry(
    time: str,
    stroke: str = "Freestyle",
    distance: int = 100,
    day: int = 14,
    hour: int = 7,
    swimmer: str = "John Doe",
    test_set: str = "Time Trial",
    notes: str | None = None,
) -> TimeEntry:
    swimmer_ref = swimmer.lower().replace(" ", "-")
    return TimeEntry(
        id=f"{swimmer_ref}-{stroke}-{distance}-{day}-{hour}",
        swimmer_id=swimmer_ref,
        stroke=stroke,
        distance=distance,
        time=time,
        test_set=test_set,
        notes=notes,
        created_at=datetime(2025, 1, day, hour, 0, tzinfo=UTC),
        swimmer=SwimmerRef(id=swimmer_ref, name=swimmer),
    )


@pytest.fixture
def make_entry():
    """Factory for a stored-looking entry recorded on 2025-01-<day>."""
    return _make_entry


@pytest.fixture
def history() -> list[TimeEntry]:
    """A short practice history across two swimmers, newest first."""
    return [
        _make_entry("01:02.45", day=16, test_set="Time Trial"),
        _make_entry(
            "02:25.12", stroke="Backstroke", distance=200, day=16,
            swimmer="Jane Smith", test_set="Distance Set",
        ),
        _make_entry("00:28.67", distance=50, day=15, test_set="Sprint Set"),
        _make_entry("01:02.77", day=15, hour=6, test_set="Time Trial"),
        _make_entry("01:03.10", day=14, test_set="Time Trial", notes="Tired"),
    ]
