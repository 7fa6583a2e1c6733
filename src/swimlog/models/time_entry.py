"""Time entry models for recorded practice times."""

from datetime import date, datetime

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class SwimmerRef(BaseModel):
    """Swimmer fields joined onto a time entry from the users table."""

    id: str
    name: str
    email: str | None = None


class TimeEntryCreate(BaseModel):
    """Insert payload for the time_entries table.

    ``time`` is expected to already be canonical (``MM:SS.ss``).
    """

    swimmer_id: str
    stroke: str
    distance: int = Field(gt=0)
    time: str
    test_set: str
    notes: str | None = None
    team_id: str | None = None

    @field_validator("stroke", "test_set")
    @classmethod
    def strip_required_strings(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("notes", "team_id")
    @classmethod
    def empty_to_none(cls, v: str | None) -> str | None:
        """Treat blank optional fields as missing."""
        if v is None:
            return None
        v = v.strip()
        return v if v else None


class TimeEntryUpdate(BaseModel):
    """Partial update for a time entry. Only set fields are written."""

    stroke: str | None = None
    distance: int | None = Field(default=None, gt=0)
    time: str | None = None
    test_set: str | None = None
    notes: str | None = None

    @field_validator("stroke", "distance", "time", "test_set")
    @classmethod
    def required_fields_not_cleared(
        cls, v: str | int | None, info: ValidationInfo
    ) -> str | int:
        """Required columns may be changed but not set to null or blank."""
        if v is None:
            raise ValueError("cannot be null")
        if isinstance(v, str):
            if not v.strip():
                raise ValueError("must not be empty")
            if info.field_name in ("stroke", "test_set"):
                return v.strip()
        return v


class TimeEntry(BaseModel):
    """A stored practice time.

    Example:
        TimeEntry(id="a1", swimmer_id="u1", stroke="Freestyle", distance=100,
                  time="01:02.45", test_set="Time Trial")
    """

    id: str | None = None
    swimmer_id: str
    stroke: str
    distance: int
    time: str  # canonical MM:SS.ss
    test_set: str
    notes: str | None = None
    team_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # Joined from users (only present on some queries)
    swimmer: SwimmerRef | None = None

    @property
    def swimmer_name(self) -> str:
        return self.swimmer.name if self.swimmer else ""

    @property
    def recorded_on(self) -> date | None:
        """Calendar date the entry was recorded."""
        return self.created_at.date() if self.created_at else None

    @property
    def event_key(self) -> tuple[str, int]:
        """(stroke, distance) grouping used for bests and improvements."""
        return (self.stroke, self.distance)
