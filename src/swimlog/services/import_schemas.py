"""Pydantic schemas for entry forms and bulk imports."""

from enum import StrEnum

from pydantic import BaseModel, Field

from swimlog.models import Stroke, TimeEntry


class Severity(StrEnum):
    """Validation message severity."""

    ERROR = "error"
    WARNING = "warning"


class ValidationError(BaseModel):
    """A single validation error or warning."""

    field: str
    message: str
    severity: Severity = Severity.ERROR


class ValidationResult(BaseModel):
    """Outcome of validating one entry form."""

    valid: bool = True
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    def add_error(self, field: str, message: str) -> None:
        """Add an error; the form becomes invalid."""
        self.errors.append(ValidationError(field=field, message=message))
        self.valid = False

    def add_warning(self, field: str, message: str) -> None:
        """Add a warning (doesn't invalidate)."""
        self.warnings.append(
            ValidationError(field=field, message=message, severity=Severity.WARNING)
        )

    @property
    def first_error(self) -> str | None:
        """Message to show the user, if any."""
        return self.errors[0].message if self.errors else None


class EntryForm(BaseModel):
    """Raw values from the single-entry form.

    Values arrive as typed by the user; ``distance`` may still be text.
    """

    stroke: str = Stroke.FREESTYLE.value
    distance: int | str | None = None
    time: str = ""
    test_set: str = ""
    notes: str = ""


class EntryResult(BaseModel):
    """Result of adding or updating one time entry."""

    success: bool
    entry: TimeEntry | None = None
    time: str | None = None  # canonical time that was stored
    error: str | None = None
    validation: ValidationResult | None = None


class BulkTimeRow(BaseModel):
    """One accepted line of bulk input.

    Line format: Swimmer Name, Stroke, Distance, Time, Test Set, Notes (optional)
    """

    swimmer_name: str
    stroke: str
    distance: int = Field(gt=0)
    time: str  # canonical MM:SS.ss
    test_set: str
    notes: str = ""
    line_number: int = 0


class BulkParseResult(BaseModel):
    """Outcome of parsing a bulk text blob.

    Dropped lines are only counted, never itemized.
    """

    success: bool
    rows: list[BulkTimeRow] = []
    line_count: int = 0
    message: str | None = None

    @property
    def count(self) -> int:
        return len(self.rows)

    @property
    def skipped_count(self) -> int:
        return self.line_count - len(self.rows)


class BulkImportResult(BaseModel):
    """Outcome of persisting a bulk import."""

    success: bool
    count: int = 0  # rows stored
    line_count: int = 0
    skipped_count: int = 0  # lines dropped while parsing
    failed_count: int = 0  # accepted rows the store rejected
    message: str | None = None
    entries: list[TimeEntry] = []
