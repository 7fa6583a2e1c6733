"""Service for recording practice times from the entry forms.

Two input paths:
    - single entry: one form submission -> one stored time
    - bulk entry: a pasted multi-line blob, one comma-separated time per line

Validation and normalization are pure; storage goes through an injected
``TimeEntryStore`` (``TimeEntryDAO`` by default).
"""

import re
from typing import Protocol

from swimlog.logging import get_logger
from swimlog.models import STANDARD_DISTANCES, Stroke, TimeEntry, TimeEntryCreate, TimeEntryUpdate
from swimlog.services.import_schemas import (
    BulkImportResult,
    BulkParseResult,
    BulkTimeRow,
    EntryForm,
    EntryResult,
    ValidationResult,
)
from swimlog.services.time_formatter import (
    parse_time_to_standard_format,
    validate_time_input,
)

logger = get_logger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields"
INVALID_TIME_MESSAGE = "Please enter a valid time (e.g., 1:35.6, 24.5, or 12:40.98)"
INVALID_DISTANCE_MESSAGE = "Please enter a valid distance"
EMPTY_BULK_MESSAGE = "Please enter data to import"
NO_VALID_ENTRIES_MESSAGE = "No valid entries found. Please check the format."
ENTRY_NOT_FOUND_MESSAGE = "Time entry not found"
BULK_STORE_FAILED_MESSAGE = "Failed to import time entries"

BULK_DELIMITER = ","
BULK_MIN_FIELDS = 5

_LEADING_DIGITS = re.compile(r"\s*(\d+)", re.ASCII)


class TimeEntryStore(Protocol):
    """Storage the service hands validated entries to."""

    def create_entry(self, entry: TimeEntryCreate) -> TimeEntry: ...

    def get_entry(self, entry_id: str) -> TimeEntry | None: ...

    def list_entries(self, swimmer_id: str, team_id: str | None = None) -> list[TimeEntry]: ...

    def update_entry(self, entry_id: str, updates: TimeEntryUpdate) -> TimeEntry | None: ...

    def delete_entry(self, entry_id: str) -> bool: ...


def parse_distance(text: str) -> int | None:
    """Read a distance from its leading digits ("100", "100m" -> 100).

    Returns None when there are no leading digits or the value is zero.
    """
    match = _LEADING_DIGITS.match(text)
    if not match:
        return None
    distance = int(match.group(1))
    return distance if distance > 0 else None


def _clean_field(field: str) -> str:
    return field.strip().strip('"').strip()


def parse_bulk_text(text: str) -> BulkParseResult:
    """Parse pasted bulk input into validated rows.

    Each line is "Swimmer Name, Stroke, Distance, Time, Test Set[, Notes]".
    Lines with fewer than five fields, an empty required field, an invalid
    time or no usable distance are dropped without a per-line error.

    Args:
        text: Multi-line blob as pasted by the user

    Returns:
        BulkParseResult; ``success`` is False when the blob is empty or no
        line survived
    """
    if not text.strip():
        return BulkParseResult(success=False, message=EMPTY_BULK_MESSAGE)

    lines = text.strip().splitlines()
    rows: list[BulkTimeRow] = []

    for line_number, line in enumerate(lines, start=1):
        fields = [_clean_field(f) for f in line.split(BULK_DELIMITER)]
        if len(fields) < BULK_MIN_FIELDS:
            logger.debug("bulk_line_skipped", line_number=line_number, reason="too_few_fields")
            continue

        swimmer_name, stroke, distance_text, time_text, test_set = fields[:BULK_MIN_FIELDS]
        notes = fields[BULK_MIN_FIELDS] if len(fields) > BULK_MIN_FIELDS else ""

        if not all((swimmer_name, stroke, distance_text, time_text, test_set)):
            logger.debug("bulk_line_skipped", line_number=line_number, reason="missing_field")
            continue
        if not validate_time_input(time_text):
            logger.debug("bulk_line_skipped", line_number=line_number, reason="invalid_time")
            continue

        distance = parse_distance(distance_text)
        if distance is None:
            logger.debug("bulk_line_skipped", line_number=line_number, reason="invalid_distance")
            continue

        rows.append(
            BulkTimeRow(
                swimmer_name=swimmer_name,
                stroke=stroke,
                distance=distance,
                time=parse_time_to_standard_format(time_text),
                test_set=test_set,
                notes=notes,
                line_number=line_number,
            )
        )

    if not rows:
        return BulkParseResult(
            success=False, line_count=len(lines), message=NO_VALID_ENTRIES_MESSAGE
        )

    return BulkParseResult(
        success=True,
        rows=rows,
        line_count=len(lines),
        message=f"{len(rows)} time entries parsed",
    )


class TimeEntryService:
    """Validates form and bulk input and records times through a store."""

    def __init__(self, store: TimeEntryStore | None = None):
        if store is None:
            from swimlog.dao.time_entry_dao import TimeEntryDAO

            store = TimeEntryDAO()
        self.store = store

    # =========================================================================
    # Single entry
    # =========================================================================

    def prepare_entry(
        self, swimmer_id: str, form: EntryForm, team_id: str | None = None
    ) -> tuple[TimeEntryCreate | None, ValidationResult]:
        """Validate a form and build the insert payload.

        Args:
            swimmer_id: Swimmer the time belongs to
            form: Raw form values
            team_id: Optional team the time was recorded for

        Returns:
            Tuple of (payload or None when invalid, validation result)
        """
        result = ValidationResult()
        distance_text = "" if form.distance is None else str(form.distance).strip()

        if not distance_text or not form.time.strip() or not form.test_set.strip():
            result.add_error("form", REQUIRED_FIELDS_MESSAGE)
            return None, result

        if not validate_time_input(form.time):
            result.add_error("time", INVALID_TIME_MESSAGE)
            return None, result

        distance = parse_distance(distance_text)
        if distance is None:
            result.add_error("distance", INVALID_DISTANCE_MESSAGE)
        if not form.stroke.strip():
            result.add_error("stroke", "Please choose a stroke")
        if not result.valid:
            return None, result

        stroke = form.stroke.strip()
        if stroke not in {s.value for s in Stroke}:
            result.add_warning("stroke", f"Unrecognized stroke: {stroke}")
        if distance not in STANDARD_DISTANCES:
            result.add_warning("distance", f"Non-standard distance: {distance}m")

        payload = TimeEntryCreate(
            swimmer_id=swimmer_id,
            stroke=stroke,
            distance=distance,
            time=parse_time_to_standard_format(form.time),
            test_set=form.test_set,
            notes=form.notes,
            team_id=team_id,
        )
        return payload, result

    def add_entry(
        self, swimmer_id: str, form: EntryForm, team_id: str | None = None
    ) -> EntryResult:
        """Validate a form and store the time.

        Storage errors are logged and returned, not raised.
        """
        payload, validation = self.prepare_entry(swimmer_id, form, team_id)
        if payload is None:
            logger.info(
                "entry_rejected", swimmer_id=swimmer_id, error=validation.first_error
            )
            return EntryResult(success=False, error=validation.first_error, validation=validation)

        try:
            entry = self.store.create_entry(payload)
        except Exception as e:
            logger.error("entry_create_failed", swimmer_id=swimmer_id, error=str(e))
            return EntryResult(
                success=False,
                time=payload.time,
                error=str(e) or "Failed to add time entry",
                validation=validation,
            )

        logger.info(
            "entry_created",
            entry_id=entry.id,
            swimmer_id=swimmer_id,
            stroke=payload.stroke,
            distance=payload.distance,
            time=payload.time,
        )
        return EntryResult(success=True, entry=entry, time=payload.time, validation=validation)

    # =========================================================================
    # Bulk entry
    # =========================================================================

    def import_bulk(
        self, swimmer_id: str, text: str, team_id: str | None = None
    ) -> BulkImportResult:
        """Parse a bulk blob and store every accepted row for ``swimmer_id``.

        Rows the store rejects are logged and skipped. The import fails only
        when nothing parses or nothing could be stored.
        """
        parsed = parse_bulk_text(text)
        if not parsed.success:
            logger.info("bulk_import_rejected", swimmer_id=swimmer_id, reason=parsed.message)
            return BulkImportResult(
                success=False,
                line_count=parsed.line_count,
                skipped_count=parsed.skipped_count,
                message=parsed.message,
            )

        entries: list[TimeEntry] = []
        failed = 0
        for row in parsed.rows:
            payload = TimeEntryCreate(
                swimmer_id=swimmer_id,
                stroke=row.stroke,
                distance=row.distance,
                time=row.time,
                test_set=row.test_set,
                notes=row.notes,
                team_id=team_id,
            )
            try:
                entries.append(self.store.create_entry(payload))
            except Exception as e:
                failed += 1
                logger.warning(
                    "bulk_entry_failed",
                    line_number=row.line_number,
                    swimmer_name=row.swimmer_name,
                    error=str(e),
                )

        logger.info(
            "bulk_import_completed",
            swimmer_id=swimmer_id,
            count=len(entries),
            skipped=parsed.skipped_count,
            failed=failed,
        )

        if not entries:
            message = BULK_STORE_FAILED_MESSAGE
        else:
            message = f"{len(entries)} time entries imported successfully!"

        return BulkImportResult(
            success=bool(entries),
            count=len(entries),
            line_count=parsed.line_count,
            skipped_count=parsed.skipped_count,
            failed_count=failed,
            message=message,
            entries=entries,
        )

    # =========================================================================
    # Edit / list / delete
    # =========================================================================

    def update_entry(self, entry_id: str, updates: TimeEntryUpdate) -> EntryResult:
        """Apply a partial update. A new time must validate and is normalized."""
        if updates.time is not None:
            if not validate_time_input(updates.time):
                return EntryResult(success=False, error=INVALID_TIME_MESSAGE)
            updates = updates.model_copy(
                update={"time": parse_time_to_standard_format(updates.time)}
            )

        try:
            entry = self.store.update_entry(entry_id, updates)
        except Exception as e:
            logger.error("entry_update_failed", entry_id=entry_id, error=str(e))
            return EntryResult(success=False, error=str(e) or "Failed to update time entry")

        if entry is None:
            return EntryResult(success=False, error=ENTRY_NOT_FOUND_MESSAGE)

        logger.info(
            "entry_updated",
            entry_id=entry_id,
            updated_fields=list(updates.model_dump(exclude_unset=True).keys()),
        )
        return EntryResult(success=True, entry=entry, time=entry.time)

    def delete_entry(self, entry_id: str) -> bool:
        """Delete an entry. Returns False when missing or the store fails."""
        try:
            deleted = self.store.delete_entry(entry_id)
        except Exception as e:
            logger.error("entry_delete_failed", entry_id=entry_id, error=str(e))
            return False

        if deleted:
            logger.info("entry_deleted", entry_id=entry_id)
        return deleted

    def get_entry(self, entry_id: str) -> TimeEntry | None:
        return self.store.get_entry(entry_id)

    def list_entries(self, swimmer_id: str, team_id: str | None = None) -> list[TimeEntry]:
        """Entries for a team when ``team_id`` is given, else the swimmer's own."""
        return self.store.list_entries(swimmer_id, team_id)
