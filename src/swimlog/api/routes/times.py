"""Time entry API endpoints.

Single and bulk entry, history, and time comparison helpers.
"""

import math
from datetime import date

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from swimlog import get_logger
from swimlog.api.dependencies import TimeEntryServiceDep
from swimlog.models import TimeEntry, TimeEntryUpdate
from swimlog.services import (
    BulkImportResult,
    EntryForm,
    PerformanceData,
    build_performance,
    calculate_improvement,
    export_to_csv,
    filter_entries,
    group_by_date,
    is_personal_best,
    normalize_time,
)
from swimlog.services.entry_service import ENTRY_NOT_FOUND_MESSAGE, INVALID_TIME_MESSAGE

logger = get_logger(__name__)

router = APIRouter(prefix="/times", tags=["times"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================


class NormalizeRequest(BaseModel):
    """Raw time to normalize."""

    time: str


class NormalizeResponse(BaseModel):
    valid: bool
    time: str | None = None


class CompareRequest(BaseModel):
    """Current time against a previous time and/or a best time."""

    current: str
    previous: str | None = None
    best: str | None = None


class CompareResponse(BaseModel):
    improvement: float | None = None  # seconds, positive = faster
    personal_best: bool


class TimeEntryRequest(EntryForm):
    """Request body for recording one time."""

    swimmer_id: str
    team_id: str | None = None


class BulkImportRequest(BaseModel):
    """Request body for a bulk import."""

    swimmer_id: str
    team_id: str | None = None
    data: str


class DayGroup(BaseModel):
    """Times recorded on one day."""

    recorded_on: date | None
    entries: list[TimeEntry]


# =============================================================================
# HELPERS (no storage)
# =============================================================================


@router.post("/normalize", response_model=NormalizeResponse)
def normalize(data: NormalizeRequest) -> NormalizeResponse:
    """Validate a raw time and return its canonical form."""
    canonical = normalize_time(data.time)
    return NormalizeResponse(valid=canonical is not None, time=canonical)


@router.post("/compare", response_model=CompareResponse)
def compare(data: CompareRequest) -> CompareResponse:
    """Improvement over ``previous`` and personal-best check against ``best``."""
    improvement = None
    if data.previous:
        delta = calculate_improvement(data.current, data.previous)
        improvement = None if math.isnan(delta) else round(delta, 2)

    return CompareResponse(
        improvement=improvement,
        personal_best=is_personal_best(data.current, data.best),
    )


# =============================================================================
# CREATE
# =============================================================================


@router.post("", response_model=TimeEntry, status_code=status.HTTP_201_CREATED)
def create_time(data: TimeEntryRequest, service: TimeEntryServiceDep) -> TimeEntry:
    """Record one time from the entry form."""
    form = EntryForm(**data.model_dump(exclude={"swimmer_id", "team_id"}))
    result = service.add_entry(data.swimmer_id, form, data.team_id)

    if not result.success:
        if result.validation is not None and not result.validation.valid:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to add time entry: {result.error}",
        )

    return result.entry


@router.post("/bulk", response_model=BulkImportResult, status_code=status.HTTP_201_CREATED)
def bulk_import(data: BulkImportRequest, service: TimeEntryServiceDep) -> BulkImportResult:
    """Import many times from pasted comma-separated lines."""
    result = service.import_bulk(data.swimmer_id, data.data, data.team_id)

    if not result.success:
        if result.failed_count:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=result.message
            )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.message)

    return result


# =============================================================================
# READ
# =============================================================================


@router.get("", response_model=list[TimeEntry])
def list_times(
    service: TimeEntryServiceDep,
    swimmer_id: str = Query(..., description="Swimmer whose times to list"),
    team_id: str | None = Query(None, description="List the team's times instead"),
    search: str = Query("", description="Match swimmer name, stroke, or test set"),
    stroke: str | None = Query(None, description="Stroke filter, or 'All'"),
    distance: str | None = Query(None, description="Distance filter, or 'All'"),
) -> list[TimeEntry]:
    """List times, newest first, with the history screen's filters."""
    try:
        entries = service.list_entries(swimmer_id, team_id)
    except Exception as e:
        logger.error("times_list_error", swimmer_id=swimmer_id, team_id=team_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to load time entries: {e}",
        ) from e

    return filter_entries(entries, search=search, stroke=stroke, distance=distance)


@router.get("/performance", response_model=PerformanceData)
def performance(
    service: TimeEntryServiceDep,
    swimmer_id: str = Query(...),
) -> PerformanceData:
    """Personal bests and latest improvements per event for one swimmer."""
    entries = service.list_entries(swimmer_id)
    name = entries[0].swimmer_name if entries else ""
    return build_performance(name, entries)


@router.get("/export", response_class=PlainTextResponse)
def export_times(
    service: TimeEntryServiceDep,
    swimmer_id: str = Query(...),
    team_id: str | None = Query(None),
) -> str:
    """Export times as CSV text."""
    return export_to_csv(service.list_entries(swimmer_id, team_id))


@router.get("/by-date", response_model=list[DayGroup])
def times_by_date(
    service: TimeEntryServiceDep,
    swimmer_id: str = Query(...),
    team_id: str | None = Query(None),
) -> list[DayGroup]:
    """History grouped by the day each time was recorded, newest day first."""
    groups = group_by_date(service.list_entries(swimmer_id, team_id))
    return [DayGroup(recorded_on=day, entries=entries) for day, entries in groups.items()]


@router.get("/{entry_id}", response_model=TimeEntry)
def get_time(entry_id: str, service: TimeEntryServiceDep) -> TimeEntry:
    """Get a single time entry."""
    entry = service.get_entry(entry_id)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ENTRY_NOT_FOUND_MESSAGE)
    return entry


# =============================================================================
# UPDATE / DELETE
# =============================================================================


@router.patch("/{entry_id}", response_model=TimeEntry)
def update_time(entry_id: str, data: TimeEntryUpdate, service: TimeEntryServiceDep) -> TimeEntry:
    """Partial update - only provided fields are changed."""
    result = service.update_entry(entry_id, data)
    if not result.success:
        if result.error == ENTRY_NOT_FOUND_MESSAGE:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.error)
        if result.error == INVALID_TIME_MESSAGE:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update time entry: {result.error}",
        )
    return result.entry


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_time(entry_id: str, service: TimeEntryServiceDep) -> None:
    """Delete a time entry."""
    if not service.delete_entry(entry_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Time entry not found")
