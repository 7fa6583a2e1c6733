"""Personal bests, improvements, and history views over time entries."""

import math
from datetime import date

from pydantic import BaseModel

from swimlog.models import TimeEntry
from swimlog.services.time_formatter import (
    calculate_improvement,
    is_personal_best,
    parse_time,
)

ALL = "All"

EventKey = tuple[str, int]


def event_label(stroke: str, distance: int) -> str:
    """Display label for a (stroke, distance) pair, e.g. "100m Freestyle"."""
    return f"{distance}m {stroke}"


def _recorded_sort_key(entry: TimeEntry) -> float:
    return entry.created_at.timestamp() if entry.created_at else float("-inf")


def personal_bests(entries: list[TimeEntry]) -> dict[EventKey, TimeEntry]:
    """Fastest entry per (stroke, distance).

    Entries whose time cannot be read are ignored. On ties the earlier entry
    in ``entries`` is kept.
    """
    bests: dict[EventKey, TimeEntry] = {}
    for entry in entries:
        if math.isnan(parse_time(entry.time)):
            continue
        current = bests.get(entry.event_key)
        if is_personal_best(entry.time, current.time if current else None):
            bests[entry.event_key] = entry
    return bests


def improvements(entries: list[TimeEntry]) -> dict[EventKey, float]:
    """Seconds gained on the latest swim versus the one before it.

    Only (stroke, distance) pairs with at least two entries are included.
    Positive means the latest swim was faster.
    """
    grouped: dict[EventKey, list[TimeEntry]] = {}
    for entry in entries:
        grouped.setdefault(entry.event_key, []).append(entry)

    result: dict[EventKey, float] = {}
    for key, group in grouped.items():
        if len(group) < 2:
            continue
        ordered = sorted(group, key=_recorded_sort_key)
        previous, latest = ordered[-2], ordered[-1]
        result[key] = round(calculate_improvement(latest.time, previous.time), 2)
    return result


class PerformanceData(BaseModel):
    """A swimmer's times with bests and improvements keyed by event label."""

    swimmer: str
    times: list[TimeEntry] = []
    personal_bests: dict[str, TimeEntry] = {}
    improvements: dict[str, float] = {}


def build_performance(swimmer: str, entries: list[TimeEntry]) -> PerformanceData:
    """Collect bests and improvements for one swimmer's entries."""
    return PerformanceData(
        swimmer=swimmer,
        times=entries,
        personal_bests={event_label(*k): v for k, v in personal_bests(entries).items()},
        improvements={event_label(*k): v for k, v in improvements(entries).items()},
    )


def filter_entries(
    entries: list[TimeEntry],
    search: str = "",
    stroke: str | None = None,
    distance: int | str | None = None,
) -> list[TimeEntry]:
    """Filter history the way the history screen does.

    Args:
        entries: Entries to filter
        search: Case-insensitive match on swimmer name, stroke, or test set
        stroke: Exact stroke, or None / "All" for any
        distance: Exact distance, or None / "All" for any

    Returns:
        Matching entries in their original order
    """
    needle = search.strip().lower()
    filtered = []
    for entry in entries:
        if needle and not (
            needle in entry.swimmer_name.lower()
            or needle in entry.stroke.lower()
            or needle in entry.test_set.lower()
        ):
            continue
        if stroke not in (None, ALL) and entry.stroke != stroke:
            continue
        if distance not in (None, ALL) and str(entry.distance) != str(distance):
            continue
        filtered.append(entry)
    return filtered


def group_by_date(entries: list[TimeEntry]) -> dict[date | None, list[TimeEntry]]:
    """Group entries by the day they were recorded, keeping input order."""
    groups: dict[date | None, list[TimeEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.recorded_on, []).append(entry)
    return groups
