"""Text exports of time entries: CSV and a plain-text performance report."""

from datetime import date

from swimlog.models import TimeEntry
from swimlog.services.performance import event_label, personal_bests

CSV_HEADERS = ["Date", "Swimmer", "Stroke", "Distance (m)", "Time", "Test Set", "Notes"]


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def _entry_date(entry: TimeEntry) -> str:
    return entry.recorded_on.isoformat() if entry.recorded_on else ""


def export_to_csv(entries: list[TimeEntry]) -> str:
    """Render entries as CSV text (header line first, no trailing newline).

    Swimmer, test set, and notes are always quoted.
    """
    lines = [",".join(CSV_HEADERS)]
    for entry in entries:
        lines.append(
            ",".join(
                [
                    _entry_date(entry),
                    _quote(entry.swimmer_name),
                    entry.stroke,
                    str(entry.distance),
                    entry.time,
                    _quote(entry.test_set),
                    _quote(entry.notes or ""),
                ]
            )
        )
    return "\n".join(lines)


def generate_performance_report(
    entries: list[TimeEntry],
    swimmer_name: str | None = None,
    today: date | None = None,
) -> str:
    """Build a plain-text report, optionally for one swimmer.

    Args:
        entries: Entries to report on
        swimmer_name: Restrict to entries with this swimmer name
        today: Date printed in the header (defaults to today)

    Returns:
        Report text
    """
    if swimmer_name:
        entries = [e for e in entries if e.swimmer_name == swimmer_name]

    strokes = list(dict.fromkeys(e.stroke for e in entries))
    distances = list(dict.fromkeys(e.distance for e in entries))

    lines = [
        "Swimming Performance Report",
        f"Generated: {(today or date.today()).isoformat()}",
        "",
    ]
    if swimmer_name:
        lines.append(f"Swimmer: {swimmer_name}")
    lines.append(f"Total Times Recorded: {len(entries)}")
    lines.append(f"Strokes: {', '.join(strokes)}")
    lines.append(f"Distances: {', '.join(f'{d}m' for d in distances)}")

    bests = personal_bests(entries)
    if bests:
        lines.append("")
        lines.append("Personal Bests:")
        for (stroke, distance), entry in bests.items():
            lines.append(f"{event_label(stroke, distance)} - {entry.time}")

    lines.append("")
    lines.append("Detailed Times:")
    for entry in entries:
        lines.append(
            f"{_entry_date(entry)} - {entry.swimmer_name} - {entry.distance}m {entry.stroke}"
            f" - {entry.time} ({entry.test_set})"
        )

    return "\n".join(lines)
