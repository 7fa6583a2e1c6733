"""Swimlog CLI application.

Usage:
    swimlog normalize 1:35.6
    swimlog compare 1:00.00 1:02.00 --best 59.80
    swimlog bulk times.txt --dry-run
    swimlog bulk times.txt --swimmer-id <uuid>
    swimlog report times.txt --swimmer "John Doe"
"""

import math
from pathlib import Path

import typer
from dotenv import load_dotenv

# Load .env file for Supabase credentials
load_dotenv()
from rich.console import Console  # noqa: E402
from rich.markup import escape  # noqa: E402
from rich.table import Table  # noqa: E402

from swimlog import configure_logging  # noqa: E402
from swimlog.models import SwimmerRef, TimeEntry  # noqa: E402
from swimlog.services import (  # noqa: E402
    BulkParseResult,
    calculate_improvement,
    generate_performance_report,
    is_personal_best,
    normalize_time,
    parse_bulk_text,
)

console = Console()
app = typer.Typer(
    name="swimlog",
    help="Swim practice time log CLI",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Record and review swim practice times."""
    configure_logging("DEBUG" if verbose else "WARNING")


# =============================================================================
# TIME HELPERS
# =============================================================================


@app.command("normalize")
def normalize(
    time: str = typer.Argument(..., help="Time as typed, e.g. 1:35.6 or 24.5"),
):
    """Print the canonical MM:SS.ss form of a time."""
    canonical = normalize_time(time)
    if canonical is None:
        console.print(f"[red]Invalid time: '{escape(time)}'[/red]")
        console.print("[dim]Examples: 1:35.6, 24.5, 12:40.98[/dim]")
        raise typer.Exit(1)
    console.print(canonical)


@app.command("compare")
def compare(
    current: str = typer.Argument(..., help="Current time"),
    previous: str = typer.Argument(..., help="Previous time"),
    best: str = typer.Option(None, "--best", "-b", help="Personal best to check against"),
):
    """Show the improvement from PREVIOUS to CURRENT."""
    delta = calculate_improvement(current, previous)
    if math.isnan(delta):
        console.print("[red]Could not read one of the times[/red]")
        raise typer.Exit(1)

    if delta > 0:
        console.print(f"[green]{delta:.2f}s faster[/green]")
    elif delta < 0:
        console.print(f"[yellow]{-delta:.2f}s slower[/yellow]")
    else:
        console.print("No change")

    if is_personal_best(current, best):
        console.print("[bold green]Personal best![/bold green]")


# =============================================================================
# BULK IMPORT
# =============================================================================


def _read_bulk_file(path: Path) -> str:
    if not path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8-sig")


def _preview_table(parsed: BulkParseResult) -> Table:
    table = Table(title=f"{parsed.count} of {parsed.line_count} lines accepted")
    table.add_column("Line", style="dim")
    table.add_column("Swimmer")
    table.add_column("Stroke")
    table.add_column("Distance", justify="right")
    table.add_column("Time", justify="right")
    table.add_column("Test Set")
    table.add_column("Notes")

    for row in parsed.rows[:25]:
        table.add_row(
            str(row.line_number),
            row.swimmer_name,
            row.stroke,
            f"{row.distance}m",
            row.time,
            row.test_set,
            row.notes or "-",
        )
    return table


@app.command("bulk")
def bulk(
    path: Path = typer.Argument(..., help="Text file, one time per line"),
    swimmer_id: str = typer.Option(None, "--swimmer-id", "-s", help="Swimmer to record times for"),
    team_id: str = typer.Option(None, "--team-id", "-t", help="Team the times belong to"),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Validate only, don't import"),
):
    """Import times from a bulk text file.

    Line format: Swimmer Name, Stroke, Distance, Time, Test Set, Notes (optional)

    Example:
        swimlog bulk times.txt --dry-run
        swimlog bulk times.txt --swimmer-id 2b6f...
    """
    text = _read_bulk_file(path)
    parsed = parse_bulk_text(text)
    if not parsed.success:
        console.print(f"[red]{parsed.message}[/red]")
        raise typer.Exit(1)

    console.print(_preview_table(parsed))
    if parsed.skipped_count:
        console.print(f"[yellow]Skipped {parsed.skipped_count} lines[/yellow]")

    if dry_run:
        console.print("\n[dim]Dry run - nothing imported[/dim]")
        return

    if not swimmer_id:
        console.print("[red]--swimmer-id is required to import[/red]")
        raise typer.Exit(1)

    from swimlog.services import TimeEntryService

    try:
        service = TimeEntryService()
    except RuntimeError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from None

    with console.status("Importing..."):
        result = service.import_bulk(swimmer_id, text, team_id)

    if not result.success:
        console.print(f"[red]{result.message}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]{result.message}[/green]")
    if result.failed_count:
        console.print(f"[red]Failed to store {result.failed_count} entries[/red]")


@app.command("report")
def report(
    path: Path = typer.Argument(..., help="Text file, one time per line"),
    swimmer: str = typer.Option(None, "--swimmer", help="Only this swimmer's times"),
):
    """Print a performance report for the times in a bulk file."""
    parsed = parse_bulk_text(_read_bulk_file(path))
    if not parsed.success:
        console.print(f"[red]{parsed.message}[/red]")
        raise typer.Exit(1)

    entries = [
        TimeEntry(
            swimmer_id="",
            stroke=row.stroke,
            distance=row.distance,
            time=row.time,
            test_set=row.test_set,
            notes=row.notes or None,
            swimmer=SwimmerRef(id="", name=row.swimmer_name),
        )
        for row in parsed.rows
    ]
    console.print(
        generate_performance_report(entries, swimmer_name=swimmer), markup=False, highlight=False
    )


if __name__ == "__main__":
    app()
