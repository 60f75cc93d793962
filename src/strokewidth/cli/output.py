"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages. Everything goes to stderr;
stdout is reserved for the measurement rows.
"""

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

from strokewidth.io import TagRecord
from strokewidth.utils import MeasurementStats

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for font measurement.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Strokewidth[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(
    font_path: str, family: str, font_type: str, upm: int, locations: int
) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        family: Family name
        font_type: Font format type (e.g., "TrueType", "OpenType")
        upm: Units per em value
        locations: Number of design locations to measure
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font_type})")
    console.print(line1)
    plural = "location" if locations == 1 else "locations"
    console.print(f"  {family} {SYM_DOT} {upm:,} UPM {SYM_DOT} {locations} {plural}")


def print_records(records: list[TagRecord]) -> None:
    """Write measurement rows to stdout."""
    for record in records:
        typer.echo(record.to_csv())


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_written(path: str) -> None:
    line = Text(f"  {SYM_OK} ")
    line.append(path, style="bold")
    console.print(line)


def print_summary(stats: MeasurementStats) -> None:
    """Print a summary of a measurement run.

    Args:
        stats: Statistics collected during the run
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}"
    )
    error_style = "red" if stats.error_count > 0 else "green"
    console.print(
        f"  {stats.measured_count} measured {SYM_DOT} {stats.skipped_count} skipped {SYM_DOT} "
        f"{stats.no_data_count} without data {SYM_DOT} "
        f"[{error_style}]{stats.error_count} errors[/{error_style}]"
    )
    if stats.avg_measure_time_ms is not None:
        console.print(f"  {stats.avg_measure_time_ms:.1f}ms avg per location")


def print_warning(message: str) -> None:
    console.print(f"  [yellow]![/yellow] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
