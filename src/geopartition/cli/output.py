"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from geopartition.core import SpatialPartition
from geopartition.utils import PartitionStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

MAX_LISTED_INDICES = 12


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]geopartition[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_domain_info(element_count: int, ndim: int, partitioner: str) -> None:
    """Print the domain and strategy being partitioned."""
    line = Text("  ")
    line.append(partitioner)
    console.print(line)
    console.print(f"  {element_count:,} points {SYM_DOT} {ndim}D")


def _format_indices(indices: tuple[int, ...]) -> str:
    shown = ", ".join(str(i) for i in indices[:MAX_LISTED_INDICES])
    if len(indices) > MAX_LISTED_INDICES:
        shown += f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(indices) - MAX_LISTED_INDICES} more)"
    return shown


def print_partition_table(result: SpatialPartition) -> None:
    """Print one row per subset with its size and member indices.

    Args:
        result: Partition to display
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("subset", justify="right")
    table.add_column("size", justify="right")
    table.add_column("indices")

    for number, subset in enumerate(result.subsets):
        table.add_row(str(number), str(len(subset)), _format_indices(subset))

    console.print(table)


def print_success(stats: PartitionStats) -> None:
    """Print summary line after partitioning.

    Args:
        stats: Statistics of the run
    """
    duration_ms = stats.duration_seconds * 1000
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {duration_ms:.1f}ms")
    console.print(
        f"  {stats.element_count} points {SYM_DOT} {stats.subset_count} subsets {SYM_DOT} "
        f"{stats.evaluations} evaluations"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Text keeps brackets in messages from being parsed as markup
    line = Text("\n")
    line.append(f"{SYM_ERR} Error:", style="bold red")
    line.append(f" {message}")
    console.print(line, soft_wrap=True)
    if details:
        console.print(Text(f"  {details}"), soft_wrap=True)
