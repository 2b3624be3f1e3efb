"""CLI application entry point for geopartition.

This module provides the main CLI interface using Typer. Points are given
on the command line; the CLI reads no files.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from geopartition import __version__
from geopartition.cli.output import (
    console,
    print_domain_info,
    print_error,
    print_header,
    print_partition_table,
    print_step,
    print_success,
)
from geopartition.config import GeoPartitionSettings, LoggingConfig, PartitionConfig
from geopartition.core import DirectionPartition, Partitioner, PlanePartition, partition
from geopartition.domain import PointSet
from geopartition.exceptions import GeoPartitionError
from geopartition.utils import PartitionLogger, PartitionStats, configure_logging

# Create the Typer app
app = typer.Typer(
    name="geopartition",
    help="Partition point sets into disjoint subsets with geometric predicates.",
    add_completion=False,
    no_args_is_help=True,
)

PointsOption = Annotated[
    list[str] | None,
    typer.Option(
        "--point",
        "-p",
        help="Point coordinates as comma-separated numbers (repeat for each point)",
        show_default=False,
    ),
]
TolOption = Annotated[
    float,
    typer.Option("--tol", "-t", help="Predicate tolerance"),
]
SeedOption = Annotated[
    int | None,
    typer.Option("--seed", "-s", help="Seed for the processing order (default: random)"),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write a detailed log to this file"),
]
LogLevelOption = Annotated[
    str,
    typer.Option("--log-level", help="Console log level"),
]
QuietOption = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Only print the subset table"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]geopartition[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Partition point sets into disjoint subsets with geometric predicates."""


def parse_vector(text: str) -> tuple[float, ...]:
    """Parse ``"x,y[,z...]"`` into a tuple of floats.

    Raises:
        ValueError: If a component is not a number
    """
    parts = [p.strip() for p in text.split(",")]
    if not all(parts):
        raise ValueError(f"empty component in '{text}'")
    return tuple(float(p) for p in parts)


def _run(
    points: list[str] | None,
    make_partitioner: Callable[[float], Partitioner],
    settings_args: dict,
    quiet: bool,
) -> None:
    if not points:
        print_error("No points given", details="Pass --point x,y once for every point.")
        raise typer.Exit(code=1)

    try:
        settings = GeoPartitionSettings(
            partition=PartitionConfig(
                tolerance=settings_args["tol"],
                seed=settings_args["seed"],
            ),
            logging=LoggingConfig(
                log_file=settings_args["log_file"],
                log_level=settings_args["log_level"],
            ),
        )
    except ValidationError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1)

    try:
        domain = PointSet([parse_vector(p) for p in points])
        partitioner = make_partitioner(settings.partition.tolerance)
    except ValueError as e:
        print_error(f"Could not parse coordinates: {e}")
        raise typer.Exit(code=1)
    except GeoPartitionError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    partition_logger = PartitionLogger(logger)

    if not quiet:
        print_header(__version__)
        print_step("Partitioning")
        print_domain_info(domain.element_count(), domain.ndim, repr(partitioner))

    stats = PartitionStats()
    partition_logger.log_partition_start(repr(partitioner), domain.element_count(), domain.ndim)
    try:
        result = partition(domain, partitioner, rng=settings.partition.make_rng(), stats=stats)
    except GeoPartitionError as e:
        partition_logger.log_partition_error(repr(partitioner), e)
        print_error(str(e))
        raise typer.Exit(code=1)
    partition_logger.log_partition_complete(repr(partitioner), stats)

    if not quiet:
        print_step("Subsets")
    print_partition_table(result)
    if not quiet:
        print_success(stats)


@app.command()
def plane(
    point: PointsOption = None,
    normal: Annotated[
        str,
        typer.Option("--normal", "-n", help="Plane normal as comma-separated numbers"),
    ] = "1,0",
    tol: TolOption = 1e-6,
    seed: SeedOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Group points lying in the same hyperplane orthogonal to NORMAL."""
    try:
        normal_vec = parse_vector(normal)
    except ValueError as e:
        print_error(f"Could not parse normal: {e}")
        raise typer.Exit(code=1)

    _run(
        point,
        lambda t: PlanePartition(normal_vec, tol=t),
        {"tol": tol, "seed": seed, "log_file": log_file, "log_level": log_level},
        quiet,
    )


@app.command()
def direction(
    point: PointsOption = None,
    along: Annotated[
        str,
        typer.Option("--along", "-a", help="Line direction as comma-separated numbers"),
    ] = "1,0",
    tol: TolOption = 1e-6,
    seed: SeedOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Group points lying on a common line parallel to ALONG."""
    try:
        along_vec = parse_vector(along)
    except ValueError as e:
        print_error(f"Could not parse direction: {e}")
        raise typer.Exit(code=1)

    _run(
        point,
        lambda t: DirectionPartition(along_vec, tol=t),
        {"tol": tol, "seed": seed, "log_file": log_file, "log_level": log_level},
        quiet,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
