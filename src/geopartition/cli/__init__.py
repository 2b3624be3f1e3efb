"""Command-line interface for geopartition.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Plane and direction partitioning of points given on the command line
- Subset table output
- Quiet mode and optional log file
"""

from geopartition.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
