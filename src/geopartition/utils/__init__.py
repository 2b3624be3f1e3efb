"""Utility functions for geopartition.

This module provides utility functions including:

- Logging setup and configuration
- Partitioning statistics
"""

from geopartition.utils.logging import (
    PartitionLogger,
    PartitionStats,
    configure_logging,
)

__all__ = [
    "PartitionLogger",
    "PartitionStats",
    "configure_logging",
]
