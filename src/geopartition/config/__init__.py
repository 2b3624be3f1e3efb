"""Configuration management for geopartition.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- PartitionConfig: Predicate tolerance and processing order seed
- LoggingConfig: Logging settings
- GeoPartitionSettings: Main application settings
"""

from geopartition.config.settings import (
    DEFAULT_TOLERANCE,
    GeoPartitionSettings,
    LoggingConfig,
    PartitionConfig,
    get_default_settings,
)

__all__ = [
    "DEFAULT_TOLERANCE",
    "GeoPartitionSettings",
    "LoggingConfig",
    "PartitionConfig",
    "get_default_settings",
]
