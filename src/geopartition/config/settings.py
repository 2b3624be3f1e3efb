"""Configuration settings for geopartition."""

from pathlib import Path

import numpy as np
from pydantic import BaseModel, Field


class PartitionConfig(BaseModel):
    """Configuration for partitioning runs."""

    tolerance: float = Field(
        default=1e-6,
        ge=0.0,
        description="Default tolerance for geometric predicates",
    )
    seed: int | None = Field(
        default=None,
        ge=0,
        description="Seed for the processing order permutation (None = fresh entropy)",
    )

    def make_rng(self) -> np.random.Generator:
        """Create the random generator used to draw processing orders.

        Returns:
            Generator seeded with `seed`, or from fresh entropy when unset
        """
        return np.random.default_rng(self.seed)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (None = no file output)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GeoPartitionSettings(BaseModel):
    """Main application settings."""

    partition: PartitionConfig = Field(default_factory=PartitionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GeoPartitionSettings:
    """Get default application settings."""
    return GeoPartitionSettings()


DEFAULT_TOLERANCE: float = PartitionConfig().tolerance
