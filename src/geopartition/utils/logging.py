"""Logging utilities for geopartition."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Handlers installed by the last configure_logging call
_installed_handlers: list[logging.Handler] = []


@dataclass
class PartitionStats:
    """Statistics from a partitioning run."""

    element_count: int = 0
    subset_count: int = 0
    evaluations: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate partitioning duration."""
        if self.start_time is not None and self.end_time is not None:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging on top of the standard library.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output entirely

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("geopartition")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class PartitionLogger:
    """Structured events for a single partitioning run."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger

    def log_partition_start(self, partitioner: str, element_count: int, ndim: int) -> None:
        """Log start of partitioning."""
        self._logger.debug(
            "Partitioning domain",
            partitioner=partitioner,
            elements=element_count,
            ndim=ndim,
        )

    def log_partition_complete(self, partitioner: str, stats: PartitionStats) -> None:
        """Log a finished partitioning run."""
        self._logger.info(
            "Partition complete",
            partitioner=partitioner,
            elements=stats.element_count,
            subsets=stats.subset_count,
            evaluations=stats.evaluations,
            duration_ms=round(stats.duration_seconds * 1000, 3),
        )

    def log_partition_error(self, partitioner: str, error: Exception) -> None:
        """Log a failed partitioning run."""
        self._logger.error(
            "Partitioning failed",
            partitioner=partitioner,
            error=str(error),
            error_type=type(error).__name__,
        )
