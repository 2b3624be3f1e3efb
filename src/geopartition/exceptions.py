"""Exception hierarchy for geopartition."""


class GeoPartitionError(Exception):
    """Base exception for all geopartition errors."""

    pass


class ConfigurationError(GeoPartitionError):
    """Invalid parameters given to a partitioner or setting."""

    def __init__(self, parameter: str, reason: str) -> None:
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"Invalid '{parameter}': {reason}")


class PartitionerNotImplementedError(GeoPartitionError, NotImplementedError):
    """Partitioner declares no predicate and no partition method."""

    def __init__(self, partitioner_name: str) -> None:
        self.partitioner_name = partitioner_name
        super().__init__(f"Partitioning with '{partitioner_name}' is not implemented")


class DomainError(GeoPartitionError):
    """Errors related to spatial domains."""

    pass


class InvalidDomainError(DomainError):
    """Coordinate data cannot form a domain."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid domain: {reason}")


class DomainIndexError(DomainError, IndexError):
    """Element index outside the domain."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Element index {index} out of range for domain of {size} elements")


class DimensionMismatchError(GeoPartitionError):
    """Domain and partitioner disagree on dimensionality."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Dimension mismatch: partitioner expects {expected}D coordinates, domain is {actual}D"
        )


class PartitionError(GeoPartitionError):
    """Errors related to building partitions."""

    pass


class InvalidPartitionError(PartitionError):
    """Subsets are not a disjoint, exhaustive cover of the domain."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid partition: {reason}")


class InvalidOrderError(PartitionError):
    """Explicit processing order is not a permutation of the domain indices."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid processing order: {reason}")
