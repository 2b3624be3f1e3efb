"""Unit tests for the greedy partitioning algorithm.

Tests cover:
- Dispatch on predicate shape and the unimplemented base partitioner
- Representative-only comparison and first-seen subset order
- Processing order (explicit orders, seeded generators)
- Dimension mismatch detection
- Statistics
"""

import numpy as np
import pytest

from geopartition.core import (
    CoordinatePredicatePartitioner,
    IndexPredicatePartitioner,
    Partitioner,
    PlanePartition,
    as_generator,
    partition,
    processing_order,
)
from geopartition.domain import PointSet
from geopartition.exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    InvalidOrderError,
    PartitionerNotImplementedError,
)
from geopartition.utils import PartitionStats


class Always(IndexPredicatePartitioner):
    def __call__(self, i, j):
        return True


class Never(IndexPredicatePartitioner):
    def __call__(self, i, j):
        return False


class RecordingIndex(IndexPredicatePartitioner):
    """Groups indices by parity and records every comparison."""

    def __init__(self):
        self.calls = []

    def __call__(self, i, j):
        self.calls.append((i, j))
        return i % 2 == j % 2


class FirstCoordinateBand(CoordinatePredicatePartitioner):
    """Groups points whose first coordinates differ by less than 1."""

    def __init__(self):
        self.calls = []

    def __call__(self, x, y):
        self.calls.append((x.copy(), y.copy()))
        return abs(x[0] - y[0]) < 1.0


@pytest.fixture
def line() -> PointSet:
    """Six points on the x axis."""
    return PointSet([(float(i), 0.0) for i in range(6)])


class TestDispatch:
    """Tests for strategy dispatch."""

    def test_base_partitioner_not_implemented(self, line):
        """The bare base strategy fails with a not-implemented error."""
        with pytest.raises(PartitionerNotImplementedError, match="Partitioner"):
            partition(line, Partitioner())

    def test_base_partition_method_not_implemented(self, line):
        """Calling partition on the base strategy directly also fails."""
        with pytest.raises(NotImplementedError):
            Partitioner().partition(line)

    def test_custom_subclass_without_implementation(self, line):
        """A subclass declaring nothing reports its own name."""

        class Declared(Partitioner):
            pass

        with pytest.raises(PartitionerNotImplementedError) as exc_info:
            partition(line, Declared())
        assert exc_info.value.partitioner_name == "Declared"

    def test_predicate_shapes_are_abstract(self):
        """Predicate bases cannot be instantiated without __call__."""
        with pytest.raises(TypeError):
            IndexPredicatePartitioner()  # type: ignore
        with pytest.raises(TypeError):
            CoordinatePredicatePartitioner()  # type: ignore

    def test_index_predicate_receives_indices(self, line):
        """Index predicates are called with (new element, representative)."""
        predicate = RecordingIndex()
        partition(line, predicate, order=[0, 1, 2, 3, 4, 5])
        assert all(isinstance(i, int) and isinstance(j, int) for i, j in predicate.calls)
        assert predicate.calls[0] == (1, 0)

    def test_coordinate_predicate_receives_coordinates(self, line):
        """Coordinate predicates are called with filled coordinate buffers."""
        predicate = FirstCoordinateBand()
        partition(line, predicate, order=[3, 0, 1, 2, 4, 5])
        x, y = predicate.calls[0]
        np.testing.assert_array_equal(x, [0.0, 0.0])
        np.testing.assert_array_equal(y, [3.0, 0.0])

    def test_method_form_matches_function_form(self, line):
        """partitioner.partition(domain) runs the same algorithm."""
        plane = PlanePartition((1.0, 0.0), tol=2.5)
        assert plane.partition(line, rng=7) == partition(line, plane, rng=7)


class TestGreedyAssignment:
    """Tests for bucket formation."""

    def test_always_true_single_subset(self, line):
        """An always-true predicate collapses everything into one subset."""
        p = partition(line, Always(), rng=1)
        assert len(p) == 1
        assert sorted(p.subsets[0]) == list(range(6))

    def test_always_false_singletons(self, line):
        """An always-false predicate separates every element."""
        p = partition(line, Never(), rng=1)
        assert len(p) == 6
        assert all(len(s) == 1 for s in p.subsets)

    def test_subset_order_follows_creation(self, line):
        """Subsets appear in the order their first element was visited."""
        p = partition(line, RecordingIndex(), order=[3, 0, 5, 2, 1, 4])
        assert p.subsets == ((3, 5, 1), (0, 2, 4))

    def test_compares_only_with_representatives(self, line):
        """Each newcomer is compared with subset[0] only, in creation order."""
        predicate = RecordingIndex()
        partition(line, predicate, order=[3, 0, 5, 2, 1, 4])
        assert predicate.calls == [
            (0, 3),
            (5, 3),
            (2, 3), (2, 0),
            (1, 3),
            (4, 3), (4, 0),
        ]

    def test_representative_not_updated(self):
        """A chain of close points is split once it drifts from the representative."""
        chain = PointSet([(0.0,), (0.6,), (1.2,), (1.8,)])
        p = partition(chain, FirstCoordinateBand(), order=[0, 1, 2, 3])
        # 0.6 joins 0.0; 1.2 is 1.2 away from representative 0.0
        assert p.subsets == ((0, 1), (2, 3))

    def test_fixed_order_is_deterministic(self, line):
        """The same order and predicate always give the same partition."""
        order = [5, 1, 3, 0, 2, 4]
        plane = PlanePartition((1.0, 0.0), tol=1.5)
        assert partition(line, plane, order=order) == partition(line, plane, order=order)

    def test_seed_is_deterministic(self, line):
        """Equal seeds give equal partitions."""
        plane = PlanePartition((1.0, 0.0), tol=1.5)
        a = partition(line, plane, rng=123)
        b = partition(line, plane, rng=np.random.default_rng(123))
        assert a == b

    def test_empty_domain(self):
        """An empty domain yields a partition with no subsets."""
        empty = PointSet([], ndim=2)
        assert len(partition(empty, PlanePartition((1.0, 0.0)), rng=0)) == 0
        assert len(partition(empty, Always(), rng=0)) == 0

    def test_domain_not_mutated(self, line):
        """Partitioning leaves the domain's coordinates untouched."""
        before = line.coords.copy()
        partition(line, PlanePartition((1.0, 1.0), tol=0.5), rng=3)
        np.testing.assert_array_equal(line.coords, before)


class TestProcessingOrder:
    """Tests for processing order selection."""

    def test_random_permutation(self):
        """Generated orders are permutations."""
        order = processing_order(50, rng=9)
        assert sorted(order) == list(range(50))

    def test_negative_seed_rejected(self, line):
        """Invalid seeds raise a configuration error, not a numpy error."""
        with pytest.raises(ConfigurationError) as exc_info:
            partition(line, Always(), rng=-1)
        assert exc_info.value.parameter == "rng"
        with pytest.raises(ConfigurationError):
            as_generator(2.5)

    def test_generator_passthrough(self):
        """A Generator is used as is."""
        generator = np.random.default_rng(0)
        assert as_generator(generator) is generator

    def test_explicit_order_passthrough(self):
        """A valid explicit order is used as given."""
        assert processing_order(3, order=[2, 0, 1]) == [2, 0, 1]

    def test_explicit_order_wrong_length(self):
        """Orders must cover the whole domain."""
        with pytest.raises(InvalidOrderError):
            processing_order(3, order=[0, 1])

    def test_explicit_order_repeats(self):
        """Orders must not repeat indices."""
        with pytest.raises(InvalidOrderError):
            processing_order(3, order=[0, 1, 1])

    def test_explicit_order_non_integer(self):
        """Orders must hold integers."""
        with pytest.raises(InvalidOrderError):
            processing_order(2, order=[0.0, 1.0])

    def test_invalid_order_propagates(self, line):
        """partition reports a bad order before doing any work."""
        with pytest.raises(InvalidOrderError):
            partition(line, Always(), order=[0, 1, 2])


class TestDimensionMismatch:
    """Tests for dimensionality checks."""

    def test_mismatch_detected_before_comparison(self, line):
        """A 3D normal on a 2D domain fails at pairing time."""
        with pytest.raises(DimensionMismatchError) as exc_info:
            partition(line, PlanePartition((0.0, 0.0, 1.0)), rng=0)
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_mismatch_on_empty_domain(self):
        """Mismatch is reported even when there is nothing to compare."""
        with pytest.raises(DimensionMismatchError):
            partition(PointSet([], ndim=2), PlanePartition((1.0, 0.0, 0.0)), rng=0)

    def test_any_dimension_predicate(self, line):
        """Predicates with ndim None accept any domain."""
        assert FirstCoordinateBand.ndim is None
        partition(line, FirstCoordinateBand(), rng=0)


class TestStats:
    """Tests for run statistics."""

    def test_stats_filled(self, line):
        """Stats report elements, subsets and evaluations."""
        stats = PartitionStats()
        p = partition(line, RecordingIndex(), order=[3, 0, 5, 2, 1, 4], stats=stats)
        assert stats.element_count == 6
        assert stats.subset_count == len(p) == 2
        assert stats.evaluations == 7
        assert stats.duration_seconds >= 0.0

    def test_evaluations_bounded_by_subsets(self):
        """Each element costs at most one evaluation per existing subset."""
        rng = np.random.default_rng(5)
        points = PointSet.from_rows(rng.integers(0, 5, size=(200, 2)).astype(float))
        stats = PartitionStats()
        partition(points, PlanePartition((1.0, 0.0), tol=0.5), rng=rng, stats=stats)
        assert stats.subset_count == 5
        assert stats.evaluations <= stats.element_count * stats.subset_count
