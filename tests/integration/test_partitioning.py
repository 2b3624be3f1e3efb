"""Integration tests for partitioning point sets end to end.

These tests check the partition invariants over many processing orders and
random domains rather than single hand-picked cases.
"""

import numpy as np
import pytest

from geopartition import (
    BallPartition,
    BisectFractionPartition,
    BlockPartition,
    DirectionPartition,
    FunctionPartition,
    HierarchicalPartition,
    PlanePartition,
    PointSet,
    ProductPartition,
    UniformPartition,
    partition,
    subsets,
)


def assert_valid_partition(p, n):
    """Every index appears exactly once and no subset is empty."""
    flat = [i for s in subsets(p) for i in s]
    assert sorted(flat) == list(range(n))
    assert all(len(s) > 0 for s in subsets(p))


@pytest.fixture
def square() -> PointSet:
    """The four corners (0,0), (0,1), (5,0), (5,1)."""
    return PointSet([(0, 0), (0, 1), (5, 0), (5, 1)])


class TestSquareScenario:
    """The four-point example grouped by x-coordinate bands."""

    @pytest.mark.parametrize("seed", range(20))
    def test_two_columns_for_any_seed(self, square, seed):
        """Columns {0, 1} and {2, 3} are found whatever the order."""
        p = partition(square, PlanePartition((1, 0), tol=0.5), rng=seed)
        assert len(p) == 2
        assert sorted(sorted(s) for s in subsets(p)) == [[0, 1], [2, 3]]

    def test_two_columns_for_every_order(self, square):
        """All 24 processing orders give the same grouping."""
        from itertools import permutations

        plane = PlanePartition((1, 0), tol=0.5)
        for order in permutations(range(4)):
            p = partition(square, plane, order=list(order))
            assert sorted(sorted(s) for s in subsets(p)) == [[0, 1], [2, 3]]
            # the first subset is the one containing the first visited point
            assert p.subsets[0][0] == order[0]

    def test_views_iterate_columns(self, square):
        """Iterating yields views whose points share an x coordinate."""
        p = partition(square, PlanePartition((1, 0), tol=0.5), rng=0)
        buf = np.empty(2, dtype=square.dtype)
        for subset_view in p:
            xs = set()
            for k in range(subset_view.element_count()):
                subset_view.write_coordinates(buf, k)
                xs.add(int(buf[0]))
            assert len(xs) == 1

    def test_matrix_input_gives_same_result(self, square):
        """Column-matrix construction partitions identically."""
        matrix = PointSet(np.array([[0, 0, 5, 5], [0, 1, 0, 1]]))
        plane = PlanePartition((1, 0), tol=0.5)
        assert partition(matrix, plane, rng=4).subsets == partition(square, plane, rng=4).subsets


class TestInvariants:
    """Partition invariants on random point clouds."""

    @pytest.mark.parametrize("seed", range(5))
    def test_exhaustive_and_disjoint(self, seed):
        """Random 3D clouds are covered exactly once."""
        rng = np.random.default_rng(seed)
        points = PointSet.from_rows(rng.uniform(-10, 10, size=(300, 3)))
        for partitioner in (
            PlanePartition(rng.normal(size=3), tol=1.0),
            DirectionPartition(rng.normal(size=3), tol=2.0),
            BallPartition(3.0),
            BlockPartition((5.0, 5.0, 10.0)),
            BisectFractionPartition(rng.normal(size=3), 0.4),
            UniformPartition(7),
            ProductPartition(PlanePartition((1, 0, 0), tol=4.0), PlanePartition((0, 1, 0), tol=4.0)),
            HierarchicalPartition(PlanePartition((0, 0, 1), tol=5.0), PlanePartition((1, 1, 0), tol=3.0)),
        ):
            p = partition(points, partitioner, rng=rng)
            assert_valid_partition(p, points.element_count())

    def test_plane_bands_are_exact(self):
        """Points on discrete planes are grouped by plane regardless of order."""
        rng = np.random.default_rng(42)
        levels = rng.integers(0, 7, size=250)
        rows = np.column_stack([rng.uniform(-50, 50, size=250), levels * 3.0])
        points = PointSet.from_rows(rows)
        p = partition(points, PlanePartition((0, 1), tol=1.0), rng=rng)
        assert len(p) == len(np.unique(levels))
        for subset in subsets(p):
            assert len(set(levels[list(subset)])) == 1

    def test_single_cluster_and_full_separation(self):
        """Always-true and always-false predicates give the extremes."""
        points = PointSet.from_rows(np.arange(30, dtype=float).reshape(10, 3))
        together = partition(points, FunctionPartition(lambda x, y: True), rng=0)
        apart = partition(points, FunctionPartition(lambda i, j: False, spatial=False), rng=0)
        assert len(together) == 1
        assert len(apart) == 10
        assert sorted(s[0] for s in subsets(apart)) == list(range(10))

    def test_labels_roundtrip_subsets(self):
        """labels() agrees with subset membership."""
        rng = np.random.default_rng(3)
        points = PointSet.from_rows(rng.integers(0, 4, size=(60, 2)))
        p = partition(points, PlanePartition((1, 0), tol=0.5), rng=rng)
        labels = p.labels()
        for number, subset in enumerate(subsets(p)):
            assert all(labels[i] == number for i in subset)

    def test_repartition_view(self):
        """A subset view can be partitioned again."""
        points = PointSet([(0.0, 0.0), (0.0, 3.0), (9.0, 0.0), (0.0, 0.2)])
        columns = partition(points, PlanePartition((1, 0), tol=0.5), order=[0, 1, 2, 3])
        first = columns[0]
        rows = partition(first, PlanePartition((0, 1), tol=0.5), order=[0, 1, 2])
        assert [[first.indices[k] for k in s] for s in subsets(rows)] == [[0, 3], [1]]
