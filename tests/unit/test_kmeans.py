"""Unit tests for expense clustering"""

from collections import Counter

import numpy as np
import pytest

from finance_analyzer.clustering.kmeans import (
    ExpenseClusterer,
    assign,
    to_points,
    update_centroids,
)
from finance_analyzer.config import ClusterConfig, Expense
from finance_analyzer.errors import ConvergenceError, DataError, ValidationError


def _labels_from_clusters(expenses, clusters):
    label_of = {}
    for c in clusters:
        for e in c.members:
            label_of[e] = c.index
    return np.array([label_of[e] for e in expenses])


def test_separates_distinct_groups(two_group_expenses, fixed_rng):
    """Seeding one centroid in each group recovers the two groups"""
    clusters = ExpenseClusterer().cluster(two_group_expenses, 2, rng=fixed_rng([0, 5]))

    assert len(clusters) == 2
    assert set(clusters[0].members) == set(two_group_expenses[:4])
    assert set(clusters[1].members) == set(two_group_expenses[4:])
    assert clusters[0].centroid.amount == pytest.approx(np.mean([12.0, 9.5, 14.0, 11.0]))
    assert clusters[1].centroid.date == pytest.approx(29.0)


def test_every_expense_in_exactly_one_cluster(two_group_expenses, rng):
    for k in (1, 2, 3, 7):
        clusters = ExpenseClusterer().cluster(two_group_expenses, k, rng=rng)

        assert len(clusters) == k
        assert [c.index for c in clusters] == list(range(k))
        members = Counter(e for c in clusters for e in c.members)
        assert members == Counter(two_group_expenses)


def test_final_partition_is_fixed_point(rng):
    prng = np.random.default_rng(99)
    expenses = [Expense(float(a), float(d)) for a, d in zip(prng.gamma(2.0, 50.0, 40), prng.uniform(1, 31, 40))]

    clusters = ExpenseClusterer().cluster(expenses, 4, rng=rng)

    centroids = np.array([[c.centroid.amount, c.centroid.date] for c in clusters])
    np.testing.assert_array_equal(assign(to_points(expenses), centroids), _labels_from_clusters(expenses, clusters))


def test_single_cluster_centroid_is_mean(two_group_expenses, rng):
    (only,) = ExpenseClusterer().cluster(two_group_expenses, 1, rng=rng)

    pts = to_points(two_group_expenses)
    assert only.centroid.amount == pytest.approx(pts[:, 0].mean())
    assert only.centroid.date == pytest.approx(pts[:, 1].mean())
    assert len(only.members) == len(two_group_expenses)


def test_coinciding_centroids_leave_empty_clusters(fixed_rng):
    """Identical initial centroids: ties go to cluster 0, the rest stay empty"""
    expenses = [Expense(5.0, 1.0), Expense(5.0, 1.0), Expense(5.0, 1.0)]
    clusters = ExpenseClusterer().cluster(expenses, 3, rng=fixed_rng([0, 1, 2]))

    assert len(clusters[0].members) == 3
    assert clusters[1].members == ()
    assert clusters[2].members == ()
    assert clusters[2].centroid.amount == 5.0


def test_seeded_runs_are_reproducible(two_group_expenses):
    a = ExpenseClusterer().cluster(two_group_expenses, 3, rng=np.random.default_rng(4))
    b = ExpenseClusterer().cluster(two_group_expenses, 3, rng=np.random.default_rng(4))
    assert a == b


def test_assign_ties_go_to_lowest_index():
    points = np.array([[0.0, 0.0]])
    centroids = np.array([[1.0, 0.0], [-1.0, 0.0], [0.0, 1.0]])
    assert assign(points, centroids).tolist() == [0]


def test_update_keeps_empty_cluster_centroid():
    points = np.array([[1.0, 1.0], [3.0, 3.0]])
    centroids = np.array([[0.0, 0.0], [100.0, 100.0]])
    labels = np.array([0, 0])

    new = update_centroids(points, labels, centroids)

    np.testing.assert_allclose(new, [[2.0, 2.0], [100.0, 100.0]])
    np.testing.assert_allclose(centroids, [[0.0, 0.0], [100.0, 100.0]])  # input untouched


def test_iteration_bound_raises(fixed_rng):
    expenses = [Expense(0.0, 0.0), Expense(10.0, 0.0)]
    clusterer = ExpenseClusterer(ClusterConfig(max_iterations=1))

    with pytest.raises(ConvergenceError) as exc:
        clusterer.cluster(expenses, 2, rng=fixed_rng([0, 0]))
    assert exc.value.iterations == 1


@pytest.mark.parametrize("k", [0, -2, 8])
def test_invalid_k_rejected(two_group_expenses, k):
    with pytest.raises(ValidationError):
        ExpenseClusterer().cluster(two_group_expenses, k)


def test_empty_expenses_rejected():
    with pytest.raises(ValidationError):
        ExpenseClusterer().cluster([], 1)


def test_non_finite_expense_rejected():
    with pytest.raises(DataError):
        ExpenseClusterer().cluster([Expense(1.0, 2.0), Expense(float("inf"), 3.0)], 1)


@pytest.mark.parametrize("k", [1.5, float("nan")])
def test_fractional_k_rejected(two_group_expenses, k):
    with pytest.raises(ValidationError):
        ExpenseClusterer().cluster(two_group_expenses, k)
