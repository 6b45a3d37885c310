"""Unit tests for proportional budget allocation"""

import numpy as np
import pytest

from finance_analyzer.analytics.allocation import ProportionalAllocator
from finance_analyzer.config import Category
from finance_analyzer.errors import DataError, ValidationError


def test_allocate_by_priority():
    allocations = ProportionalAllocator().allocate([Category("Food", 5), Category("Rent", 10)], 1500)

    assert [a.amount for a in allocations] == [500.0, 1000.0]
    assert [a.category.name for a in allocations] == ["Food", "Rent"]


def test_allocations_sum_to_budget():
    prng = np.random.default_rng(1)
    cats = [Category(f"c{i}", int(p)) for i, p in enumerate(prng.integers(1, 11, size=17))]
    budget = 12345.67

    total = sum(a.amount for a in ProportionalAllocator().allocate(cats, budget))

    assert total == pytest.approx(budget, rel=1e-9)


def test_priority_is_clamped():
    assert Category("Luxury", 15).priority == 10
    assert Category("Savings", 0).priority == 1
    assert Category("Misc", -4).priority == 1


def test_clamped_priorities_drive_allocation():
    allocations = ProportionalAllocator().allocate([Category("A", 50), Category("B", -2)], 1100)
    assert [a.amount for a in allocations] == pytest.approx([1000.0, 100.0])


def test_zero_budget():
    allocations = ProportionalAllocator().allocate([Category("A", 3), Category("B", 7)], 0)
    assert [a.amount for a in allocations] == [0.0, 0.0]


def test_empty_categories_rejected():
    with pytest.raises(ValidationError):
        ProportionalAllocator().allocate([], 100)


def test_negative_budget_rejected():
    with pytest.raises(ValidationError):
        ProportionalAllocator().allocate([Category("A", 3)], -1)


@pytest.mark.parametrize("budget", [float("nan"), float("inf")])
def test_non_finite_budget_rejected(budget):
    with pytest.raises(DataError):
        ProportionalAllocator().allocate([Category("A", 1)], budget)
