"""Pytest fixtures for testing"""

import numpy as np
import pytest

from finance_analyzer.config import Debt, Expense


class FixedRng:
    """Stands in for a numpy Generator when a test needs known centroid picks"""

    def __init__(self, indices):
        self.indices = np.asarray(indices)

    def integers(self, low, high, size=None):
        return self.indices[:size].copy()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture
def fixed_rng():
    return FixedRng


@pytest.fixture
def two_group_expenses() -> list[Expense]:
    """Small purchases early in the month, large bills at month end"""
    return [
        Expense(12.0, 1.0),
        Expense(9.5, 2.0),
        Expense(14.0, 3.0),
        Expense(11.0, 2.5),
        Expense(950.0, 28.0),
        Expense(1010.0, 30.0),
        Expense(990.0, 29.0),
    ]


@pytest.fixture
def sample_debts() -> list[Debt]:
    return [Debt(1000.0, 0.20, "Card"), Debt(500.0, 0.10, "Loan")]
