from dataclasses import dataclass
from typing import Optional

PRIORITY_MIN = 1
PRIORITY_MAX = 10

@dataclass(frozen=True)
class Category:
    name: str
    priority: int  # clamped to 1..10

    def __post_init__(self):
        clamped = max(PRIORITY_MIN, min(PRIORITY_MAX, int(self.priority)))
        object.__setattr__(self, "priority", clamped)

@dataclass(frozen=True)
class Expense:
    amount: float
    date: float  # numeric timestamp or day index

@dataclass(frozen=True)
class Debt:
    balance: float
    annual_rate: float      # 0.20 = 20% APR
    name: Optional[str] = None

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate / 12.0

@dataclass(frozen=True)
class TrendConfig:
    short_period: int = 10
    long_period: int = 50

@dataclass(frozen=True)
class GrowthConfig:
    mean_return: float = 0.07   # per step (year)
    volatility: float = 0.05

@dataclass(frozen=True)
class ClusterConfig:
    tolerance: float = 1e-3     # max centroid move counted as "stable"
    max_iterations: int = 300

@dataclass(frozen=True)
class PayoffConfig:
    max_months: int = 1200      # 100 years
