import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..checks import require_int
from ..config import ClusterConfig, Expense
from ..errors import ConvergenceError, DataError, ValidationError
from ..sampling.draws import make_rng, sample_rows

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Centroid:
    amount: float
    date: float

@dataclass(frozen=True)
class Cluster:
    index: int
    centroid: Centroid
    members: Tuple[Expense, ...]

def to_points(expenses: Sequence[Expense]) -> np.ndarray:
    pts = np.array([[e.amount, e.date] for e in expenses], dtype=float).reshape(-1, 2)
    if not np.isfinite(pts).all():
        raise DataError("Expenses contain non-finite amount or date")
    return pts

def assign(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Label of the nearest centroid per point; argmin keeps the lowest index on ties."""
    d = np.linalg.norm(points[:, None, :] - centroids[None, :, :], axis=2)  # (n, k)
    return np.argmin(d, axis=1)

def update_centroids(points: np.ndarray, labels: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """New (k, 2) array of member means; empty clusters keep their previous centroid."""
    new = centroids.copy()
    for j in range(centroids.shape[0]):
        members = points[labels == j]
        if members.shape[0]:
            new[j] = members.mean(axis=0)
    return new

class ExpenseClusterer:
    def __init__(self, cfg: ClusterConfig = ClusterConfig()):
        self.cfg = cfg

    def cluster(self, expenses: Sequence[Expense], k: int, rng: Optional[np.random.Generator] = None) -> List[Cluster]:
        """
        Lloyd iterations over (amount, date) points.
        A centroid is only replaced when it moves more than cfg.tolerance; the run
        stops once no centroid is replaced, so the returned partition is exactly the
        assignment against the returned centroids.
        """
        if not expenses:
            raise ValidationError("At least one expense is required")
        k = require_int(k, "Number of clusters")
        if k < 1:
            raise ValidationError(f"Number of clusters must be at least 1, got {k}")
        if k > len(expenses):
            raise ValidationError(f"Number of clusters ({k}) exceeds number of expenses ({len(expenses)})")

        points = to_points(expenses)
        rng = rng if rng is not None else make_rng()
        centroids = points[sample_rows(points.shape[0], k, rng)].copy()

        for iteration in range(1, self.cfg.max_iterations + 1):
            labels = assign(points, centroids)
            candidate = update_centroids(points, labels, centroids)
            moved = np.linalg.norm(candidate - centroids, axis=1) > self.cfg.tolerance
            if not moved.any():
                logger.debug("k-means converged after %d iterations (k=%d, n=%d)", iteration, k, points.shape[0])
                break
            centroids = np.where(moved[:, None], candidate, centroids)
        else:
            raise ConvergenceError(
                f"Clustering did not converge within {self.cfg.max_iterations} iterations",
                iterations=self.cfg.max_iterations,
            )

        return [
            Cluster(
                index=j,
                centroid=Centroid(amount=float(centroids[j, 0]), date=float(centroids[j, 1])),
                members=tuple(e for e, lbl in zip(expenses, labels) if lbl == j),
            )
            for j in range(k)
        ]
