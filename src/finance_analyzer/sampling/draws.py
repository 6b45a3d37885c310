from typing import Optional

import numpy as np

def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)

class NormalReturnSampler:
    def __init__(self, mean_return: float, volatility: float):
        self.mu = float(mean_return)
        self.sigma = float(volatility)

    def sample(self, horizon: int, n_sims: int, rng: np.random.Generator) -> np.ndarray:
        """
        Returns (n_sims, horizon) independent per-step returns.
        Row-major draw order: all steps of trial 0, then trial 1, ...
        """
        return rng.normal(self.mu, self.sigma, size=(n_sims, horizon))

def sample_rows(n_rows: int, k: int, rng: np.random.Generator) -> np.ndarray:
    """k row indices drawn uniformly with replacement."""
    return rng.integers(0, n_rows, size=k)
