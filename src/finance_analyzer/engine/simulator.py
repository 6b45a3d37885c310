import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from ..analytics.metrics import balance_percentiles, mean_balance, population_std
from ..checks import require_finite, require_int
from ..config import GrowthConfig
from ..errors import ValidationError
from ..sampling.draws import NormalReturnSampler, make_rng

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class SimulationSummary:
    mean: float
    std: float                                      # population (ddof=0)
    trials: np.ndarray = field(repr=False, compare=False)

    def percentile(self, q):
        return balance_percentiles(self.trials, q)

class GrowthSimulator:
    def __init__(self, cfg: GrowthConfig = GrowthConfig()):
        if cfg.volatility < 0:
            raise ValidationError(f"Volatility must be non-negative, got {cfg.volatility}")
        self.cfg = cfg
        self.sampler = NormalReturnSampler(cfg.mean_return, cfg.volatility)

    def run(self, initial: float, years: int, trials: int, rng: Optional[np.random.Generator] = None) -> SimulationSummary:
        """
        Compound `initial` for `years` steps in each of `trials` independent trials.
        Each step multiplies the balance by (1 + r), r ~ Normal(mean_return, volatility).
        rng: generator owned by the caller; a fresh unseeded one is created when omitted.
        """
        initial = require_finite(initial, "Initial balance")
        years = require_int(years, "Years")
        trials = require_int(trials, "Number of trials")
        if initial < 0:
            raise ValidationError(f"Initial balance must be non-negative, got {initial}")
        if years < 0:
            raise ValidationError(f"Years must be non-negative, got {years}")
        if trials < 1:
            raise ValidationError(f"Number of trials must be at least 1, got {trials}")

        balances = np.full(trials, initial)

        if years > 0:
            rng = rng if rng is not None else make_rng()
            R = self.sampler.sample(years, trials, rng)  # (trials, years)
            for t in range(years):
                balances *= (1.0 + R[:, t])

        balances.setflags(write=False)
        summary = SimulationSummary(mean=mean_balance(balances), std=population_std(balances), trials=balances)
        logger.debug("Simulated %d trials over %d years: mean=%.2f std=%.2f", trials, years, summary.mean, summary.std)
        return summary
