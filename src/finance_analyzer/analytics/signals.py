import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from ..checks import require_int
from ..config import TrendConfig
from ..errors import DataError, ValidationError

logger = logging.getLogger(__name__)

class Action(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"

@dataclass(frozen=True)
class Signal:
    day: int            # 1-based position in the aligned series
    action: Action
    price_index: int    # 0-based index into the input prices

def _as_prices(prices) -> np.ndarray:
    x = np.asarray(prices, dtype=float).ravel()
    if not np.isfinite(x).all():
        raise DataError("Price series contains non-finite values")
    return x

def moving_average(prices, period: int) -> np.ndarray:
    """Simple moving average over a sliding window; length n - period + 1."""
    x = _as_prices(prices)
    period = require_int(period, "Period")
    if period <= 0:
        raise ValidationError(f"Period must be a positive integer, got {period}")
    if period > x.shape[0]:
        raise ValidationError(f"Period {period} exceeds number of data points ({x.shape[0]})")
    return sliding_window_view(x, period).sum(axis=1) / period

def align_tail(a: np.ndarray, b: np.ndarray):
    """Trim both series from the front to the shorter length (most recent overlap)."""
    n = min(a.shape[0], b.shape[0])
    return a[a.shape[0] - n:], b[b.shape[0] - n:]

def crossover_signals(short_ma: np.ndarray, long_ma: np.ndarray, offset: int = 0) -> List[Signal]:
    """
    One signal per aligned index i >= 1.
    BUY when short goes from strictly below to strictly above long, SELL for the
    reverse, HOLD otherwise (ties never trigger).
    offset: index in the input prices of the first aligned point.
    """
    if short_ma.shape != long_ma.shape:
        raise ValidationError("Moving averages must be aligned to the same length")
    below = short_ma < long_ma
    above = short_ma > long_ma
    signals = []
    for i in range(1, short_ma.shape[0]):
        if below[i - 1] and above[i]:
            action = Action.BUY
        elif above[i - 1] and below[i]:
            action = Action.SELL
        else:
            action = Action.HOLD
        signals.append(Signal(day=i + 1, action=action, price_index=offset + i))
    return signals

class TrendSignalEngine:
    def __init__(self, cfg: TrendConfig = TrendConfig()):
        self.cfg = cfg

    def generate_signals(self, prices, short_period: Optional[int] = None, long_period: Optional[int] = None) -> List[Signal]:
        sp = require_int(self.cfg.short_period if short_period is None else short_period, "Short-term period")
        lp = require_int(self.cfg.long_period if long_period is None else long_period, "Long-term period")
        x = _as_prices(prices)

        if sp <= 0 or lp <= 0:
            raise ValidationError("Periods must be positive integers")
        if sp >= lp:
            raise ValidationError("Short-term period must be less than long-term period")
        if lp > x.shape[0]:
            raise ValidationError(f"Long-term period exceeds number of data points ({x.shape[0]})")

        short_ma, long_ma = align_tail(moving_average(x, sp), moving_average(x, lp))
        signals = crossover_signals(short_ma, long_ma, offset=lp - 1)
        logger.debug("Generated %d signals (short=%d, long=%d, n=%d)", len(signals), sp, lp, x.shape[0])
        return signals
