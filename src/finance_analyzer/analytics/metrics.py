import numpy as np

def mean_balance(balances) -> float:
    return float(np.mean(balances))

def population_std(balances) -> float:
    # divides by N, not N-1
    x = np.asarray(balances, dtype=float)
    return float(np.sqrt(np.mean((x - x.mean()) ** 2)))

def balance_percentiles(balances, qs=(10, 50, 90)):
    return np.percentile(np.asarray(balances, dtype=float), qs)
