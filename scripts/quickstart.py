import logging

import numpy as np

from finance_analyzer.config import Category, ClusterConfig, Debt, Expense, GrowthConfig
from finance_analyzer.analytics.signals import TrendSignalEngine
from finance_analyzer.analytics.allocation import ProportionalAllocator
from finance_analyzer.engine.simulator import GrowthSimulator
from finance_analyzer.engine.payoff import DebtPayoffPlanner, schedule_frame
from finance_analyzer.clustering.kmeans import ExpenseClusterer
from finance_analyzer.data.codecs import format_allocations, format_clusters, format_signals
from finance_analyzer.errors import FinanceAnalyzerError

def main():
    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")
    rng = np.random.default_rng(42)

    # 1) Trend signals on a synthetic random-walk price series
    prices = 100 + np.cumsum(rng.normal(0, 1, size=120))
    signals = TrendSignalEngine().generate_signals(prices, short_period=5, long_period=20)
    print("=== Trading Signals (non-HOLD) ===")
    print(format_signals([s for s in signals if s.action.value != "HOLD"]), end="")

    # 2) Monte Carlo growth
    summary = GrowthSimulator(GrowthConfig()).run(initial=10_000, years=30, trials=1_000, rng=rng)
    print("\n=== Monte Carlo Summary (1000 sims) ===")
    print(f"Average final balance: ${summary.mean:,.2f}")
    print(f"Standard deviation: ${summary.std:,.2f}")
    print("Percentiles (10/50/90):", [f"${v:,.0f}" for v in summary.percentile([10, 50, 90])])

    # 3) Budget allocation
    cats = [Category("Rent", 10), Category("Food", 6), Category("Fun", 2)]
    print("\n=== Budget Allocation ===")
    print(format_allocations(ProportionalAllocator().allocate(cats, 3_000)), end="")

    # 4) Expense clustering
    expenses = [Expense(float(a), float(d)) for a, d in zip(rng.gamma(2.0, 40.0, 30), rng.integers(1, 31, 30))]
    clusters = ExpenseClusterer(ClusterConfig(max_iterations=500)).cluster(expenses, k=3, rng=rng)
    print("\n=== Expense Clusters ===")
    print(format_clusters(clusters), end="")

    # 5) Avalanche payoff
    debts = [Debt(5_000, 0.22, "Card"), Debt(12_000, 0.06, "Car"), Debt(2_000, 0.22, "Store card")]
    try:
        steps = DebtPayoffPlanner().plan(debts, monthly_payment=600)
    except FinanceAnalyzerError as e:
        print(f"Payoff failed: {e}")
        return
    df = schedule_frame(steps)
    print("\n=== Debt Repayment Plan ===")
    print(f"Months to debt-free: {df['Month'].max()}")
    print(f"Total interest: ${df['Interest'].sum():,.2f}")
    print(df.groupby("Debt")["Month"].max().rename(index=lambda i: debts[i].name).to_string())


if __name__ == "__main__":
    main()
