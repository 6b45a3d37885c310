"""
Historical plaintext encodings for engine inputs and results.
Pure text in / text out; reading and writing files is left to the caller.
"""
import io
from typing import Iterable, List

import numpy as np
import pandas as pd

from ..config import Expense
from ..errors import DataError

def _read_numeric_lines(text: str, n_cols: int, what: str) -> pd.DataFrame:
    lines = [(no, ln.strip()) for no, ln in enumerate(text.splitlines(), start=1) if ln.strip()]
    if not lines:
        raise DataError(f"No {what} data found")
    for no, ln in lines:
        if ln.count(",") != n_cols - 1:
            raise DataError(f"Line {no}: expected {n_cols} comma-separated value(s), got {ln!r}")

    df = pd.read_csv(
        io.StringIO("\n".join(ln for _, ln in lines)),
        header=None,
        dtype=str,
        na_filter=False,
    )
    num = df.apply(lambda col: pd.to_numeric(col.str.strip(), errors="coerce"))
    bad = num.isna().any(axis=1) | ~np.isfinite(num.to_numpy(dtype=float, na_value=0.0)).all(axis=1)
    if bad.any():
        pos = int(np.flatnonzero(bad.to_numpy())[0])
        no, ln = lines[pos]
        raise DataError(f"Line {no}: invalid {what} value {ln!r}")
    return num

def parse_price_series(text: str) -> np.ndarray:
    """One price per line, chronological order."""
    return _read_numeric_lines(text, 1, "price")[0].to_numpy(dtype=float)

def parse_expenses(text: str) -> List[Expense]:
    """One `amount,date` pair per line."""
    df = _read_numeric_lines(text, 2, "expense")
    return [Expense(amount=float(a), date=float(d)) for a, d in zip(df[0], df[1])]

def format_signals(signals: Iterable) -> str:
    return "".join(f"Day {s.day}: {s.action.value}\n" for s in signals)

def format_trials(summary) -> str:
    return "".join(f"{b:.2f}\n" for b in summary.trials)

def format_clusters(clusters: Iterable) -> str:
    out = []
    for c in clusters:
        out.append(f"Cluster {c.index + 1}:\n")
        out.extend(f"{e.amount:.2f},{e.date:.2f}\n" for e in c.members)
    return "".join(out)

def format_allocations(allocations: Iterable) -> str:
    return "".join(f"{a.category.name}: ${a.amount:.2f}\n" for a in allocations)

def format_repayment_plan(steps: Iterable) -> str:
    return "".join(
        f"Pay ${s.payment:.2f} to debt with {s.annual_rate * 100:.2f}% interest, "
        f"remaining: ${s.remaining_balance:.2f}\n"
        for s in steps
    )
