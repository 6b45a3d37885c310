import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import pandas as pd

from ..checks import require_finite
from ..config import Debt, PayoffConfig
from ..errors import StallError, ValidationError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class RepaymentStep:
    month: int                # 1-based
    debt_index: int           # position in the input list
    payment: float
    remaining_balance: float
    annual_rate: float
    interest_accrued: float   # charged across all debts this month

def accrue(balances: Tuple[float, ...], debts: Sequence[Debt]) -> Tuple[float, ...]:
    return tuple(b * (1.0 + d.monthly_rate) if b > 0 else b for b, d in zip(balances, debts))

def pick_target(balances: Tuple[float, ...], debts: Sequence[Debt]) -> int:
    """Highest annual rate among positive balances; lowest input index on ties."""
    best = -1
    for i, (b, d) in enumerate(zip(balances, debts)):
        if b > 0 and (best < 0 or d.annual_rate > debts[best].annual_rate):
            best = i
    return best

class DebtPayoffPlanner:
    def __init__(self, cfg: PayoffConfig = PayoffConfig()):
        self.cfg = cfg

    def plan(self, debts: Sequence[Debt], monthly_payment: float) -> List[RepaymentStep]:
        """
        Avalanche schedule: each month all positive balances accrue annual_rate/12,
        then the whole payment (capped at the balance) goes to the highest-rate debt.
        Raises StallError when the paid debt cannot shrink or the month bound is hit.
        """
        if not debts:
            raise ValidationError("At least one debt is required")
        payment_cap = require_finite(monthly_payment, "Monthly payment")
        if payment_cap <= 0:
            raise ValidationError(f"Monthly payment must be positive, got {monthly_payment}")
        for i, d in enumerate(debts):
            require_finite(d.balance, f"Debt {i + 1} balance")
            require_finite(d.annual_rate, f"Debt {i + 1} interest rate")
            if d.balance < 0:
                raise ValidationError(f"Debt {i + 1} has a negative balance")
            if d.annual_rate < 0:
                raise ValidationError(f"Debt {i + 1} has a negative interest rate")

        balances = tuple(float(d.balance) for d in debts)
        steps: List[RepaymentStep] = []
        month = 0

        while any(b > 0 for b in balances):
            month += 1
            if month > self.cfg.max_months:
                raise StallError(
                    f"Debts not repaid within {self.cfg.max_months} months",
                    month=month - 1, debt_index=pick_target(balances, debts),
                )

            accrued = accrue(balances, debts)
            interest = sum(a - b for a, b in zip(accrued, balances))
            target = pick_target(accrued, debts)

            payment = min(payment_cap, accrued[target])
            remaining = accrued[target] - payment
            if remaining > 0 and remaining >= balances[target]:
                # target keeps the top rate and never shrinks
                raise StallError(
                    f"Payment of {payment_cap:.2f} does not cover monthly interest on debt {target + 1}",
                    month=month, debt_index=target,
                )

            balances = accrued[:target] + (remaining,) + accrued[target + 1:]
            steps.append(RepaymentStep(
                month=month,
                debt_index=target,
                payment=payment,
                remaining_balance=remaining,
                annual_rate=debts[target].annual_rate,
                interest_accrued=interest,
            ))

        logger.debug("Repaid %d debts in %d months", len(debts), month)
        return steps

def schedule_frame(steps: Sequence[RepaymentStep]) -> pd.DataFrame:
    """Tabular view of a schedule: Month, Debt, Payment, Remaining, Rate, Interest."""
    return pd.DataFrame(
        [{
            "Month": s.month,
            "Debt": s.debt_index,
            "Payment": s.payment,
            "Remaining": s.remaining_balance,
            "Rate": s.annual_rate,
            "Interest": s.interest_accrued,
        } for s in steps],
        columns=["Month", "Debt", "Payment", "Remaining", "Rate", "Interest"],
    )
