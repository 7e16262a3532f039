"""
NPV Sweep — Discounting Module

End-of-period discounting for NPV calculations.

Formula:
    NPV = -principal + Σ CF_t / (1 + rate)^t     for t = 1..n

Periods are 1-indexed: the first cash flow arrives one full period after the
initial investment. No mid-period convention is applied.
"""

from typing import Sequence


def discount_cashflow(cashflow: float, period: int, rate: float) -> float:
    """
    Discounts a single cashflow received at the end of `period`.

    Args:
        cashflow: The undiscounted cashflow amount.
        period: 1-based period index of the cashflow.
        rate: Per-period discount rate (e.g. 0.10 for 10%).

    Returns:
        Present value of the cashflow.
    """
    return cashflow / (1 + rate) ** period


def compute_npv(principal: float, rate: float, cash_flows: Sequence[float]) -> float:
    """
    Net present value of `cash_flows` against an upfront `principal`.

    An empty cash-flow series returns exactly -principal. Rates <= -1 are
    outside the formula's domain and are not guarded (rate == -1 raises
    ZeroDivisionError).
    """
    npv = -principal
    for period, cashflow in enumerate(cash_flows, start=1):
        npv += discount_cashflow(cashflow, period, rate)
    return npv
