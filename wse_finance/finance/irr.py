# wse_finance/finance/irr.py
"""
Discounting primitives and the IRR root finder.

All public rates here are in percent (8.0 = 8 %) except the value returned
by irr(), which is a fraction (0.08) like every spreadsheet IRR.
Nothing in this module raises on numeric edge cases: overflow and division
by zero surface as inf/nan and the IRR falls back to documented defaults.
"""
from __future__ import annotations

import logging
from typing import Iterable, List

import numpy as np
import numpy_financial as npf

logger = logging.getLogger(__name__)

IRR_LOW = -0.999999
IRR_HIGH = 100.0
IRR_MAX_ITERATIONS = 1000


# ---------- Present value ----------
def present_value(cash_flow: float, rate_percent: float, period: int) -> float:
    """cash_flow / (1 + rate/100) ** period. Period 0 is undiscounted."""
    if period == 0:
        return float(cash_flow)
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        factor = np.power(1.0 + float(rate_percent) / 100.0, period)
        return float(np.float64(cash_flow) / factor)


# ---------- NPV ----------
def npv(cashflows: Iterable[float], rate_percent: float) -> float:
    """
    Classic discounted cash flow:
        NPV(r) = sum_{t=0..N} CF[t] / (1+r)^t
    CF[0] is the initial outlay and is not discounted.
    """
    cfs: List[float] = [float(x) for x in cashflows]
    if not cfs:
        return 0.0
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        return float(npf.npv(float(rate_percent) / 100.0, cfs))


# ---------- IRR (periodic) ----------
def irr(cashflows: Iterable[float], precision: float = 0.0001) -> float:
    """
    Bisection on NPV(r) = 0 over [-0.999999, 100] (fractions).

    Needs at least two flows and a negative first flow, otherwise returns 0.0
    ("not computable"). The search assumes NPV falls as the rate rises, which
    holds for an outlay followed by inflows; sign-alternating series may land
    on a root that is not the economically meaningful one.

    Returns the first midpoint with |NPV| < precision, or the midpoint of
    the final bracket after IRR_MAX_ITERATIONS halvings.
    """
    cfs = [float(x) for x in cashflows]
    if len(cfs) < 2 or cfs[0] >= 0:
        logger.warning("IRR not computable for cash flows starting %s (n=%d)",
                       cfs[0] if cfs else None, len(cfs))
        return 0.0

    low, high = IRR_LOW, IRR_HIGH
    for _ in range(IRR_MAX_ITERATIONS):
        mid = (low + high) / 2.0
        value = npv(cfs, mid * 100.0)
        if abs(value) < precision:
            return mid
        if value > 0:
            low = mid
        else:
            high = mid

    logger.debug("IRR bisection hit %d iterations; returning bracket midpoint",
                 IRR_MAX_ITERATIONS)
    return (low + high) / 2.0


__all__ = ["present_value", "npv", "irr"]
