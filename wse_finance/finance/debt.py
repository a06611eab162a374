# wse_finance/finance/debt.py
"""
Debt helpers used by the cash-flow builder:
 - level_payment(principal, annual_rate_percent, term_years)
 - debt_service(balance, payment, annual_rate_percent, final=...)
 - amortization_schedule(principal, annual_rate_percent, term_years)

Numbers are annual, rates in percent. Keep this module self-contained.
"""

from __future__ import annotations

import logging
import math
from typing import List, NamedTuple

import numpy as np
import numpy_financial as npf

logger = logging.getLogger(__name__)


class DebtService(NamedTuple):
    interest: float
    principal: float
    payment: float
    balance: float   # closing balance after this year's principal


def level_payment(principal: float, annual_rate_percent: float, term_years: int) -> float:
    """
    Fixed annual payment that retires `principal` over `term_years`.

    term <= 0 gives 0.0 (invalid term, caller decides), a zero rate gives
    straight-line principal / term, anything else the standard annuity
    P * r(1+r)^n / ((1+r)^n - 1). A non-finite result degrades to 0.0.
    """
    n = int(term_years)
    if n <= 0:
        return 0.0
    r = float(annual_rate_percent) / 100.0
    if r == 0:
        payment = float(principal) / n
    else:
        with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
            payment = -float(npf.pmt(r, n, float(principal)))

    if not math.isfinite(payment):
        logger.warning("Non-finite level payment for principal=%s rate=%s%% term=%s; using 0",
                       principal, annual_rate_percent, term_years)
        return 0.0
    return payment


def debt_service(
    balance: float,
    payment: float,
    annual_rate_percent: float,
    *,
    final: bool = False,
) -> DebtService:
    """
    One year of level-payment debt service on an opening `balance`.

    Interest accrues on the opening balance; the rest of the payment is
    principal. When the principal would exceed the balance, or on the
    `final` year of the term, principal is clamped to the balance and the
    payment becomes principal + interest.

    A zero payment (level_payment degraded) is never clamped: interest
    then capitalizes into the balance and no balloon is charged.
    """
    if balance <= 0:
        return DebtService(0.0, 0.0, 0.0, max(0.0, balance))

    interest = balance * annual_rate_percent / 100.0
    principal = payment - interest
    if balance < principal or (final and payment > 0):
        principal = balance
        interest = balance * annual_rate_percent / 100.0
        payment = principal + interest

    return DebtService(interest, principal, payment, max(0.0, balance - principal))


def amortization_schedule(
    principal: float,
    annual_rate_percent: float,
    term_years: int,
) -> List[DebtService]:
    """Annual steps (interest, principal, payment, closing balance) for a level loan."""
    n = int(term_years)
    payment = level_payment(principal, annual_rate_percent, n)
    out: List[DebtService] = []
    bal = float(principal)
    for y in range(1, n + 1):
        step = debt_service(bal, payment, annual_rate_percent, final=(y == n))
        out.append(step)
        bal = step.balance
    return out


__all__ = ["DebtService", "level_payment", "debt_service", "amortization_schedule"]
