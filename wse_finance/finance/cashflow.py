from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional, Tuple

from wse_finance.types import Metrics, ProjectInputs, Result, ScheduleRow
from wse_finance.finance.debt import debt_service, level_payment
from wse_finance.finance.irr import irr, npv, present_value
from wse_finance.finance.metrics import lcoe

logger = logging.getLogger(__name__)


class _Carry(NamedTuple):
    """State handed from one operating year to the next."""

    remaining_debt: float
    equity_npv: float


def build_schedule(p: ProjectInputs) -> Optional[Result]:
    """
    Year-by-year project and equity cash flows plus summary metrics.

    Returns None when finance_term is outside (0, project_life]. Numeric
    degeneracies (non-finite payment, zero energy, IRR not computable) do
    not abort the schedule; they surface as 0 / inf per the helpers.
    """
    if p.finance_term <= 0 or p.finance_term > p.project_life:
        logger.error("Invalid finance term %s for project life %s",
                     p.finance_term, p.project_life)
        return None

    annual_revenue = p.energy_output * (p.tariff + p.rec)
    opex_annual = p.capex * p.opex_percent / 100.0
    debt_amount = p.capex * p.debt_equity_ratio / 100.0
    equity_amount = p.capex - debt_amount

    annual_debt_payment = level_payment(debt_amount, p.interest_rate, p.finance_term)

    rows: List[ScheduleRow] = [
        ScheduleRow(
            year=0,
            capex=p.capex,
            opex=0.0,
            revenue=0.0,
            debt_repayment=0.0,
            principal_repayment=0.0,
            interest_payment=0.0,
            remaining_debt=debt_amount,
            net_cash_flow=-p.capex,
            equity_cash_flow=-equity_amount,
            discounted_equity_cash_flow=-equity_amount,
            cumulative_discounted_cash=-equity_amount,
        )
    ]
    project_cfs: List[float] = [-p.capex]
    equity_cfs: List[float] = [-equity_amount]

    carry = _Carry(remaining_debt=debt_amount, equity_npv=-equity_amount)
    for year in range(1, p.project_life + 1):
        row, carry = _operating_year(p, year, carry, annual_revenue, opex_annual,
                                     annual_debt_payment)
        rows.append(row)
        project_cfs.append(row.net_cash_flow)
        equity_cfs.append(row.equity_cash_flow)

    metrics = Metrics(
        lcoe=lcoe(p.capex, opex_annual, p.energy_output, p.project_life, p.discount_rate),
        equity_npv=carry.equity_npv,
        equity_irr=irr(equity_cfs) * 100.0,
        project_npv=npv(project_cfs, p.discount_rate),
        project_irr=irr(project_cfs) * 100.0,
    )
    logger.info(
        "Schedule built: %d rows, project NPV %.2f, equity NPV %.2f, LCOE %.4f",
        len(rows), metrics.project_npv, metrics.equity_npv, metrics.lcoe,
    )
    return Result(inputs=p, metrics=metrics, detailed_rows=tuple(rows))


def _operating_year(
    p: ProjectInputs,
    year: int,
    carry: _Carry,
    annual_revenue: float,
    opex_annual: float,
    annual_debt_payment: float,
) -> Tuple[ScheduleRow, _Carry]:
    if year <= p.finance_term and carry.remaining_debt > 0:
        ds = debt_service(carry.remaining_debt, annual_debt_payment, p.interest_rate,
                          final=(year == p.finance_term))
        interest, principal, repayment, remaining = ds
    else:
        interest = principal = repayment = 0.0
        remaining = carry.remaining_debt

    # project cash flow is financing-independent
    project_cf = annual_revenue - opex_annual
    equity_cf = project_cf - repayment
    discounted = present_value(equity_cf, p.discount_rate, year)
    equity_npv = carry.equity_npv + discounted

    row = ScheduleRow(
        year=year,
        capex=0.0,
        opex=opex_annual,
        revenue=annual_revenue,
        debt_repayment=repayment,
        principal_repayment=principal,
        interest_payment=interest,
        remaining_debt=remaining,
        net_cash_flow=project_cf,
        equity_cash_flow=equity_cf,
        discounted_equity_cash_flow=discounted,
        cumulative_discounted_cash=equity_npv,
    )
    return row, _Carry(remaining_debt=remaining, equity_npv=equity_npv)


__all__ = ["build_schedule"]
