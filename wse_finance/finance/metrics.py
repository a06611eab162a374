"""
Finance metrics façade.

Design:
- IRR/NPV implementations live only in wse_finance.finance.irr (singleton).
- This module must not *define* irr/npv; it re-exports them next to LCOE.
"""
from __future__ import annotations

import logging
import math

from .irr import irr as irr, npv as npv, present_value

logger = logging.getLogger(__name__)


def lcoe(
    capex: float,
    opex_annual: float,
    energy_output: float,
    project_life: int,
    discount_rate_percent: float,
) -> float:
    """
    Levelized cost of energy: discounted lifetime cost / discounted lifetime output.

        LCOE = (CAPEX + sum_{t=1..N} PV(opex)) / sum_{t=1..N} PV(energy)

    Opex and energy are flat across the horizon. If discounted energy is
    zero the result is inf (nan when costs are zero too); callers guard
    before display.
    """
    years = range(1, int(project_life) + 1)
    cost = float(capex) + sum(present_value(opex_annual, discount_rate_percent, t) for t in years)
    energy = sum(present_value(energy_output, discount_rate_percent, t) for t in years)
    if energy == 0:
        logger.warning("LCOE undefined: discounted energy output is zero")
        return math.nan if cost == 0 else math.copysign(math.inf, cost)
    return cost / energy


__all__ = ["lcoe", "npv", "irr"]
