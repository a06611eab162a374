"""Display formatting for metrics and inputs (AUD, two decimals)."""
from __future__ import annotations

import math
from typing import Dict, List, Tuple

from wse_finance.schema import METRICS
from wse_finance.types import ProjectInputs, Result

MISSING = "-"


def format_decimal(value: float) -> str:
    """1234.5 -> '1,234.50'."""
    if value is None or not math.isfinite(value):
        return MISSING
    return f"{value:,.2f}"


def format_currency(value: float) -> str:
    """1234.5 -> '$1,234.50', -1234.5 -> '-$1,234.50' (en-AU style)."""
    if value is None or not math.isfinite(value):
        return MISSING
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_percent(value: float) -> str:
    """Value already in percent units: 12.345 -> '12.35%'."""
    if value is None or not math.isfinite(value):
        return MISSING
    return f"{value:,.2f}%"


def metric_display(result: Result) -> Dict[str, str]:
    """Label -> formatted value for each headline metric."""
    out: Dict[str, str] = {}
    for key, meta in METRICS.items():
        value = getattr(result.metrics, key)
        out[meta["label"]] = format_percent(value) if meta["kind"] == "percent" else format_currency(value)
    return out


def report_metric_rows(result: Result) -> List[Tuple[str, str]]:
    """Metric rows for printed reports; LCOE carries its per-MWh unit."""
    rows = list(metric_display(result).items())
    return [(label, f"{value}/MWh" if label == "LCOE" and value != MISSING else value)
            for label, value in rows]


def input_display(p: ProjectInputs) -> List[Tuple[str, str]]:
    return [
        ("Energy Output", f"{format_decimal(p.energy_output)} MWh/year"),
        ("CAPEX", format_currency(p.capex)),
        ("OPEX", f"{format_decimal(p.opex_percent)}% of CAPEX"),
        ("Project Life", f"{p.project_life} years"),
        ("Development Time", f"{format_decimal(p.development_time)} years"),
        ("Discount Rate", f"{format_decimal(p.discount_rate)}%"),
        ("Finance Term", f"{p.finance_term} years"),
        ("Debt/Equity Ratio", f"{format_decimal(p.debt_equity_ratio)}%"),
        ("Interest Rate", f"{format_decimal(p.interest_rate)}%"),
        ("Tariff", f"{format_currency(p.tariff)}/MWh"),
        ("REC Value", f"{format_currency(p.rec)}/MWh"),
    ]


__all__ = [
    "format_decimal",
    "format_currency",
    "format_percent",
    "metric_display",
    "report_metric_rows",
    "input_display",
]
