"""
Financial table export.

Layout: a "Project Summary" block of labelled inputs, a "Key Metrics"
block, two blank lines, then one row per year. The cumulative undiscounted
column is rebuilt here from net cash flow; the schedule does not store it.
Numbers are plain, two decimals, no thousands separators.
"""
from __future__ import annotations

import csv
import io
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, List

import pandas as pd

from wse_finance.schema import METRICS, SCHEMA
from wse_finance.types import Result

logger = logging.getLogger(__name__)

SUMMARY_KEYS = (
    "energy_output", "capex", "opex_percent", "project_life", "development_time",
    "discount_rate", "finance_term", "debt_equity_ratio", "interest_rate", "tariff", "rec",
)
METRIC_KEYS = ("lcoe", "equity_npv", "equity_irr", "project_npv", "project_irr")

# table header -> schedule column
TABLE_COLUMNS = {
    "Year": "year",
    "CAPEX": "capex",
    "Revenue": "revenue",
    "OPEX": "opex",
    "Debt Payment": "debt_repayment",
    "Principal": "principal_repayment",
    "Interest": "interest_payment",
    "Net Cash Flow": "net_cash_flow",
    "Discounted Cash Flow": "discounted_equity_cash_flow",
}


def _num(value: Any) -> str:
    if value is None:
        return "0"
    return f"{float(value):.2f}"


def financial_table_frame(result: Result) -> pd.DataFrame:
    """Per-year table with both cumulative columns."""
    rows = pd.DataFrame([asdict(r) for r in result.detailed_rows])
    table = pd.DataFrame({header: rows[col] for header, col in TABLE_COLUMNS.items()})
    table["Cumulative Undiscounted Cash"] = rows["net_cash_flow"].cumsum()
    table["Cumulative Discounted Cash (NPV)"] = rows["discounted_equity_cash_flow"].cumsum()
    return table


def _summary_lines(result: Result) -> List[List[str]]:
    inputs = asdict(result.inputs)
    lines: List[List[str]] = [["Project Summary"]]
    for key in SUMMARY_KEYS:
        spec = SCHEMA[key]
        value = inputs[key]
        text = str(value) if spec["type"] == "int" else _num(value)
        lines.append([f"{spec['label']} ({spec['unit']})", text])
    lines.append([])
    lines.append(["Key Metrics"])
    for key in METRIC_KEYS:
        meta = METRICS[key]
        lines.append([f"{meta['label']} ({meta['unit']})", _num(getattr(result.metrics, key))])
    lines.extend([[], []])
    return lines


def financial_table_csv(result: Result) -> str:
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\n")
    w.writerows(_summary_lines(result))
    financial_table_frame(result).to_csv(buf, index=False, float_format="%.2f", lineterminator="\n")
    return buf.getvalue()


def write_financial_table(result: Result, path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(financial_table_csv(result), encoding="utf-8")
    logger.info("Financial table written to %s", out)
    return out


__all__ = ["financial_table_frame", "financial_table_csv", "write_financial_table"]
