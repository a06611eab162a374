# wse_finance/adapters.py
from __future__ import annotations

import math
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from wse_finance.types import ProjectInputs, Result, ScheduleRow
from wse_finance.validate import validate_params_dict

# Per-year fields carried in summary.json
ANNUAL_KEYS = ("year", "net_cash_flow", "equity_cash_flow", "remaining_debt")


# ------------------------------
# Small helpers (no policy here)
# ------------------------------
def _finite_or_none(v: float) -> Optional[float]:
    """JSON has no inf/nan; degenerate values are written as null."""
    return float(v) if math.isfinite(v) else None


def _json_row(row: ScheduleRow) -> Dict[str, Any]:
    d = asdict(row)
    return {k: v if k == "year" else _finite_or_none(v) for k, v in d.items()}


# ------------------------------
# Public adapter(s)
# ------------------------------
def inputs_from_params(params: Dict[str, Any], *, mode: str = "relaxed") -> ProjectInputs:
    """
    Validate a flat parameter mapping (see config.load_model_config) and
    build the immutable ProjectInputs record the core expects.
    Raises validate.ValidationError on bad input.
    """
    cleaned = validate_params_dict(params, mode=mode)
    return ProjectInputs(**{k: cleaned[k] for k in ProjectInputs.field_names()})


def annual_rows(result: Result) -> List[Dict[str, Any]]:
    """Schedule rows as JSON-safe dicts (non-finite values become None)."""
    return [_json_row(r) for r in result.detailed_rows]


def summary_from_result(result: Result, project_name: str | None = None) -> Dict[str, Any]:
    """
    Flat summary for summary.json:
      {
        'project_name': str|None,
        'lcoe': float|None, 'equity_npv': ..., 'equity_irr': ..., 'project_npv': ..., 'project_irr': ...,
        'inputs': {...},
        'annual': [{'year': i, 'net_cash_flow': ..., 'equity_cash_flow': ..., 'remaining_debt': ...}, ...],
      }
    IRRs are in percent.
    """
    m = result.metrics
    annual: List[Dict[str, Any]] = [
        {k: row[k] for k in ANNUAL_KEYS} for row in annual_rows(result)
    ]
    return {
        "project_name": project_name,
        "lcoe": _finite_or_none(m.lcoe),
        "equity_npv": _finite_or_none(m.equity_npv),
        "equity_irr": _finite_or_none(m.equity_irr),
        "project_npv": _finite_or_none(m.project_npv),
        "project_irr": _finite_or_none(m.project_irr),
        "inputs": result.as_dict()["inputs"],
        "annual": annual,
    }


__all__ = ["inputs_from_params", "annual_rows", "summary_from_result"]
