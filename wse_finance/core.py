# wse_finance/core.py
"""
Thin facade for callers holding a plain parameter dict. Uses adapters + the
cash-flow builder under the hood.
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from .adapters import inputs_from_params
from .config import canonical_keys
from .finance.cashflow import build_schedule
from .types import Result


def build_financial_model(params: Dict[str, Any], *, mode: str = "relaxed") -> Optional[Result]:
    """
    Validate `params` (snake_case or camelCase keys) and build the schedule.
    Returns None only when the core rejects the finance term; bad values
    raise validate.ValidationError first.
    """
    return build_schedule(inputs_from_params(canonical_keys(params), mode=mode))
