from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class ProjectInputs:
    """Scalar project parameters. Rates and ratios are in percent."""

    energy_output: float        # MWh/year
    capex: float
    opex_percent: float         # % of capex per year
    project_life: int           # operating years
    finance_term: int           # years of debt service
    debt_equity_ratio: float    # % of capex financed by debt
    interest_rate: float
    discount_rate: float
    tariff: float               # per MWh
    rec: float = 0.0            # per MWh
    development_time: float = 0.0  # informational only

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))


@dataclass(frozen=True)
class ScheduleRow:
    year: int
    capex: float
    opex: float
    revenue: float
    debt_repayment: float
    principal_repayment: float
    interest_payment: float
    remaining_debt: float
    net_cash_flow: float
    equity_cash_flow: float
    discounted_equity_cash_flow: float
    cumulative_discounted_cash: float


@dataclass(frozen=True)
class Metrics:
    lcoe: float
    equity_npv: float
    equity_irr: float   # percent
    project_npv: float
    project_irr: float  # percent


@dataclass(frozen=True)
class Result:
    inputs: ProjectInputs
    metrics: Metrics
    detailed_rows: Tuple[ScheduleRow, ...] = field(default_factory=tuple)

    def as_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["detailed_rows"] = list(d["detailed_rows"])
        return d


__all__ = ["ProjectInputs", "ScheduleRow", "Metrics", "Result"]
