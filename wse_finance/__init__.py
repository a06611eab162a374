"""WSE project finance model: cash-flow schedule, LCOE, NPV and IRR."""
from .finance.cashflow import build_schedule
from .types import Metrics, ProjectInputs, Result, ScheduleRow

__version__ = "0.1.0"

__all__ = ["build_schedule", "ProjectInputs", "ScheduleRow", "Metrics", "Result"]
