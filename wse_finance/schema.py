from __future__ import annotations
from typing import Dict, Any

# Parameter schema: units, type, min/max ranges, report label and description.
# Order matches the project summary in exports.
SCHEMA: Dict[str, Dict[str, Any]] = {
    "energy_output":     {"unit": "MWh/year", "type": "float", "min": 0.0, "max": float("inf"), "exclusive_min": True,
                          "label": "Energy Output",     "desc": "Energy produced per year"},
    "capex":             {"unit": "AUD",      "type": "float", "min": 0.0, "max": float("inf"),
                          "label": "CAPEX",             "desc": "Upfront capital cost"},
    "opex_percent":      {"unit": "% of CAPEX", "type": "float", "min": 0.0, "max": float("inf"),
                          "label": "OPEX",              "desc": "Annual operating cost as % of CAPEX"},
    "project_life":      {"unit": "years",    "type": "int",   "min": 1,   "max": 200,
                          "label": "Project Life",      "desc": "Operational years"},
    "development_time":  {"unit": "years",    "type": "float", "min": 0.0, "max": float("inf"),
                          "label": "Development Time",  "desc": "Informational only, not used in cash flows"},
    "discount_rate":     {"unit": "%",        "type": "float", "min": -99.999999, "max": float("inf"),
                          "label": "Discount Rate",     "desc": "Annual discount rate"},
    "finance_term":      {"unit": "years",    "type": "int",   "min": 1,   "max": 200,
                          "label": "Finance Term",      "desc": "Years of debt service"},
    "debt_equity_ratio": {"unit": "%",        "type": "float", "min": 0.0, "max": 100.0,
                          "label": "Debt/Equity Ratio", "desc": "% of CAPEX financed by debt"},
    "interest_rate":     {"unit": "%",        "type": "float", "min": 0.0, "max": float("inf"),
                          "label": "Interest Rate",     "desc": "Annual debt interest rate"},
    "tariff":            {"unit": "AUD/MWh",  "type": "float", "min": 0.0, "max": float("inf"),
                          "label": "Tariff",            "desc": "Energy sale price"},
    "rec":               {"unit": "AUD/MWh",  "type": "float", "min": 0.0, "max": float("inf"),
                          "label": "REC Value",         "desc": "Renewable energy certificate value"},
}

# Keys that may be omitted in relaxed mode, with their defaults.
OPTIONAL_DEFAULTS: Dict[str, Any] = {
    "rec": 0.0,
    "development_time": 0.0,
}

# camelCase names used by saved projects and the web form.
ALIASES: Dict[str, str] = {
    "energyOutput": "energy_output",
    "opexPercent": "opex_percent",
    "projectLife": "project_life",
    "developmentTime": "development_time",
    "discountRate": "discount_rate",
    "financeTerm": "finance_term",
    "debtEquityRatio": "debt_equity_ratio",
    "interestRate": "interest_rate",
}

# Composite constraints evaluated after scalar checks.
COMPOSITE_CONSTRAINTS = [
    {
        "name": "finance_term_within_life",
        "check": lambda p: 0 < p.get("finance_term", 0) <= p.get("project_life", 0),
        "message": "finance_term must be > 0 and <= project_life",
    },
]

# Display metadata for the summary metrics.
METRICS: Dict[str, Dict[str, str]] = {
    "lcoe":        {"label": "LCOE",        "unit": "AUD/MWh", "kind": "currency"},
    "project_npv": {"label": "Project NPV", "unit": "AUD",     "kind": "currency"},
    "project_irr": {"label": "Project IRR", "unit": "%",       "kind": "percent"},
    "equity_npv":  {"label": "Equity NPV",  "unit": "AUD",     "kind": "currency"},
    "equity_irr":  {"label": "Equity IRR",  "unit": "%",       "kind": "percent"},
}

# Non-numeric keys a project file may carry alongside the parameters.
META_KEYS = ("project_name",)
