from __future__ import annotations

from pathlib import Path

import pytest

from wse_finance.types import ProjectInputs

ROOT = Path(__file__).resolve().parents[1]
REFERENCE_CASE = ROOT / "wse_finance" / "inputs" / "scenarios" / "reference_case.yaml"

REFERENCE_PARAMS = {
    "energy_output": 10000,
    "capex": 1000000,
    "opex_percent": 2,
    "project_life": 20,
    "finance_term": 10,
    "debt_equity_ratio": 70,
    "interest_rate": 6,
    "discount_rate": 8,
    "tariff": 80,
    "rec": 20,
}


@pytest.fixture
def reference_params() -> dict:
    return dict(REFERENCE_PARAMS)


@pytest.fixture
def reference_inputs() -> ProjectInputs:
    """1 MAUD project, 70 % debt at 6 % over 10 years, 20-year life."""
    return ProjectInputs(**REFERENCE_PARAMS)


@pytest.fixture
def reference_yaml() -> Path:
    return REFERENCE_CASE


@pytest.fixture
def write_yaml(tmp_path):
    def _write(name: str, text: str) -> Path:
        f = tmp_path / name
        f.write_text(text, encoding="utf-8")
        return f
    return _write
