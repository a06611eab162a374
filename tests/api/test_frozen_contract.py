import importlib
import inspect
from pathlib import Path


def _param_names(fn):
    return [p.name for p in inspect.signature(fn).parameters.values()]


def test_finance_irr_public_api_is_stable():
    """Lock down that IRR/NPV live in finance.irr with a stable entrypoint."""
    m = importlib.import_module("wse_finance.finance.irr")
    assert hasattr(m, "irr") and callable(m.irr)
    assert hasattr(m, "npv") and callable(m.npv)

    # Keep the first parameter names stable to avoid accidental API churn.
    assert _param_names(m.irr)[:2] == ["cashflows", "precision"]
    assert _param_names(m.npv)[:2] == ["cashflows", "rate_percent"]

    # The math module stays free of package imports.
    src = Path(m.__file__).read_text(encoding="utf-8")
    for forbidden in ("from wse_finance", "import wse_finance", "build_schedule"):
        assert forbidden not in src, f"Unexpected dependency '{forbidden}' inside finance/irr.py"


def test_build_schedule_signature():
    pkg = importlib.import_module("wse_finance")
    assert _param_names(pkg.build_schedule) == ["p"]
    for name in ("ProjectInputs", "ScheduleRow", "Metrics", "Result"):
        assert hasattr(pkg, name)


def test_adapters_summary_shape(reference_inputs):
    a = importlib.import_module("wse_finance.adapters")
    from wse_finance import build_schedule

    res = a.summary_from_result(build_schedule(reference_inputs), "Ref")
    assert isinstance(res, dict)
    for k in ("project_name", "lcoe", "equity_npv", "equity_irr", "project_npv", "project_irr",
              "inputs", "annual"):
        assert k in res
    assert set(res["annual"][0]) == {"year", "net_cash_flow", "equity_cash_flow", "remaining_debt"}


def test_validate_exports_are_stable():
    """validate module must expose these helpers (names kept stable)."""
    v = importlib.import_module("wse_finance.validate")
    for name in ("validate_params_dict", "load_params_from_file", "ValidationError"):
        obj = getattr(v, name, None)
        assert callable(obj), f"Missing or non-callable export: {name}"


def test_scenario_runner_run_dir_api_minimal(tmp_path):
    """run_dir must accept (cfg_path, out_dir, ...) and return a summary-like object."""
    r = importlib.import_module("wse_finance.scenario_runner")
    assert hasattr(r, "run_dir") and callable(r.run_dir)

    cfg = tmp_path / "cfg.yaml"
    cfg.write_text(
        "plant: { energy_output: 1000, project_life: 1 }\n"
        "costs: { capex: 1, opex_percent: 0 }\n"
        "finance: { finance_term: 1, debt_equity_ratio: 0, interest_rate: 0, discount_rate: 12 }\n"
        "revenue: { tariff: 1 }\n",
        encoding="utf-8",
    )
    out = tmp_path / "o"
    out.mkdir(parents=True, exist_ok=True)

    res = r.run_dir(cfg, out, fmt="jsonl", save_annual=False)
    summary = getattr(res, "summary", res)
    assert isinstance(summary, dict)
    assert "equity_npv" in summary
    assert (out / "summary.json").exists()
