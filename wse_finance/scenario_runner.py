# wse_finance/scenario_runner.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, List, Optional
from datetime import datetime
import json
import logging

from .adapters import annual_rows, inputs_from_params, summary_from_result
from .finance.cashflow import build_schedule
from .reporting.csv_export import write_financial_table
from .reporting.pdf_report import export_summary_pdf
from .types import ProjectInputs, Result
from .validate import _mode_from_env_or_flag, load_params_from_file

logger = logging.getLogger(__name__)

FORMATS = ("csv", "jsonl", "pdf")


@dataclass
class RunResult:
    summary: Dict[str, Any]
    summary_path: Path
    result: Result
    results_path: Optional[Path] = None
    report_path: Optional[Path] = None


def _write_jsonl(path: Path, rows: List[Dict[str, Any]]) -> None:
    with path.open("w", encoding="utf-8") as f:
        for row in rows:
            f.write(json.dumps(row, allow_nan=False) + "\n")


def run_inputs(
    inputs: ProjectInputs,
    out_dir: str | Path,
    *,
    fmt: str = "csv",
    save_annual: bool = False,
    project_name: str | None = None,
    stem: str = "project",
) -> RunResult:
    """Compute one project and write summary.json plus the requested artifacts."""
    if fmt not in FORMATS:
        raise ValueError(f"unknown fmt: {fmt}")

    result = build_schedule(inputs)
    if result is None:
        raise ValueError(
            f"{stem}: schedule rejected (finance_term={inputs.finance_term}, "
            f"project_life={inputs.project_life})"
        )

    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    summary = summary_from_result(result, project_name)
    summary_path = out / "summary.json"
    summary_path.write_text(json.dumps(summary, indent=2, allow_nan=False), encoding="utf-8")

    results_path: Optional[Path] = None
    if save_annual:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        base = f"{stem}_results_{stamp}"
        if fmt == "jsonl":
            results_path = out / f"{base}.jsonl"
            _write_jsonl(results_path, annual_rows(result))
        else:
            results_path = write_financial_table(result, out / f"{base}.csv")

    report_path: Optional[Path] = None
    if fmt == "pdf":
        report_path = export_summary_pdf(result, out, project_name or stem)

    return RunResult(summary=summary, summary_path=summary_path, result=result,
                     results_path=results_path, report_path=report_path)


def run_dir(
    config: str | Path,
    out_dir: str | Path,
    *,
    fmt: str = "csv",
    save_annual: bool = False,
    validation: str | None = None,
    project_name: str | None = None,
) -> RunResult | Dict[str, RunResult]:
    """
    Run one project file, or every *.yaml / *.yml / *.json file of a directory
    (each into its own sub-directory of `out_dir`, keyed by file name).
    """
    cfg_path = Path(config)
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    mode = _mode_from_env_or_flag(validation)

    if cfg_path.is_dir():
        files = [f for ext in ("*.yaml", "*.yml", "*.json") for f in sorted(cfg_path.glob(ext)) if f.is_file()]
        if not files:
            raise ValueError(f"{cfg_path}: no scenario files found")
        return {
            f.name: run_dir(f, out / f.stem, fmt=fmt, save_annual=save_annual, validation=mode)
            for f in files
        }

    params = load_params_from_file(cfg_path)
    inputs = inputs_from_params(params, mode=mode)
    name = project_name or params.get("project_name") or cfg_path.stem
    logger.info("Running %s (%s validation)", cfg_path, mode)
    return run_inputs(inputs, out, fmt=fmt, save_annual=save_annual,
                      project_name=name, stem=cfg_path.stem)


# Convenience wrappers
def run_single_scenario(cfg_path: str | Path, out_dir: str | Path, *, fmt: str = "csv"):
    return run_dir(Path(cfg_path), Path(out_dir), fmt=fmt, save_annual=False)


def run_matrix(dir_path: str | Path, out_dir: str | Path, pattern: str = "*.yaml", *, fmt: str = "csv"):
    d = Path(dir_path)
    o = Path(out_dir)
    o.mkdir(parents=True, exist_ok=True)
    results = {}
    for cfg in sorted(d.glob(pattern)):
        results[cfg.name] = run_dir(cfg, o / cfg.stem, fmt=fmt, save_annual=False)
    return results
