# wse_finance/cli.py
from __future__ import annotations

import argparse
import logging
import os
import re
import sys
from pathlib import Path

from .adapters import inputs_from_params
from .log import setup_logging
from .projects import ProjectNotFound, ProjectStore
from .reporting.formatting import metric_display
from .scenario_runner import FORMATS, RunResult, run_dir, run_inputs
from .validate import ValidationError, _mode_from_env_or_flag, load_params_from_file

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="wse_finance",
        description="WSE project finance model CLI (LCOE, NPV, IRR)",
    )
    p.add_argument(
        "--mode",
        default="calc",
        choices=["calc", "save", "list", "delete"],
        help="calc: compute and export; save/list/delete: manage named projects (default: calc).",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to a project YAML/JSON file, or a directory of them.",
    )
    p.add_argument(
        "--name",
        default=None,
        help="Named project: loaded by calc when --config is omitted, required by save/delete.",
    )
    p.add_argument(
        "--outputs-dir",
        default="outputs",
        help="Directory to write result files (default: outputs). Will be created if missing.",
    )
    p.add_argument(
        "--format",
        dest="fmt",
        default="csv",
        choices=list(FORMATS),
        help="csv/jsonl: per-year table format with --save-annual; pdf: also write the PDF summary.",
    )
    p.add_argument(
        "--save-annual",
        action="store_true",
        help="If set, write the per-year table alongside summary.json.",
    )
    p.add_argument(
        "--store",
        default=None,
        help="Projects file (default: $WSE_PROJECTS_FILE or ~/.wse_finance/projects.json).",
    )
    v = p.add_mutually_exclusive_group()
    v.add_argument(
        "--strict",
        action="store_true",
        help="Enable strict validation (all keys required, unknown keys raise).",
    )
    v.add_argument(
        "--relaxed",
        action="store_true",
        help="Enable relaxed validation (optional keys default, unknown keys ignored).",
    )
    p.add_argument("--verbose", "-v", action="store_true", help="Log progress at INFO level.")
    p.add_argument("--log-json", action="store_true", help="Emit log records as JSON lines.")
    return p.parse_args(argv)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return _parse_args(argv)


def _apply_validation_mode(ns: argparse.Namespace) -> None:
    # Default: leave env as-is; flags override explicitly.
    if ns.strict:
        os.environ["VALIDATION_MODE"] = "strict"
    elif ns.relaxed:
        os.environ["VALIDATION_MODE"] = "relaxed"


def _print_metrics(label: str, run: RunResult) -> None:
    print(f"== {label}")
    for name, value in metric_display(run.result).items():
        print(f"{name:<12} {value:>20}")
    print(f"summary: {run.summary_path}")
    for extra in (run.results_path, run.report_path):
        if extra is not None:
            print(f"wrote:   {extra}")


def _calc(ns: argparse.Namespace, store: ProjectStore, outputs_dir: Path) -> int:
    if ns.config:
        res = run_dir(Path(ns.config).resolve(), outputs_dir, fmt=ns.fmt,
                      save_annual=ns.save_annual, project_name=ns.name)
        runs = res if isinstance(res, dict) else {Path(ns.config).name: res}
    elif ns.name:
        inputs = store.load(ns.name)
        stem = re.sub(r"[^a-z0-9]", "_", ns.name, flags=re.IGNORECASE).lower()
        runs = {ns.name: run_inputs(inputs, outputs_dir, fmt=ns.fmt, save_annual=ns.save_annual,
                                    project_name=ns.name, stem=stem)}
    else:
        print("ERROR: calc needs --config or --name", file=sys.stderr)
        return 2

    for label, run in runs.items():
        _print_metrics(label, run)
    return 0


def _save(ns: argparse.Namespace, store: ProjectStore) -> int:
    if not (ns.config and ns.name):
        print("ERROR: save needs --config and --name", file=sys.stderr)
        return 2
    params = load_params_from_file(Path(ns.config))
    store.save(ns.name, inputs_from_params(params, mode=_mode_from_env_or_flag(None)))
    print(f"Saved project: {ns.name}")
    return 0


def main(argv: list[str] | None = None) -> int:
    ns = _parse_args(argv)
    _apply_validation_mode(ns)
    setup_logging(json_format=ns.log_json, level=logging.INFO if ns.verbose else logging.WARNING)

    store = ProjectStore(ns.store)
    outputs_dir = Path(ns.outputs_dir).resolve()

    try:
        if ns.mode == "calc":
            outputs_dir.mkdir(parents=True, exist_ok=True)
            return _calc(ns, store, outputs_dir)
        if ns.mode == "save":
            return _save(ns, store)
        if ns.mode == "list":
            for name in store.names():
                print(name)
            return 0
        if ns.mode == "delete":
            if not ns.name:
                print("ERROR: delete needs --name", file=sys.stderr)
                return 2
            store.delete(ns.name)
            print(f"Deleted project: {ns.name}")
            return 0
    except ValidationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except ProjectNotFound as e:
        print(f"ERROR: project not found: {e.args[0]}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        # Fail noisily with non-zero; keep traceback for debugging
        logger.debug("run failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 2


__all__ = ["main", "parse_args"]
