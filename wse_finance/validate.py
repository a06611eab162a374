# wse_finance/validate.py
from __future__ import annotations
import logging
import math
import os
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .config import load_model_config
from .schema import COMPOSITE_CONSTRAINTS, META_KEYS, OPTIONAL_DEFAULTS, SCHEMA

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Input parameters failed schema checks. `errors` lists every problem found."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def _mode_from_env_or_flag(flag: str | None) -> str:
    if flag in ("strict", "relaxed"):
        return flag
    env = (os.environ.get("VALIDATION_MODE") or "").lower()
    return env if env in ("strict", "relaxed") else "relaxed"


def _coerce(key: str, value: Any, spec: Dict[str, Any]) -> float | int:
    if isinstance(value, bool):
        raise ValueError(f"Invalid value for {key}: {value!r}")
    try:
        num = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid value for {key}: {value!r}") from None
    if not math.isfinite(num):
        raise ValueError(f"Invalid value for {key}: {value!r}")

    if spec.get("type") == "int":
        if not num.is_integer():
            raise ValueError(f"{key} must be a whole number of years: {value!r}")
        num = int(num)

    lo, hi = spec.get("min", float("-inf")), spec.get("max", float("inf"))
    below = num <= lo if spec.get("exclusive_min") else num < lo
    if below or num > hi:
        lo_s = f"({lo}" if spec.get("exclusive_min") else f"[{lo}"
        raise ValueError(f"{key} outside allowed range {lo_s}, {hi}]: {num}")
    return num


def validate_params_dict(data: Dict[str, Any], *, mode: str = "relaxed") -> Dict[str, Any]:
    """
    Check a flat parameter mapping against SCHEMA and return the cleaned copy.

      - relaxed: rec/development_time default to 0, unknown keys are dropped
      - strict : every schema key required, unknown keys rejected
    """
    errors: List[str] = []

    required = set(SCHEMA)
    if mode != "strict":
        required -= set(OPTIONAL_DEFAULTS)
    missing = sorted(k for k in required if k not in data)
    if missing:
        errors.append(f"missing required keys: {missing}")

    unknown = sorted(k for k in data if k not in SCHEMA and k not in META_KEYS)
    if unknown:
        if mode == "strict":
            errors.append(f"unknown keys (strict mode): {unknown}")
        else:
            logger.debug("Ignoring unknown keys: %s", unknown)

    cleaned: Dict[str, Any] = {}
    for key, spec in SCHEMA.items():
        if key not in data:
            if key in OPTIONAL_DEFAULTS and mode != "strict":
                cleaned[key] = OPTIONAL_DEFAULTS[key]
            continue
        try:
            cleaned[key] = _coerce(key, data[key], spec)
        except ValueError as e:
            errors.append(str(e))

    if not errors:
        for c in COMPOSITE_CONSTRAINTS:
            if not c["check"](cleaned):
                errors.append(c["message"])

    if errors:
        raise ValidationError(errors)
    return cleaned


def load_params_from_file(path: Path) -> Dict[str, Any]:
    p = Path(path)
    if p.is_dir():
        # scenario_runner handles directories; keep this function file-only
        raise ValidationError([f"{p} is a directory (expected a file)"])
    return load_model_config(p)


def _iter_input_files(p: Path) -> Iterable[Path]:
    if p.is_file():
        yield p
    elif p.is_dir():
        for ext in ("*.yaml", "*.yml", "*.json"):
            yield from sorted(p.rglob(ext))


def _main(argv: List[str] | None = None) -> int:
    import argparse
    parser = argparse.ArgumentParser(prog="wse_finance.validate", add_help=True)
    parser.add_argument("paths", nargs="+", help="YAML/JSON files or directories to validate")
    parser.add_argument("--mode", choices=["strict", "relaxed"], default=None, help="validation mode")
    args = parser.parse_args(argv)

    mode = _mode_from_env_or_flag(args.mode)
    had_error = False

    for raw in args.paths:
        target = Path(raw)
        any_seen = False
        for f in _iter_input_files(target):
            if not f.is_file():
                continue
            any_seen = True
            try:
                validate_params_dict(load_params_from_file(f), mode=mode)
                print(f"OK: {f}")
            except ValidationError as e:
                print(f"{f}: {e}", file=sys.stderr)
                had_error = True
            except OSError as e:
                print(f"{f}: ERROR: {e}", file=sys.stderr)
                had_error = True
        if not any_seen:
            print(f"{target}: no YAML/JSON files found", file=sys.stderr)
            had_error = True

    return 1 if had_error else 0


if __name__ == "__main__":
    raise SystemExit(_main())
