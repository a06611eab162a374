from __future__ import annotations

from typing import Any, Dict
import io
import logging
import os
import yaml

from .schema import ALIASES

logger = logging.getLogger(__name__)


def _parse_yaml_fallback(text: str) -> Dict[str, Any]:
    """
    Super-tolerant parser for key: value lines (only for emergencies).
    Booleans and numbers are coerced when obvious.
    """
    data: Dict[str, Any] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if ":" not in line:
            continue
        k, v = line.split(":", 1)
        k = k.strip()
        v = v.strip().strip('"').strip("'")
        if v.lower() in ("true", "false"):
            data[k] = v.lower() == "true"
            continue
        try:
            data[k] = float(v) if any(c in v for c in ".eE") else int(v)
        except ValueError:
            data[k] = v
    return data


def _flatten_grouped(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Flatten shallow groups like {'finance': {...}, 'plant': {...}} into one level.
    Prefers top-level keys if collisions occur.
    """
    flat: Dict[str, Any] = {k: v for k, v in cfg.items() if not isinstance(v, dict)}
    for v in cfg.values():
        if isinstance(v, dict):
            for sk, sv in v.items():
                flat.setdefault(sk, sv)
    return flat


def canonical_keys(d: Dict[str, Any]) -> Dict[str, Any]:
    """Map camelCase aliases (energyOutput, ...) onto snake_case names; snake_case wins."""
    out: Dict[str, Any] = {}
    for k, v in d.items():
        out.setdefault(ALIASES.get(k, k), v)
    for k, v in d.items():
        if k not in ALIASES:
            out[k] = v
    return out


def load_model_config(source: str | os.PathLike | io.StringIO) -> Dict[str, Any]:
    """
    Load YAML (or JSON) from a path or text stream into one flat dict with
    canonical key names. If YAML fails, use a tolerant fallback.
    """
    text: str
    if hasattr(source, "read"):
        text = str(source.read())
    else:
        p = os.fspath(source)
        with open(p, "r", encoding="utf-8") as f:
            text = f.read()

    try:
        cfg = yaml.safe_load(text) or {}
        if not isinstance(cfg, dict):
            cfg = {}
    except yaml.YAMLError as e:
        logger.warning("YAML parse failed (%s); falling back to key: value lines", e)
        cfg = _parse_yaml_fallback(text)

    return canonical_keys(_flatten_grouped(cfg))
