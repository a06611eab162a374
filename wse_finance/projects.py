# wse_finance/projects.py
"""
Named project storage: one JSON file mapping project name -> input values.

Default location is ~/.wse_finance/projects.json; set WSE_PROJECTS_FILE to
point somewhere else.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List

from .adapters import inputs_from_params
from .config import canonical_keys
from .types import ProjectInputs

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".wse_finance" / "projects.json"


class ProjectNotFound(KeyError):
    pass


def default_store_path() -> Path:
    env = os.environ.get("WSE_PROJECTS_FILE")
    return Path(env).expanduser() if env else DEFAULT_PATH


class ProjectStore:
    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else default_store_path()

    def _read(self) -> Dict[str, Dict[str, Any]]:
        if not self.path.exists():
            return {}
        text = self.path.read_text(encoding="utf-8")
        data = json.loads(text or "{}")
        if not isinstance(data, dict):
            raise ValueError(f"{self.path}: expected a JSON object of projects")
        return data

    def _write(self, data: Dict[str, Dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")

    def save(self, name: str, inputs: ProjectInputs) -> None:
        """Add or overwrite `name`."""
        name = name.strip()
        if not name:
            raise ValueError("project name must not be empty")
        data = self._read()
        data[name] = asdict(inputs)
        self._write(data)
        logger.info("Saved project %r to %s", name, self.path)

    def load(self, name: str) -> ProjectInputs:
        data = self._read()
        if name not in data:
            raise ProjectNotFound(name)
        # entries may use the camelCase form-field names
        return inputs_from_params(canonical_keys(data[name]))

    def names(self) -> List[str]:
        return sorted(self._read())

    def delete(self, name: str) -> None:
        data = self._read()
        if name not in data:
            raise ProjectNotFound(name)
        del data[name]
        self._write(data)
        logger.info("Deleted project %r from %s", name, self.path)


__all__ = ["ProjectStore", "ProjectNotFound", "default_store_path"]
