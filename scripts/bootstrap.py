"""Bootstrap helpers shared across command-line entry points."""
from __future__ import annotations

import sys
from functools import lru_cache
from pathlib import Path

import yaml


def _resolve_project_root() -> Path:
    """Return the repository root containing the ``src`` package."""

    current = Path(__file__).resolve().parents[1]
    marker = current / "src"
    if not marker.exists():
        raise RuntimeError(
            "Could not locate the project root. Expected a 'src' directory next to scripts/."
        )
    return current


@lru_cache(maxsize=1)
def bootstrap_project() -> Path:
    """Ensure the repository root is present on ``sys.path``.

    Cached so repeated calls from several scripts only touch ``sys.path`` once.
    """

    project_root = _resolve_project_root()
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)
    return project_root


def load_config(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with path.open("r", encoding="utf-8") as file:
        data = yaml.safe_load(file)

    if not isinstance(data, dict):
        raise ValueError("The configuration file must contain a mapping at the top level.")
    return data


def resolve_path(path: Path) -> Path:
    if path.is_absolute():
        return path
    return (bootstrap_project() / path).resolve()
