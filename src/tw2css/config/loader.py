"""YAML style-table loading and validation."""

from __future__ import annotations

from pathlib import Path

import yaml

from tw2css.types import StyleTable

_BUILTIN_TABLE = Path(__file__).resolve().parent.parent / "resolvers" / "tables" / "tailwind_core.yaml"


def load_style_table(path: str | Path) -> StyleTable:
    """Load a style-table YAML file and return a validated StyleTable."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Style table not found: {path}")

    with open(path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict) or "styles" not in raw:
        raise ValueError(f"Invalid style table: missing top-level 'styles' key in {path}")

    return StyleTable(**raw)


def load_builtin_style_table() -> StyleTable:
    """Load the style table shipped with the package."""
    return load_style_table(_BUILTIN_TABLE)
