"""Helpers for resolving data file locations."""
from __future__ import annotations

from pathlib import Path

_BUNDLED_DEFINITIONS = Path(__file__).resolve().parent / "definitions"


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the directory holding the JSON catalogs; the bundled one unless overridden."""
    if base_path is not None:
        return Path(base_path)
    return _BUNDLED_DEFINITIONS
