"""Combat configuration loaded from an optional JSON file.

The host application passes its config path to ``CombatService.from_definitions``
or calls ``load_config`` itself and hands the result to ``CombatService``.
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

log = logging.getLogger(__name__)


@dataclass(slots=True)
class CombatConfig:
    """Tunable values the surrounding application may override."""

    endure_energy_cost: int = 0
    vulnerable_lp_threshold: int = 5
    vulnerable_health_ratio: float = 0.3
    desperate_hp_ratio: float = 0.5


_INT_FIELDS = {"endure_energy_cost", "vulnerable_lp_threshold"}


def _normalize(raw: dict[str, object]) -> CombatConfig:
    config = CombatConfig()
    for config_field in fields(CombatConfig):
        value = raw.get(config_field.name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue
        if value < 0:
            continue
        if config_field.name in _INT_FIELDS:
            setattr(config, config_field.name, int(value))
        else:
            setattr(config, config_field.name, float(value))
    return config


def load_config(path: Path | str | None = None) -> CombatConfig:
    """Load config from disk, falling back to defaults for anything missing or invalid."""
    if path is None:
        return CombatConfig()
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return CombatConfig()
    except (OSError, ValueError) as exc:
        log.warning("Ignoring unreadable combat config %s: %s", config_path, exc)
        return CombatConfig()
    if not isinstance(raw, dict):
        log.warning("Ignoring combat config %s: expected a JSON object", config_path)
        return CombatConfig()
    return _normalize(raw)


def save_config(config: CombatConfig, path: Path | str) -> None:
    """Persist config to disk."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(asdict(config), indent=2, sort_keys=True), encoding="utf-8")
