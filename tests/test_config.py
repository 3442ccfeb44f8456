from __future__ import annotations

from pathlib import Path

from shadowcombat.config import CombatConfig, load_config, save_config


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    assert load_config(tmp_path / "missing.json") == CombatConfig()
    assert load_config() == CombatConfig()


def test_save_then_load_config(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "combat.json"
    config = CombatConfig(endure_energy_cost=2, vulnerable_lp_threshold=4, vulnerable_health_ratio=0.25)

    save_config(config, path)

    assert load_config(path) == config


def test_load_config_ignores_invalid_values(tmp_path: Path) -> None:
    path = tmp_path / "combat.json"
    path.write_text('{"endure_energy_cost": -1, "vulnerable_lp_threshold": true, "desperate_hp_ratio": 0.4}')

    config = load_config(path)

    assert config.endure_energy_cost == 0
    assert config.vulnerable_lp_threshold == 5
    assert config.desperate_hp_ratio == 0.4


def test_load_config_falls_back_on_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "combat.json"
    path.write_text("{not json")

    assert load_config(path) == CombatConfig()


def test_load_config_falls_back_on_non_object(tmp_path: Path) -> None:
    path = tmp_path / "combat.json"
    path.write_text("[1, 2]")

    assert load_config(path) == CombatConfig()
