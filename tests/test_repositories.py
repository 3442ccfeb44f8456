import json
from pathlib import Path

import pytest

from shadowcombat.data.errors import DataLoadError, DataReferenceError, DataValidationError
from shadowcombat.data.repositories import AbilitiesRepository, ManifestationsRepository


def test_abilities_repo_loads_tagged_effects(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "abilities.json",
        {
            "echo": {
                "name": "Echo",
                "cooldown": 5,
                "description": "Old words return.",
                "effects": [
                    {"kind": "expose", "factor": 0.5},
                    {"kind": "gain", "target": "sp", "amount": 2},
                ],
            }
        },
    )
    repo = AbilitiesRepository(base_path=definitions_dir)

    ability = repo.get("echo")

    assert ability.cooldown == 5
    assert [effect.kind for effect in ability.effects] == ["expose", "gain"]
    assert ability.effects[0].factor == 0.5
    assert ability.effects[1].target == "sp"
    assert ability.effects[1].amount == 2
    with pytest.raises(KeyError):
        repo.get("missing")


def test_abilities_repo_rejects_unknown_kind(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "abilities.json",
        {"odd": {"name": "Odd", "cooldown": 1, "description": "?", "effects": [{"kind": "teleport"}]}},
    )

    with pytest.raises(DataValidationError):
        AbilitiesRepository(base_path=definitions_dir).all()


def test_abilities_repo_requires_target_for_drain(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "abilities.json",
        {"leak": {"name": "Leak", "cooldown": 1, "description": "?", "effects": [{"kind": "drain", "amount": 1}]}},
    )

    with pytest.raises(DataValidationError):
        AbilitiesRepository(base_path=definitions_dir).all()


def test_abilities_repo_rejects_boolean_cooldown(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "abilities.json",
        {"flag": {"name": "Flag", "cooldown": True, "description": "?", "effects": [{"kind": "skip_turn"}]}},
    )

    with pytest.raises(DataValidationError):
        AbilitiesRepository(base_path=definitions_dir).all()


def test_manifestations_repo_rejects_unknown_ability(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "abilities.json",
        {"sigh": {"name": "Sigh", "cooldown": 1, "description": "?", "effects": [{"kind": "skip_turn"}]}},
    )
    _write_json(definitions_dir / "manifestations.json", {"gloom": _manifestation_payload(["sigh", "ghost"])})
    abilities_repo = AbilitiesRepository(base_path=definitions_dir)

    with pytest.raises(DataReferenceError):
        ManifestationsRepository(base_path=definitions_dir, abilities_repo=abilities_repo).all()


def test_manifestations_repo_rejects_foreign_signature(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    payload = _manifestation_payload(["sigh"])
    payload["signature_ability"] = "sulk"
    _write_json(definitions_dir / "manifestations.json", {"gloom": payload})

    with pytest.raises(DataReferenceError):
        ManifestationsRepository(base_path=definitions_dir).all()


def test_manifestations_repo_requires_victory_reward_fields(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    payload = _manifestation_payload(["sigh"])
    payload["victory_reward"] = {"lp_bonus": 2}
    _write_json(definitions_dir / "manifestations.json", {"gloom": payload})

    with pytest.raises(DataValidationError):
        ManifestationsRepository(base_path=definitions_dir).all()


def test_missing_definition_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError):
        AbilitiesRepository(base_path=_make_definitions_dir(tmp_path)).all()


def test_bundled_catalogs_are_consistent() -> None:
    abilities_repo = AbilitiesRepository()
    manifestations_repo = ManifestationsRepository(abilities_repo=abilities_repo)

    manifestations = manifestations_repo.all()

    assert len(abilities_repo.all()) == 8
    assert [manifestation.id for manifestation in manifestations] == [
        "echo-of-past-pain",
        "storm-of-overwhelm",
        "veil-of-isolation",
        "whisper-of-doubt",
    ]
    for manifestation in manifestations:
        assert manifestation.signature_ability_id == manifestation.ability_ids[0]


def _manifestation_payload(ability_ids: list[str]) -> dict[str, object]:
    return {
        "name": "Gloom",
        "category": "doubt",
        "description": "A grey cloud.",
        "max_hp": 12,
        "abilities": ability_ids,
        "therapeutic_insight": "Clouds pass.",
        "victory_reward": {"lp_bonus": 3, "growth_message": "Clear.", "permanent_benefit": "Patience"},
    }


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    return definitions_dir


def _write_json(path: Path, data: dict[str, object]) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
