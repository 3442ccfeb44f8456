import json
from pathlib import Path

from shadowcombat.data.repositories import AbilitiesRepository, ManifestationsRepository
from shadowcombat.services.factories import create_manifestation


def test_create_manifestation_builds_fresh_instance(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _seed_minimal_definitions(definitions_dir)
    abilities_repo = AbilitiesRepository(base_path=definitions_dir)
    manifestations_repo = ManifestationsRepository(base_path=definitions_dir, abilities_repo=abilities_repo)

    enemy = create_manifestation("gloom", manifestations_repo=manifestations_repo, abilities_repo=abilities_repo)

    assert enemy is not None
    assert enemy.id == "gloom"
    assert enemy.name == "Gloom"
    assert enemy.current_hp == enemy.max_hp == 12
    assert [ability.id for ability in enemy.abilities] == ["sigh", "sulk"]
    assert all(ability.current_cooldown == 0 for ability in enemy.abilities)
    assert enemy.signature_ability is not None
    assert enemy.signature_ability.id == "sulk"
    assert enemy.victory_reward.lp_bonus == 3


def test_create_manifestation_instances_share_no_state(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _seed_minimal_definitions(definitions_dir)
    abilities_repo = AbilitiesRepository(base_path=definitions_dir)
    manifestations_repo = ManifestationsRepository(base_path=definitions_dir, abilities_repo=abilities_repo)

    first = create_manifestation("gloom", manifestations_repo=manifestations_repo, abilities_repo=abilities_repo)
    second = create_manifestation("gloom", manifestations_repo=manifestations_repo, abilities_repo=abilities_repo)
    assert first is not None and second is not None

    first.current_hp = 1
    first.abilities[0].current_cooldown = 2

    assert second.current_hp == 12
    assert second.abilities[0].current_cooldown == 0
    assert first.abilities[0] is not second.abilities[0]


def test_create_manifestation_returns_none_for_unknown_template(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _seed_minimal_definitions(definitions_dir)
    abilities_repo = AbilitiesRepository(base_path=definitions_dir)
    manifestations_repo = ManifestationsRepository(base_path=definitions_dir, abilities_repo=abilities_repo)

    assert create_manifestation("missing", manifestations_repo=manifestations_repo, abilities_repo=abilities_repo) is None


def test_create_manifestation_uses_bundled_catalog_by_default() -> None:
    enemy = create_manifestation("whisper-of-doubt")

    assert enemy is not None
    assert enemy.name == "The Whisper of Doubt"
    assert enemy.max_hp == 15
    assert [ability.id for ability in enemy.abilities] == ["self-questioning", "magnification"]


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    return definitions_dir


def _seed_minimal_definitions(definitions_dir: Path) -> None:
    _write_json(
        definitions_dir / "abilities.json",
        {
            "sigh": {
                "name": "Sigh",
                "cooldown": 2,
                "description": "A heavy sigh.",
                "effects": [{"kind": "drain", "target": "lp", "amount": 1}],
            },
            "sulk": {
                "name": "Sulk",
                "cooldown": 4,
                "description": "Everything feels grey.",
                "effects": [{"kind": "block_healing", "amount": 2}],
            },
        },
    )
    _write_json(
        definitions_dir / "manifestations.json",
        {
            "gloom": {
                "name": "Gloom",
                "category": "doubt",
                "description": "A grey cloud.",
                "max_hp": 12,
                "abilities": ["sigh", "sulk"],
                "signature_ability": "sulk",
                "therapeutic_insight": "Clouds pass.",
                "victory_reward": {
                    "lp_bonus": 3,
                    "growth_message": "The sky clears.",
                    "permanent_benefit": "Patience",
                },
            }
        },
    )


def _write_json(path: Path, data: dict[str, object]) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
