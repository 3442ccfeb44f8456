"""Factory for creating manifestation instances from templates."""
from __future__ import annotations

from shadowcombat.data.repositories import AbilitiesRepository, ManifestationsRepository
from shadowcombat.domain.entities import Ability, Manifestation


def create_manifestation(
    template_id: str,
    manifestations_repo: ManifestationsRepository | None = None,
    abilities_repo: AbilitiesRepository | None = None,
) -> Manifestation | None:
    """
    Instantiate a fresh manifestation, or return None for an unknown template.

    HP starts at max and every ability starts off cooldown. Each call builds
    new ability objects, so two instances never share mutable state.
    """

    abilities_repo = abilities_repo or AbilitiesRepository()
    manifestations_repo = manifestations_repo or ManifestationsRepository(abilities_repo=abilities_repo)
    try:
        template = manifestations_repo.get(template_id)
    except KeyError:
        return None

    abilities = [
        Ability(
            id=ability_def.id,
            name=ability_def.name,
            cooldown=ability_def.cooldown,
            description=ability_def.description,
            effects=ability_def.effects,
            current_cooldown=0,
        )
        for ability_def in abilities_repo.get_many(template.ability_ids)
    ]
    return Manifestation(
        id=template.id,
        name=template.name,
        category=template.category,
        description=template.description,
        current_hp=template.max_hp,
        max_hp=template.max_hp,
        therapeutic_insight=template.therapeutic_insight,
        victory_reward=template.victory_reward,
        abilities=abilities,
        signature_ability_id=template.signature_ability_id,
    )
