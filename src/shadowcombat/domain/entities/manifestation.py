"""Manifestation runtime models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from shadowcombat.core.types import ManifestationCategory
from shadowcombat.domain.defs import VictoryRewardDef

from .ability import Ability


@dataclass(slots=True)
class Manifestation:
    """Represents a spawned shadow antagonist ready for an encounter."""

    id: str
    name: str
    category: ManifestationCategory
    description: str
    current_hp: int
    max_hp: int
    therapeutic_insight: str
    victory_reward: VictoryRewardDef
    abilities: List[Ability] = field(default_factory=list)
    signature_ability_id: str | None = None

    @property
    def is_defeated(self) -> bool:
        return self.current_hp <= 0

    @property
    def hp_ratio(self) -> float:
        if self.max_hp <= 0:
            return 0.0
        return self.current_hp / self.max_hp

    @property
    def signature_ability(self) -> Ability | None:
        """Return the designated signature ability, defaulting to the first one."""
        if self.signature_ability_id is not None:
            for ability in self.abilities:
                if ability.id == self.signature_ability_id:
                    return ability
        return self.abilities[0] if self.abilities else None

    def get_ability(self, ability_id: str) -> Ability | None:
        for ability in self.abilities:
            if ability.id == ability_id:
                return ability
        return None
