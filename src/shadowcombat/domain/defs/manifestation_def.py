"""Manifestation template structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from shadowcombat.core.types import ManifestationCategory


@dataclass(frozen=True, slots=True)
class VictoryRewardDef:
    """Reward granted when a manifestation is overcome."""

    lp_bonus: int
    growth_message: str
    permanent_benefit: str


@dataclass(slots=True)
class ManifestationDef:
    """Static template a runtime manifestation is cloned from."""

    id: str
    name: str
    category: ManifestationCategory
    description: str
    max_hp: int
    ability_ids: Tuple[str, ...]
    therapeutic_insight: str
    victory_reward: VictoryRewardDef
    signature_ability_id: str | None = None
