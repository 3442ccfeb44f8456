"""Runtime ability models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from shadowcombat.domain.defs import AbilityEffectDef


@dataclass(slots=True)
class Ability:
    """An antagonist ability with its own cooldown counter."""

    id: str
    name: str
    cooldown: int
    description: str
    effects: Tuple[AbilityEffectDef, ...] = ()
    current_cooldown: int = 0

    @property
    def is_ready(self) -> bool:
        return self.current_cooldown == 0
