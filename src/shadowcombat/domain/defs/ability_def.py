"""Ability definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from shadowcombat.core.types import EffectKind, ResourceKind


@dataclass(frozen=True, slots=True)
class AbilityEffectDef:
    """One tagged step of an ability effect."""

    kind: EffectKind
    amount: int = 0
    factor: float = 1.0
    target: ResourceKind | None = None


@dataclass(slots=True)
class AbilityDef:
    """Describes a cooldown-gated antagonist ability."""

    id: str
    name: str
    cooldown: int
    description: str
    effects: Tuple[AbilityEffectDef, ...]
