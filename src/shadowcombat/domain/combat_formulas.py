"""Combat balance constants and pure damage / cost formulas."""
from __future__ import annotations

import math
from typing import Dict

from shadowcombat.core.types import RandomSource

# Player action costs and thresholds.
ILLUMINATE_LP_COST = 2
REFLECT_SP_COST = 3
EMBRACE_SP_REQUIRED = 5

# Illuminate: base + floor(level * scaling).
ILLUMINATE_BASE_DAMAGE = 3
ILLUMINATE_LEVEL_SCALING = 1.5

REFLECT_LP_GAIN = 1
ENDURE_LP_GAIN = 1

# Shadow basic attack. Player LP acts as defense.
BASE_DAMAGE = 8
DESPERATE_BASE_DAMAGE = 10
DEFENSE_PER_LP = 0.5
SHADOW_SP_GAIN = 1
MAX_SHADOW_POINTS = 10


def _effective_level(level: int) -> int:
    return max(1, level)


def illuminate_damage(level: int) -> int:
    """Damage dealt by ILLUMINATE for a player level."""
    return ILLUMINATE_BASE_DAMAGE + math.floor(_effective_level(level) * ILLUMINATE_LEVEL_SCALING)


def embrace_damage(sp: int) -> int:
    """Damage dealt by EMBRACE; every two SP deal one damage, minimum 1."""
    return max(1, max(0, sp) // 2)


def reflect_heal(level: int, rng: RandomSource) -> int:
    """Roll REFLECT's heal, uniform over [1, level]."""
    return math.floor(rng() * _effective_level(level)) + 1


def gain_shadow_points(sp: int, amount: int) -> int:
    """Add SP up to the pool cap. A pool already above the cap is never lowered."""
    return max(sp, min(MAX_SHADOW_POINTS, sp + max(0, amount)))


def reflect_heal_range(level: int) -> tuple[int, int]:
    return 1, _effective_level(level)


def shadow_defense(lp: int, *, damage_reduction: float = 1.0) -> int:
    """Defense the player's light provides against a shadow strike."""
    return math.floor(max(0, lp) * DEFENSE_PER_LP * damage_reduction)


def shadow_damage(
    lp: int,
    *,
    base_damage: int = BASE_DAMAGE,
    damage_multiplier: float = 1.0,
    damage_reduction: float = 1.0,
) -> int:
    """Damage of the shadow's basic attack against a player holding ``lp``."""
    raw = max(1, base_damage - shadow_defense(lp, damage_reduction=damage_reduction))
    return max(1, math.floor(raw * damage_multiplier))


def get_action_cost(action: str, *, endure_energy_cost: int = 0) -> Dict[str, int]:
    """Return the resource cost of an action keyed by pool name."""
    if action == "ILLUMINATE":
        return {"lp": ILLUMINATE_LP_COST}
    if action == "REFLECT":
        return {"sp": REFLECT_SP_COST}
    if action == "ENDURE":
        return {"energy": endure_energy_cost} if endure_energy_cost > 0 else {}
    if action == "EMBRACE":
        return {"sp": EMBRACE_SP_REQUIRED}
    return {}


def get_action_description(action: str, *, level: int = 1) -> str:
    """Return a human-readable description of an action at a player level."""
    if action == "ILLUMINATE":
        return (
            "Shine light on the shadow with awareness and understanding. "
            f"Deals {illuminate_damage(level)} damage."
        )
    if action == "REFLECT":
        low, high = reflect_heal_range(level)
        return (
            "Transform shadow energy into light through wisdom and reframing. "
            f"Converts {REFLECT_SP_COST} SP to {REFLECT_LP_GAIN} LP and heals {low}-{high} health."
        )
    if action == "ENDURE":
        return f"Build resilience and hold your ground. Gains {ENDURE_LP_GAIN} LP."
    if action == "EMBRACE":
        return (
            "Accept difficult emotions without judgment, using all shadow energy to deal damage "
            "(1 damage per 2 SP)."
        )
    return ""
