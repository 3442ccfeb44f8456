"""Per-round status effect and cooldown decay."""
from __future__ import annotations

from shadowcombat.domain.combat_models import CombatSession


def process_status_effects(session: CombatSession) -> CombatSession:
    """
    Advance timers at the end of a completed round.

    Countdowns and ability cooldowns tick down by one (never below zero) and
    the single-round multipliers return to 1. ``skip_next_turn`` and
    ``consecutive_endures`` belong to turn-order and action logic and are left
    untouched.
    """

    new_session = session.clone()
    status = new_session.status_effects
    status.healing_blocked = max(0, status.healing_blocked - 1)
    status.lp_generation_blocked = max(0, status.lp_generation_blocked - 1)
    status.damage_multiplier = 1.0
    status.damage_reduction = 1.0

    if new_session.enemy is not None:
        for ability in new_session.enemy.abilities:
            ability.current_cooldown = max(0, ability.current_cooldown - 1)
    return new_session
