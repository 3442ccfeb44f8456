"""Encounter termination checks."""
from __future__ import annotations

from shadowcombat.domain.combat_models import CombatSession, TerminationResult

RETREAT_REASON = "You retreat to regroup and gather your strength..."


def check_combat_end(session: CombatSession) -> TerminationResult:
    """
    Report whether the encounter is over and why.

    The antagonist's defeat is checked before the player's, so a round that
    drops both to zero counts as a victory.
    """

    enemy = session.enemy
    if enemy is not None and enemy.current_hp <= 0:
        return TerminationResult(is_ended=True, victory=True, reason=f"You have overcome {enemy.name}!")
    if session.player_health <= 0:
        return TerminationResult(is_ended=True, victory=False, reason=RETREAT_REASON)
    return TerminationResult(is_ended=False)


def surrender(session: CombatSession) -> TerminationResult:
    """End the encounter at the player's request."""
    return TerminationResult(is_ended=True, victory=False, reason=RETREAT_REASON)
