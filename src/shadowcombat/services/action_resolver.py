"""Validation and resolution of the four player actions."""
from __future__ import annotations

import logging

from shadowcombat.core.types import COMBAT_ACTIONS, CombatAction
from shadowcombat.domain.combat_formulas import (
    EMBRACE_SP_REQUIRED,
    ENDURE_LP_GAIN,
    ILLUMINATE_LP_COST,
    REFLECT_LP_GAIN,
    REFLECT_SP_COST,
    embrace_damage,
    illuminate_damage,
    reflect_heal,
)
from shadowcombat.domain.combat_models import (
    ActionOptions,
    CombatLogEntry,
    CombatSession,
    ExecutionResult,
    ValidationResult,
)

log = logging.getLogger(__name__)

NOT_ENOUGH_LP = "Not enough Light Points"
NOT_ENOUGH_SP = "Not enough Shadow Points"
NOT_ENOUGH_ENERGY = "Not enough Energy"
UNKNOWN_ACTION = "Unknown action"


def can_perform_action(action: str, session: CombatSession, *, endure_energy_cost: int = 0) -> ValidationResult:
    """Check whether the player can afford an action. Never mutates or raises."""
    resources = session.resources
    if action == "ILLUMINATE":
        if resources.lp < ILLUMINATE_LP_COST:
            return ValidationResult(False, NOT_ENOUGH_LP)
    elif action == "REFLECT":
        if resources.sp < REFLECT_SP_COST:
            return ValidationResult(False, NOT_ENOUGH_SP)
    elif action == "ENDURE":
        if session.player_energy < endure_energy_cost:
            return ValidationResult(False, NOT_ENOUGH_ENERGY)
    elif action == "EMBRACE":
        if resources.sp < EMBRACE_SP_REQUIRED:
            return ValidationResult(False, NOT_ENOUGH_SP)
    else:
        return ValidationResult(False, UNKNOWN_ACTION)
    return ValidationResult(True)


def execute_action(action: str, session: CombatSession, options: ActionOptions) -> ExecutionResult:
    """
    Resolve a player action against a copy of the session.

    The returned session carries the new resources, enemy HP and exactly one
    appended PLAYER log entry. Unknown actions resolve to a no-op with an
    empty, unappended log entry.
    """

    if action not in COMBAT_ACTIONS:
        log.debug("Ignoring unknown combat action %r", action)
        return ExecutionResult(
            new_session=session.clone(),
            log_entry=CombatLogEntry(turn=session.turn, actor="PLAYER", action=action, effect="", message=""),
        )

    new_session = session.clone()
    combat_action: CombatAction = action  # type: ignore[assignment]
    if combat_action == "ILLUMINATE":
        result = _resolve_illuminate(new_session)
    elif combat_action == "REFLECT":
        result = _resolve_reflect(new_session, options)
    elif combat_action == "ENDURE":
        result = _resolve_endure(new_session, options)
    else:
        result = _resolve_embrace(new_session)

    status = new_session.status_effects
    if combat_action != "ENDURE":
        status.consecutive_endures = 0
    new_session.preferred_actions[combat_action] = new_session.preferred_actions.get(combat_action, 0) + 1
    new_session.append_log(result.log_entry)
    log.debug("Turn %s: player used %s (%s)", new_session.turn, combat_action, result.log_entry.effect)
    return result


def _damage_enemy(session: CombatSession, damage: int) -> None:
    if session.enemy is not None:
        session.enemy.current_hp = max(0, session.enemy.current_hp - damage)


def _gain_light(session: CombatSession, amount: int) -> int:
    if session.status_effects.lp_generation_blocked > 0:
        return 0
    session.resources.lp += amount
    return amount


def _entry(session: CombatSession, action: CombatAction, effect: str, message: str) -> CombatLogEntry:
    return CombatLogEntry(turn=session.turn, actor="PLAYER", action=action, effect=effect, message=message)


def _resolve_illuminate(session: CombatSession) -> ExecutionResult:
    damage = illuminate_damage(session.player_level)
    session.resources.lp = max(0, session.resources.lp - ILLUMINATE_LP_COST)
    _damage_enemy(session, damage)
    entry = _entry(
        session,
        "ILLUMINATE",
        f"Dealt {damage} damage (-{ILLUMINATE_LP_COST} LP)",
        "You shine light on your inner shadow, seeing it clearly for what it is. "
        "The truth illuminates and weakens its hold on you.",
    )
    return ExecutionResult(new_session=session, log_entry=entry, damage=damage)


def _resolve_reflect(session: CombatSession, options: ActionOptions) -> ExecutionResult:
    session.resources.sp = max(0, session.resources.sp - REFLECT_SP_COST)
    lp_gained = _gain_light(session, REFLECT_LP_GAIN)

    # Roll even when healing is blocked so the random stream stays aligned.
    rolled = reflect_heal(session.player_level, options.rng)
    heal = 0
    if session.status_effects.healing_blocked == 0:
        before = session.player_health
        session.player_health = min(session.max_player_health, session.player_health + rolled)
        heal = session.player_health - before

    effect = f"-{REFLECT_SP_COST} SP, +{lp_gained} LP, +{heal} Health"
    if session.status_effects.healing_blocked > 0:
        effect += " (healing blocked)"
    entry = _entry(
        session,
        "REFLECT",
        effect,
        "You find wisdom in your struggle, transforming pain into understanding. Your inner light grows stronger.",
    )
    return ExecutionResult(new_session=session, log_entry=entry, health_heal=heal)


def _resolve_endure(session: CombatSession, options: ActionOptions) -> ExecutionResult:
    energy_cost = max(0, options.endure_energy_cost)
    lp_gained = _gain_light(session, ENDURE_LP_GAIN)
    session.player_energy = max(0, session.player_energy - energy_cost)
    session.status_effects.consecutive_endures += 1

    effect = f"+{lp_gained} LP"
    if energy_cost:
        effect += f", -{energy_cost} Energy"
    entry = _entry(
        session,
        "ENDURE",
        effect,
        "You steel yourself against the shadow's influence, finding strength in resilience. "
        "You are prepared to weather the storm.",
    )
    return ExecutionResult(new_session=session, log_entry=entry, energy_cost=energy_cost)


def _resolve_embrace(session: CombatSession) -> ExecutionResult:
    spent = session.resources.sp
    damage = embrace_damage(spent)
    session.resources.sp = 0
    _damage_enemy(session, damage)
    entry = _entry(
        session,
        "EMBRACE",
        f"Dealt {damage} damage (-{spent} SP)",
        "You accept your difficult emotions without judgment, reducing their power over you. "
        "In acceptance, you find peace.",
    )
    return ExecutionResult(new_session=session, log_entry=entry, damage=damage)
