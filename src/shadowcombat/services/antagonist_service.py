"""Antagonist decision making and turn resolution."""
from __future__ import annotations

import logging

from shadowcombat.config import CombatConfig
from shadowcombat.domain.ability_effects import apply_ability_effects, describe_effect
from shadowcombat.domain.combat_formulas import (
    BASE_DAMAGE,
    DESPERATE_BASE_DAMAGE,
    SHADOW_SP_GAIN,
    gain_shadow_points,
    shadow_damage,
)
from shadowcombat.domain.combat_models import (
    AntagonistTurnResult,
    CombatLogEntry,
    CombatSession,
    ExecutionResult,
)
from shadowcombat.domain.entities import Ability, Manifestation

log = logging.getLogger(__name__)

SHADOW_STRIKE = "Shadow Strike"
DESPERATE_STRIKE = "Desperate Strike"


def is_player_vulnerable(session: CombatSession, config: CombatConfig | None = None) -> bool:
    """True when the player's light or health has dropped below the configured thresholds."""
    config = config or CombatConfig()
    if session.resources.lp < config.vulnerable_lp_threshold:
        return True
    return session.player_health < session.max_player_health * config.vulnerable_health_ratio


def decide_action(
    manifestation: Manifestation,
    session: CombatSession,
    config: CombatConfig | None = None,
) -> Ability | None:
    """
    Pick the ability the antagonist uses this turn, or None to pass.

    Only abilities off cooldown are candidates. A vulnerable player draws the
    signature ability when it is ready; otherwise the first ready ability in
    declaration order is used.
    """

    available = [ability for ability in manifestation.abilities if ability.current_cooldown == 0]
    if not available:
        return None

    if is_player_vulnerable(session, config):
        signature = manifestation.signature_ability
        if signature is not None and signature.current_cooldown == 0:
            return signature
    return available[0]


def execute_ability(ability: Ability, session: CombatSession) -> ExecutionResult:
    """Apply an ability to a copy of the session and put it on cooldown."""
    new_session = apply_ability_effects(ability.effects, session)
    if new_session.enemy is not None:
        owned = new_session.enemy.get_ability(ability.id)
        if owned is not None:
            owned.current_cooldown = owned.cooldown

    summary = ", ".join(part for part in (describe_effect(effect) for effect in ability.effects) if part)
    entry = CombatLogEntry(
        turn=session.turn,
        actor="SHADOW",
        action=ability.name,
        effect=summary,
        message=f"The shadow uses {ability.name}: {ability.description}",
    )
    new_session.append_log(entry)
    log.debug("Turn %s: shadow used ability %s (%s)", session.turn, ability.id, summary)
    return ExecutionResult(new_session=new_session, log_entry=entry)


def is_desperate(manifestation: Manifestation | None, config: CombatConfig | None = None) -> bool:
    if manifestation is None:
        return False
    config = config or CombatConfig()
    return manifestation.hp_ratio < config.desperate_hp_ratio


def run_antagonist_turn(session: CombatSession, config: CombatConfig | None = None) -> AntagonistTurnResult:
    """
    Resolve the antagonist's whole turn.

    A ready ability fires first; the basic strike follows, using whatever
    status effects the ability just applied. The strike's intensity depends
    only on the antagonist's remaining HP. Control returns to the player and
    the turn counter advances unless the strike drops the player to 0 health.
    """

    config = config or CombatConfig()
    new_session = session.clone()
    new_session.is_player_turn = False

    ability: Ability | None = None
    ability_entry: CombatLogEntry | None = None
    if new_session.enemy is not None:
        ability = decide_action(new_session.enemy, new_session, config)
        if ability is not None:
            ability_result = execute_ability(ability, new_session)
            new_session = ability_result.new_session
            ability_entry = ability_result.log_entry
            if new_session.enemy is not None:
                ability = new_session.enemy.get_ability(ability.id) or ability

    desperate = is_desperate(new_session.enemy, config)
    label = DESPERATE_STRIKE if desperate else SHADOW_STRIKE
    status = new_session.status_effects
    damage = shadow_damage(
        new_session.resources.lp,
        base_damage=DESPERATE_BASE_DAMAGE if desperate else BASE_DAMAGE,
        damage_multiplier=status.damage_multiplier,
        damage_reduction=status.damage_reduction,
    )
    new_session.player_health = max(0, new_session.player_health - damage)
    sp_before = new_session.resources.sp
    new_session.resources.sp = gain_shadow_points(sp_before, SHADOW_SP_GAIN)
    sp_gained = new_session.resources.sp - sp_before

    entry = CombatLogEntry(
        turn=new_session.turn,
        actor="SHADOW",
        action=label,
        effect=f"Dealt {damage} damage, +{sp_gained} SP",
        message=_strike_message(new_session, desperate),
    )
    new_session.append_log(entry)

    if new_session.player_health > 0:
        new_session.turn += 1
        new_session.is_player_turn = True
    log.debug("Shadow %s dealt %s damage; player health %s", label, damage, new_session.player_health)
    return AntagonistTurnResult(
        new_session=new_session,
        damage=damage,
        label=label,
        log_entry=entry,
        ability=ability,
        ability_log_entry=ability_entry,
    )


def _strike_message(session: CombatSession, desperate: bool) -> str:
    name = session.enemy.name if session.enemy is not None else "The shadow"
    if desperate:
        return f"{name} lashes out desperately, its grip on you slipping."
    return f"{name} presses in, and old fears sting."
