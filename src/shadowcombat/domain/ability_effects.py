"""Pure session transforms for antagonist ability effects.

Each ability carries a tuple of :class:`AbilityEffectDef` steps. A step is a
tagged variant: ``kind`` selects the transform and the remaining fields are
its parameters. Every transform clamps the pools it touches so a session can
never hold negative resources.
"""
from __future__ import annotations

from typing import Callable, Dict, Iterable

from shadowcombat.domain.combat_formulas import gain_shadow_points
from shadowcombat.domain.combat_models import CombatSession
from shadowcombat.domain.defs import AbilityEffectDef

EffectHandler = Callable[[CombatSession, AbilityEffectDef], None]


def _drain(session: CombatSession, effect: AbilityEffectDef) -> None:
    resources = session.resources
    if effect.target == "lp":
        resources.lp = max(0, resources.lp - effect.amount)
    elif effect.target == "sp":
        resources.sp = max(0, resources.sp - effect.amount)


def _gain(session: CombatSession, effect: AbilityEffectDef) -> None:
    resources = session.resources
    if effect.target == "lp":
        resources.lp = max(0, resources.lp + effect.amount)
    elif effect.target == "sp":
        resources.sp = gain_shadow_points(resources.sp, effect.amount)


def _block_generation(session: CombatSession, effect: AbilityEffectDef) -> None:
    status = session.status_effects
    status.lp_generation_blocked = max(status.lp_generation_blocked, effect.amount)


def _block_healing(session: CombatSession, effect: AbilityEffectDef) -> None:
    status = session.status_effects
    status.healing_blocked = max(status.healing_blocked, effect.amount)


def _amplify_damage(session: CombatSession, effect: AbilityEffectDef) -> None:
    session.status_effects.damage_multiplier = effect.factor


def _expose(session: CombatSession, effect: AbilityEffectDef) -> None:
    session.status_effects.damage_reduction = effect.factor


def _skip_turn(session: CombatSession, effect: AbilityEffectDef) -> None:
    session.status_effects.skip_next_turn = True


def _convert_light(session: CombatSession, effect: AbilityEffectDef) -> None:
    resources = session.resources
    converted = min(resources.lp, max(0, effect.amount))
    resources.lp -= converted
    resources.sp = gain_shadow_points(resources.sp, converted)


_HANDLERS: Dict[str, EffectHandler] = {
    "drain": _drain,
    "gain": _gain,
    "block_generation": _block_generation,
    "block_healing": _block_healing,
    "amplify_damage": _amplify_damage,
    "expose": _expose,
    "skip_turn": _skip_turn,
    "convert_light": _convert_light,
}


def _get_handler(effect: AbilityEffectDef) -> EffectHandler:
    try:
        return _HANDLERS[effect.kind]
    except KeyError as exc:
        raise ValueError(f"Unknown ability effect kind '{effect.kind}'.") from exc


def apply_ability_effect(effect: AbilityEffectDef, session: CombatSession) -> CombatSession:
    """Return a new session with a single effect step applied."""
    return apply_ability_effects((effect,), session)


def apply_ability_effects(effects: Iterable[AbilityEffectDef], session: CombatSession) -> CombatSession:
    """Return a new session with effect steps applied in declaration order."""
    new_session = session.clone()
    for effect in effects:
        _get_handler(effect)(new_session, effect)
    return new_session


def describe_effect(effect: AbilityEffectDef) -> str:
    """Short numeric summary used in log entries."""
    target = (effect.target or "").upper()
    if effect.kind == "drain":
        return f"-{effect.amount} {target}"
    if effect.kind == "gain":
        return f"+{effect.amount} {target}"
    if effect.kind == "block_generation":
        return f"LP generation blocked for {effect.amount} turns"
    if effect.kind == "block_healing":
        return f"Healing blocked for {effect.amount} turns"
    if effect.kind == "amplify_damage":
        return f"Incoming damage x{effect.factor:g}"
    if effect.kind == "expose":
        return f"Defense x{effect.factor:g}"
    if effect.kind == "skip_turn":
        return "Next turn skipped"
    if effect.kind == "convert_light":
        return f"Up to {effect.amount} LP turned to SP"
    return ""
