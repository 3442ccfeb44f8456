"""Combat session domain models."""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Dict, List

from shadowcombat.core.types import COMBAT_ACTIONS, Actor, CombatAction, RandomSource
from shadowcombat.domain.entities import Ability, Manifestation


def _empty_action_counts() -> Dict[CombatAction, int]:
    return {action: 0 for action in COMBAT_ACTIONS}


@dataclass(slots=True)
class LightShadowResources:
    """The player's two emotional resource pools."""

    lp: int = 0
    sp: int = 0


@dataclass(slots=True)
class StatusEffects:
    """Time-limited modifiers active in the current encounter."""

    damage_multiplier: float = 1.0
    damage_reduction: float = 1.0
    healing_blocked: int = 0
    lp_generation_blocked: int = 0
    skip_next_turn: bool = False
    consecutive_endures: int = 0


@dataclass(frozen=True, slots=True)
class CombatLogEntry:
    """One line of the append-only combat log."""

    turn: int
    actor: Actor
    action: str
    effect: str
    message: str


@dataclass(slots=True)
class CombatSession:
    """Mutable root of an encounter. Resolvers work on clones, never in place."""

    enemy: Manifestation | None
    resources: LightShadowResources
    player_health: int
    max_player_health: int
    player_energy: int = 0
    max_player_energy: int = 0
    player_level: int = 1
    turn: int = 1
    is_player_turn: bool = True
    status_effects: StatusEffects = field(default_factory=StatusEffects)
    preferred_actions: Dict[CombatAction, int] = field(default_factory=_empty_action_counts)
    log: List[CombatLogEntry] = field(default_factory=list)

    def clone(self) -> "CombatSession":
        """Return a copy sharing no mutable state with this session."""
        return copy.deepcopy(self)

    def append_log(self, entry: CombatLogEntry) -> None:
        self.log.append(entry)


@dataclass(slots=True)
class PlayerProfile:
    """Persistent player values the core reads when an encounter starts."""

    level: int
    health: int
    max_health: int
    energy: int = 0
    max_energy: int = 0
    lp: int = 0
    sp: int = 0


@dataclass(slots=True)
class ActionOptions:
    """Injected inputs for resolving a player action."""

    rng: RandomSource
    endure_energy_cost: int = 0


@dataclass(frozen=True, slots=True)
class ValidationResult:
    can_perform: bool
    reason: str | None = None


@dataclass(slots=True)
class ExecutionResult:
    """Outcome of a resolved player action or antagonist ability."""

    new_session: CombatSession
    log_entry: CombatLogEntry
    damage: int | None = None
    health_heal: int | None = None
    energy_cost: int | None = None


@dataclass(slots=True)
class AntagonistTurnResult:
    """Outcome of a full antagonist turn: optional ability plus basic attack."""

    new_session: CombatSession
    damage: int
    label: str
    log_entry: CombatLogEntry
    ability: Ability | None = None
    ability_log_entry: CombatLogEntry | None = None


@dataclass(frozen=True, slots=True)
class TerminationResult:
    is_ended: bool
    victory: bool | None = None
    reason: str | None = None
