"""Encounter orchestration: one call per player decision, full round resolution."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from shadowcombat.config import CombatConfig, load_config
from shadowcombat.core.types import COMBAT_ACTIONS, CombatAction, RandomSource
from shadowcombat.data.repositories import AbilitiesRepository, ManifestationsRepository
from shadowcombat.domain.combat_formulas import get_action_cost, get_action_description
from shadowcombat.domain.combat_models import (
    ActionOptions,
    CombatLogEntry,
    CombatSession,
    LightShadowResources,
    PlayerProfile,
    TerminationResult,
)
from shadowcombat.domain.entities import Manifestation
from shadowcombat.domain.status_effects import process_status_effects
from shadowcombat.services.action_resolver import can_perform_action, execute_action
from shadowcombat.services.antagonist_service import run_antagonist_turn
from shadowcombat.services.errors import EncounterError
from shadowcombat.services.factories import create_manifestation
from shadowcombat.services.termination import check_combat_end, surrender

log = logging.getLogger(__name__)

ENCOUNTER_OVER = "The encounter is over"
NOT_PLAYER_TURN = "It is not your turn"


@dataclass(slots=True)
class CombatEvent:
    """Base combat event."""


@dataclass(slots=True)
class EncounterStartedEvent(CombatEvent):
    manifestation_id: str
    manifestation_name: str


@dataclass(slots=True)
class ActionRejectedEvent(CombatEvent):
    action: str
    reason: str


@dataclass(slots=True)
class PlayerActedEvent(CombatEvent):
    action: CombatAction
    damage: int | None
    health_heal: int | None
    enemy_hp: int


@dataclass(slots=True)
class TurnSkippedEvent(CombatEvent):
    turn: int


@dataclass(slots=True)
class AbilityUsedEvent(CombatEvent):
    ability_id: str
    ability_name: str


@dataclass(slots=True)
class ShadowStrikeEvent(CombatEvent):
    label: str
    damage: int
    player_health: int


@dataclass(slots=True)
class EncounterEndedEvent(CombatEvent):
    victory: bool
    reason: str


@dataclass(slots=True)
class ActionView:
    """Presentation view of one player action."""

    action: CombatAction
    cost: Dict[str, int]
    description: str
    can_perform: bool
    reason: str | None


@dataclass(slots=True)
class EncounterView:
    """Presentation view for the current encounter state."""

    enemy_name: str
    enemy_hp: int
    enemy_max_hp: int
    lp: int
    sp: int
    player_health: int
    max_player_health: int
    player_energy: int
    turn: int
    is_player_turn: bool
    actions: List[ActionView]


@dataclass(slots=True)
class EncounterSummary:
    """Values the profile collaborator reconciles once an encounter ends."""

    manifestation_id: str
    victory: bool
    reason: str
    turns: int
    resources: LightShadowResources
    player_health: int
    player_energy: int
    preferred_actions: Dict[CombatAction, int]
    lp_bonus: int = 0
    growth_message: str | None = None
    permanent_benefit: str | None = None
    therapeutic_insight: str = ""
    log: List[CombatLogEntry] = field(default_factory=list)


class CombatService:
    """Runs encounters round by round on top of the pure combat rules."""

    def __init__(
        self,
        manifestations_repo: ManifestationsRepository,
        abilities_repo: AbilitiesRepository,
        config: CombatConfig | None = None,
    ) -> None:
        self._manifestations_repo = manifestations_repo
        self._abilities_repo = abilities_repo
        self._config = config or CombatConfig()

    @classmethod
    def from_definitions(
        cls,
        base_path: Path | str | None = None,
        config_path: Path | str | None = None,
    ) -> "CombatService":
        """Build a service over a catalog directory (the bundled one by default) and an optional config file."""
        abilities_repo = AbilitiesRepository(base_path=base_path)
        manifestations_repo = ManifestationsRepository(base_path=base_path, abilities_repo=abilities_repo)
        return cls(manifestations_repo, abilities_repo, load_config(config_path))

    @property
    def config(self) -> CombatConfig:
        return self._config

    # -----------------------
    # Encounter Lifecycle
    # -----------------------
    def start_encounter(self, template_id: str, profile: PlayerProfile) -> Tuple[CombatSession, List[CombatEvent]]:
        """Create a session against a fresh instance of the requested manifestation."""
        enemy = create_manifestation(
            template_id,
            manifestations_repo=self._manifestations_repo,
            abilities_repo=self._abilities_repo,
        )
        if enemy is None:
            raise EncounterError(f"Manifestation '{template_id}' not found.")

        max_health = max(1, profile.max_health)
        max_energy = max(0, profile.max_energy)
        session = CombatSession(
            enemy=enemy,
            resources=LightShadowResources(lp=max(0, profile.lp), sp=max(0, profile.sp)),
            player_health=min(max_health, max(0, profile.health)),
            max_player_health=max_health,
            player_energy=min(max_energy, max(0, profile.energy)),
            max_player_energy=max_energy,
            player_level=max(1, profile.level),
        )
        session.append_log(
            CombatLogEntry(
                turn=session.turn,
                actor="SHADOW",
                action="Combat Started",
                effect=f"{enemy.name} emerges from your inner shadows...",
                message=enemy.description,
            )
        )
        log.info("Encounter started against %s", enemy.id)
        return session, [EncounterStartedEvent(manifestation_id=enemy.id, manifestation_name=enemy.name)]

    def get_encounter_view(self, session: CombatSession) -> EncounterView:
        """Return structured information for rendering."""
        enemy = self._require_enemy(session)
        actions: List[ActionView] = []
        for action in COMBAT_ACTIONS:
            validation = can_perform_action(action, session, endure_energy_cost=self._config.endure_energy_cost)
            actions.append(
                ActionView(
                    action=action,
                    cost=get_action_cost(action, endure_energy_cost=self._config.endure_energy_cost),
                    description=get_action_description(action, level=session.player_level),
                    can_perform=validation.can_perform and session.is_player_turn,
                    reason=validation.reason,
                )
            )
        return EncounterView(
            enemy_name=enemy.name,
            enemy_hp=enemy.current_hp,
            enemy_max_hp=enemy.max_hp,
            lp=session.resources.lp,
            sp=session.resources.sp,
            player_health=session.player_health,
            max_player_health=session.max_player_health,
            player_energy=session.player_energy,
            turn=session.turn,
            is_player_turn=session.is_player_turn,
            actions=actions,
        )

    # -----------------------
    # Player Decisions
    # -----------------------
    def perform_action(
        self, session: CombatSession, action: str, rng: RandomSource
    ) -> Tuple[CombatSession, List[CombatEvent]]:
        """Resolve a player action and, if the encounter continues, the antagonist's reply."""
        rejection = self._check_can_act(session, action)
        if rejection is not None:
            return session, [rejection]

        if session.status_effects.skip_next_turn:
            return self._forfeit_turn(session)

        options = ActionOptions(rng=rng, endure_energy_cost=self._config.endure_energy_cost)
        validation = can_perform_action(action, session, endure_energy_cost=options.endure_energy_cost)
        if not validation.can_perform:
            log.debug("Rejected %s: %s", action, validation.reason)
            return session, [ActionRejectedEvent(action=action, reason=validation.reason or "")]

        result = execute_action(action, session, options)
        new_session = result.new_session
        enemy = self._require_enemy(new_session)
        combat_action: CombatAction = action  # type: ignore[assignment]
        events: List[CombatEvent] = [
            PlayerActedEvent(
                action=combat_action,
                damage=result.damage,
                health_heal=result.health_heal,
                enemy_hp=enemy.current_hp,
            )
        ]

        ended = self._ended_event(new_session)
        if ended is not None:
            events.append(ended)
            return new_session, events
        return self._antagonist_phase(new_session, events)

    def pass_turn(self, session: CombatSession) -> Tuple[CombatSession, List[CombatEvent]]:
        """Hand the turn to the antagonist without acting."""
        rejection = self._check_can_act(session, "PASS")
        if rejection is not None:
            return session, [rejection]
        if session.status_effects.skip_next_turn:
            return self._forfeit_turn(session)
        return self._antagonist_phase(session.clone(), [])

    def surrender(self, session: CombatSession) -> Tuple[TerminationResult, List[CombatEvent]]:
        """Retreat from the encounter."""
        self._require_enemy(session)
        result = surrender(session)
        log.info("Player surrendered on turn %s", session.turn)
        return result, [EncounterEndedEvent(victory=False, reason=result.reason or "")]

    def conclude(self, session: CombatSession, result: TerminationResult | None = None) -> EncounterSummary:
        """Summarize an ended encounter for the profile collaborator."""
        enemy = self._require_enemy(session)
        result = result or check_combat_end(session)
        if not result.is_ended:
            raise EncounterError("Cannot conclude an encounter that is still running.")
        victory = bool(result.victory)
        reward = enemy.victory_reward
        return EncounterSummary(
            manifestation_id=enemy.id,
            victory=victory,
            reason=result.reason or "",
            turns=session.turn,
            resources=LightShadowResources(lp=session.resources.lp, sp=session.resources.sp),
            player_health=session.player_health,
            player_energy=session.player_energy,
            preferred_actions=dict(session.preferred_actions),
            lp_bonus=reward.lp_bonus if victory else 0,
            growth_message=reward.growth_message if victory else None,
            permanent_benefit=reward.permanent_benefit if victory else None,
            therapeutic_insight=enemy.therapeutic_insight,
            log=list(session.log),
        )

    # -----------------------
    # Helpers
    # -----------------------
    def _require_enemy(self, session: CombatSession) -> Manifestation:
        if session.enemy is None:
            raise EncounterError("No encounter is running.")
        return session.enemy

    def _check_can_act(self, session: CombatSession, action: str) -> ActionRejectedEvent | None:
        self._require_enemy(session)
        if check_combat_end(session).is_ended:
            return ActionRejectedEvent(action=action, reason=ENCOUNTER_OVER)
        if not session.is_player_turn:
            return ActionRejectedEvent(action=action, reason=NOT_PLAYER_TURN)
        return None

    def _forfeit_turn(self, session: CombatSession) -> Tuple[CombatSession, List[CombatEvent]]:
        new_session = session.clone()
        new_session.status_effects.skip_next_turn = False
        new_session.append_log(
            CombatLogEntry(
                turn=new_session.turn,
                actor="PLAYER",
                action="SKIPPED",
                effect="Turn lost",
                message="Everything feels urgent at once, and you freeze.",
            )
        )
        log.debug("Turn %s skipped", new_session.turn)
        return self._antagonist_phase(new_session, [TurnSkippedEvent(turn=new_session.turn)])

    def _antagonist_phase(
        self, session: CombatSession, events: List[CombatEvent]
    ) -> Tuple[CombatSession, List[CombatEvent]]:
        turn_result = run_antagonist_turn(session, self._config)
        if turn_result.ability is not None:
            events.append(AbilityUsedEvent(ability_id=turn_result.ability.id, ability_name=turn_result.ability.name))
        new_session = turn_result.new_session
        events.append(
            ShadowStrikeEvent(
                label=turn_result.label,
                damage=turn_result.damage,
                player_health=new_session.player_health,
            )
        )

        ended = self._ended_event(new_session)
        if ended is not None:
            events.append(ended)
            return new_session, events

        new_session = process_status_effects(new_session)
        ended = self._ended_event(new_session)
        if ended is not None:
            events.append(ended)
        return new_session, events

    def _ended_event(self, session: CombatSession) -> EncounterEndedEvent | None:
        result = check_combat_end(session)
        if not result.is_ended:
            return None
        log.info("Encounter ended: %s", result.reason)
        return EncounterEndedEvent(victory=bool(result.victory), reason=result.reason or "")
