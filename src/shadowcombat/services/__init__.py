"""Service layer exports."""

from .errors import EncounterError
from .action_resolver import can_perform_action, execute_action
from .antagonist_service import decide_action, execute_ability, run_antagonist_turn
from .termination import check_combat_end, surrender
from .factories import create_manifestation
from .combat_service import (
    AbilityUsedEvent,
    ActionRejectedEvent,
    CombatEvent,
    CombatService,
    EncounterEndedEvent,
    EncounterStartedEvent,
    EncounterSummary,
    EncounterView,
    PlayerActedEvent,
    ShadowStrikeEvent,
    TurnSkippedEvent,
)

__all__ = [
    "EncounterError",
    "can_perform_action",
    "execute_action",
    "decide_action",
    "execute_ability",
    "run_antagonist_turn",
    "check_combat_end",
    "surrender",
    "create_manifestation",
    "AbilityUsedEvent",
    "ActionRejectedEvent",
    "CombatEvent",
    "CombatService",
    "EncounterEndedEvent",
    "EncounterStartedEvent",
    "EncounterSummary",
    "EncounterView",
    "PlayerActedEvent",
    "ShadowStrikeEvent",
    "TurnSkippedEvent",
]
