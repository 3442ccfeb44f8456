"""Shared type aliases for the core and domain layers."""
from typing import Callable, Literal, Tuple

CombatAction = Literal["ILLUMINATE", "REFLECT", "ENDURE", "EMBRACE"]
Actor = Literal["PLAYER", "SHADOW"]
ManifestationCategory = Literal["doubt", "isolation", "overwhelm", "past-pain"]
ResourceKind = Literal["lp", "sp"]
EffectKind = Literal[
    "drain",
    "gain",
    "block_generation",
    "block_healing",
    "amplify_damage",
    "expose",
    "skip_turn",
    "convert_light",
]

# Zero-argument callable returning a float in [0.0, 1.0).
RandomSource = Callable[[], float]

COMBAT_ACTIONS: Tuple[CombatAction, ...] = ("ILLUMINATE", "REFLECT", "ENDURE", "EMBRACE")
MANIFESTATION_CATEGORIES: Tuple[ManifestationCategory, ...] = ("doubt", "isolation", "overwhelm", "past-pain")
EFFECT_KINDS: Tuple[EffectKind, ...] = (
    "drain",
    "gain",
    "block_generation",
    "block_healing",
    "amplify_damage",
    "expose",
    "skip_turn",
    "convert_light",
)

__all__ = [
    "Actor",
    "COMBAT_ACTIONS",
    "CombatAction",
    "EFFECT_KINDS",
    "EffectKind",
    "MANIFESTATION_CATEGORIES",
    "ManifestationCategory",
    "RandomSource",
    "ResourceKind",
]
