"""Domain definition exports."""

from .ability_def import AbilityDef, AbilityEffectDef
from .manifestation_def import ManifestationDef, VictoryRewardDef

__all__ = [
    "AbilityDef",
    "AbilityEffectDef",
    "ManifestationDef",
    "VictoryRewardDef",
]
