"""Abilities repository: the static catalog of antagonist abilities."""
from __future__ import annotations

from typing import Dict, List

from shadowcombat.core.types import EFFECT_KINDS, EffectKind, ResourceKind
from shadowcombat.data.errors import DataValidationError
from shadowcombat.data.repositories.base import RepositoryBase
from shadowcombat.domain.defs import AbilityDef, AbilityEffectDef

_RESOURCE_TARGETS = ("lp", "sp")
_TARGETED_KINDS = ("drain", "gain")
_FACTOR_KINDS = ("amplify_damage", "expose")


class AbilitiesRepository(RepositoryBase[AbilityDef]):
    """Loads and validates ability definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("abilities.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, AbilityDef]:
        abilities: Dict[str, AbilityDef] = {}
        for raw_id, payload in raw.items():
            context = f"ability '{raw_id}'"
            ability_data = self._require_mapping(payload, context)
            self._assert_required(ability_data, {"name", "cooldown", "description", "effects"}, context)

            raw_effects = ability_data["effects"]
            if not isinstance(raw_effects, list) or not raw_effects:
                raise DataValidationError(f"{context} effects must be a non-empty list.")
            effects = [
                self._build_effect(effect_payload, f"{context} effect #{index}")
                for index, effect_payload in enumerate(raw_effects)
            ]

            abilities[raw_id] = AbilityDef(
                id=raw_id,
                name=self._require_str(ability_data["name"], f"{context} name"),
                cooldown=self._require_int(ability_data["cooldown"], f"{context} cooldown", minimum=0),
                description=self._require_str(ability_data["description"], f"{context} description"),
                effects=tuple(effects),
            )
        return abilities

    def _build_effect(self, payload: object, context: str) -> AbilityEffectDef:
        effect_data = self._require_mapping(payload, context)
        kind = self._require_str(effect_data.get("kind"), f"{context} kind")
        if kind not in EFFECT_KINDS:
            raise DataValidationError(f"{context} has unknown kind '{kind}'.")

        target: ResourceKind | None = None
        if kind in _TARGETED_KINDS:
            raw_target = self._require_str(effect_data.get("target"), f"{context} target")
            if raw_target not in _RESOURCE_TARGETS:
                raise DataValidationError(f"{context} target must be one of {list(_RESOURCE_TARGETS)}.")
            target = raw_target  # type: ignore[assignment]

        factor = 1.0
        if kind in _FACTOR_KINDS:
            factor = self._require_number(effect_data.get("factor"), f"{context} factor")
            if factor < 0:
                raise DataValidationError(f"{context} factor must be >= 0.")

        amount = self._require_int(effect_data.get("amount", 0), f"{context} amount", minimum=0)
        effect_kind: EffectKind = kind  # type: ignore[assignment]
        return AbilityEffectDef(kind=effect_kind, amount=amount, factor=factor, target=target)

    def get_many(self, ability_ids: List[str] | tuple[str, ...]) -> List[AbilityDef]:
        """Return definitions in the requested order."""
        return [self.get(ability_id) for ability_id in ability_ids]
