"""Manifestations repository."""
from __future__ import annotations

from typing import Dict

from shadowcombat.core.types import MANIFESTATION_CATEGORIES, ManifestationCategory
from shadowcombat.data.errors import DataReferenceError, DataValidationError
from shadowcombat.data.repositories.abilities_repo import AbilitiesRepository
from shadowcombat.data.repositories.base import RepositoryBase
from shadowcombat.domain.defs import ManifestationDef, VictoryRewardDef


class ManifestationsRepository(RepositoryBase[ManifestationDef]):
    """Loads and validates manifestation templates."""

    def __init__(self, base_path=None, abilities_repo: AbilitiesRepository | None = None) -> None:
        super().__init__("manifestations.json", base_path)
        self._abilities_repo = abilities_repo

    def _build(self, raw: dict[str, object]) -> Dict[str, ManifestationDef]:
        manifestations: Dict[str, ManifestationDef] = {}
        required_fields = {
            "name",
            "category",
            "description",
            "max_hp",
            "abilities",
            "therapeutic_insight",
            "victory_reward",
        }
        for raw_id, payload in raw.items():
            context = f"manifestation '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_required(data, required_fields, context)

            category = self._require_str(data["category"], f"{context} category")
            if category not in MANIFESTATION_CATEGORIES:
                raise DataValidationError(f"{context} has unknown category '{category}'.")

            ability_ids = tuple(self._require_str_list(data["abilities"], f"{context} abilities"))
            signature_id = data.get("signature_ability")
            if signature_id is not None:
                signature_id = self._require_str(signature_id, f"{context} signature_ability")
                if signature_id not in ability_ids:
                    raise DataReferenceError(f"{context} signature ability '{signature_id}' is not in its abilities.")
            self._check_ability_refs(ability_ids, context)

            manifestation_category: ManifestationCategory = category  # type: ignore[assignment]
            manifestations[raw_id] = ManifestationDef(
                id=raw_id,
                name=self._require_str(data["name"], f"{context} name"),
                category=manifestation_category,
                description=self._require_str(data["description"], f"{context} description"),
                max_hp=self._require_int(data["max_hp"], f"{context} max_hp", minimum=1),
                ability_ids=ability_ids,
                therapeutic_insight=self._require_str(data["therapeutic_insight"], f"{context} therapeutic_insight"),
                victory_reward=self._build_reward(data["victory_reward"], f"{context} victory_reward"),
                signature_ability_id=signature_id,
            )
        return manifestations

    def _build_reward(self, payload: object, context: str) -> VictoryRewardDef:
        data = self._require_mapping(payload, context)
        self._assert_required(data, {"lp_bonus", "growth_message", "permanent_benefit"}, context)
        return VictoryRewardDef(
            lp_bonus=self._require_int(data["lp_bonus"], f"{context} lp_bonus", minimum=0),
            growth_message=self._require_str(data["growth_message"], f"{context} growth_message"),
            permanent_benefit=self._require_str(data["permanent_benefit"], f"{context} permanent_benefit"),
        )

    def _check_ability_refs(self, ability_ids: tuple[str, ...], context: str) -> None:
        if self._abilities_repo is None:
            return
        for ability_id in ability_ids:
            if not self._abilities_repo.has(ability_id):
                raise DataReferenceError(f"{context} references unknown ability '{ability_id}'.")
