"""Repository exports."""

from .abilities_repo import AbilitiesRepository
from .manifestations_repo import ManifestationsRepository

__all__ = [
    "AbilitiesRepository",
    "ManifestationsRepository",
]
