"""Runtime entity exports."""

from .ability import Ability
from .manifestation import Manifestation

__all__ = [
    "Ability",
    "Manifestation",
]
