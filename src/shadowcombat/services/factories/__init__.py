"""Factory helpers for runtime entities."""

from .manifestation_factory import create_manifestation

__all__ = [
    "create_manifestation",
]
