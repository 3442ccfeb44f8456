"""Service-layer exceptions."""


class EncounterError(Exception):
    """Raised when an encounter cannot be started or driven as requested."""
