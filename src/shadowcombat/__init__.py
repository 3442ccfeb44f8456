"""Turn-based combat resolution core for light and shadow encounters."""

__version__ = "0.1.0"
