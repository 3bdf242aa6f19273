"""Movie record management: validation, models and persistence."""

__version__ = "0.1.0"
