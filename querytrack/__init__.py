"""Local query logging and dashboard reporting."""

__version__ = "1.0.0"
