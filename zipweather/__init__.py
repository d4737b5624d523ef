"""ZIP Weather API: per-user weather lookups by US ZIP code."""

__version__ = "1.0.0"
