"""Quote of the day: multi-source quote fetching with dedup and offline fallback."""

__version__ = "0.1.0"
