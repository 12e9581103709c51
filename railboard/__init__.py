"""Station signalling game logic: board contents, shift reports and settings."""

__version__ = "2.1.0"
__all__ = ["constants", "finish", "config", "arrivals", "departures"]