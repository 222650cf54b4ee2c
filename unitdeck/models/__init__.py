"""Data models for UnitDeck."""
