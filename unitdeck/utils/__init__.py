"""Utility functions for UnitDeck."""

from unitdeck.utils.formatting import format_bytes, format_cpu, format_duration

__all__ = [
    "format_bytes",
    "format_cpu",
    "format_duration",
]
