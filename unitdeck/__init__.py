"""UnitDeck - terminal dashboard for systemd services and containers."""

__version__ = "0.1.0"
