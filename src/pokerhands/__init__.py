"""pokerhands — five-card poker hand classification service."""

__version__ = "0.1.0"
