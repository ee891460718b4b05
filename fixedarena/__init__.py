"""Arenas that store items in fixed-size chunks for constant-time allocation."""

__version__ = "0.3.4"

__all__ = ["arena", "chunk", "iterators", "manually_drop", "options"]