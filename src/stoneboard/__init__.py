"""Stoneboard - Gomoku and Go on a shared turn-based engine."""

__version__ = "0.1.0"
