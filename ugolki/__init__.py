"""Ugolki (corners) board game: board, pieces, rules, route finding and a pygame window."""

__version__ = "0.1.0"
__all__ = ["board", "figure", "game", "app"]