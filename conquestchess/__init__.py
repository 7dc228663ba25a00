"""A two-player terminal chess variant in which placed pieces conquer the squares they attack."""

__version__ = "0.1.0"
__all__ = ["board", "moves", "modes", "savefile", "game", "cli"]