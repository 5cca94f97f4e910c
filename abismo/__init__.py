"""A terminal grid game: reach the exit while avoiding the abyss."""

__version__ = "0.1.0"
__all__ = ["board", "characters", "cpu", "innovator", "movement", "game", "view", "main"]