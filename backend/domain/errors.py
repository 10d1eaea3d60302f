"""
Exceptions raised by the snake engine.
"""


class InvalidConfiguration(ValueError):
    """Raised when the engine is constructed with unusable settings."""


class GameOverError(RuntimeError):
    """Raised when a move is requested after the game has already ended."""
