from __future__ import annotations


class GameError(RuntimeError):
    """Recoverable command failure. Raised before any state is touched."""


class SequenceError(GameError):
    pass


class IllegalPlayError(GameError):
    pass


class GameOverError(RuntimeError):
    """A mutating command was issued after the game already ended."""
