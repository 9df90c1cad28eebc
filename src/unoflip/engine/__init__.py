"""Deterministic, headless rules engine for unoflip.

IMPORTANT: This package must never import a GUI toolkit.
"""

from .actions import AdvanceTurnAction, AITurnAction, DrawAction, PlayCardAction, PlayWildAction
from .cards import Card, build_deck, card_points
from .errors import GameError, GameOverError, IllegalPlayError, SequenceError
from .game import Game, GameConfig, GameEvent, GameObserver, Player, StepResult, replay
from .types import Color, Rank

__all__ = [
    "AITurnAction",
    "AdvanceTurnAction",
    "Card",
    "Color",
    "DrawAction",
    "Game",
    "GameConfig",
    "GameError",
    "GameEvent",
    "GameObserver",
    "GameOverError",
    "IllegalPlayError",
    "PlayCardAction",
    "PlayWildAction",
    "Player",
    "Rank",
    "SequenceError",
    "StepResult",
    "build_deck",
    "card_points",
    "replay",
]
