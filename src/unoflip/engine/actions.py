from __future__ import annotations

from dataclasses import dataclass

from .types import Color


@dataclass(frozen=True)
class PlayCardAction:
    hand_index: int


@dataclass(frozen=True)
class PlayWildAction:
    hand_index: int
    color: Color


@dataclass(frozen=True)
class DrawAction:
    pass


@dataclass(frozen=True)
class AdvanceTurnAction:
    pass


@dataclass(frozen=True)
class AITurnAction:
    pass


Action = PlayCardAction | PlayWildAction | DrawAction | AdvanceTurnAction | AITurnAction
