from __future__ import annotations

from dataclasses import dataclass

from .types import Rank


@dataclass(frozen=True)
class Effect:
    """What playing a rank does, applied by the engine to the victim.

    steps: seats the turn advances on the next advance (0 = same player again).
    victim_draws: fixed number of cards the victim draws.
    draw_until_color: victim draws until a card of the active color shows up.
    """

    victim_draws: int = 0
    steps: int = 1
    reverse: bool = False
    draw_until_color: bool = False
    flip: bool = False


_NO_EFFECT = Effect()


def effect_for(rank: Rank) -> Effect:
    match rank:
        case Rank.REVERSE:
            return Effect(reverse=True)
        case Rank.SKIP:
            return Effect(steps=2)
        case Rank.SKIP_EVERYONE:
            return Effect(steps=0)
        case Rank.DRAW_ONE:
            return Effect(victim_draws=1, steps=2)
        case Rank.DRAW_FIVE:
            return Effect(victim_draws=5, steps=2)
        case Rank.WILD_DRAW_TWO:
            return Effect(victim_draws=2, steps=2)
        case Rank.WILD_DRAW_COLOR:
            return Effect(draw_until_color=True, steps=2)
        case Rank.FLIP:
            return Effect(flip=True)
        case _:
            return _NO_EFFECT


def describe(rank: Rank) -> str:
    """Short status message for a resolved rank."""
    match rank:
        case Rank.REVERSE:
            return "Direction reversed."
        case Rank.SKIP:
            return "Skip! The next player is skipped."
        case Rank.SKIP_EVERYONE:
            return "Skip everyone! Play again."
        case Rank.DRAW_ONE:
            return "Draw One! Next player draws 1 and is skipped."
        case Rank.DRAW_FIVE:
            return "Draw Five! Next player draws 5 and is skipped."
        case Rank.WILD_DRAW_TWO:
            return "Wild Draw Two! Next player draws 2 and is skipped."
        case Rank.WILD_DRAW_COLOR:
            return "Wild Draw Color! Next player draws until the color comes up."
        case Rank.FLIP:
            return "Flip! The deck turns over."
        case _:
            return ""
