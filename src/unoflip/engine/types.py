from __future__ import annotations

from enum import Enum


class Color(Enum):
    RED = "RED"
    YELLOW = "YELLOW"
    GREEN = "GREEN"
    BLUE = "BLUE"
    TEAL = "TEAL"
    PURPLE = "PURPLE"
    PINK = "PINK"
    ORANGE = "ORANGE"
    WILD = "WILD"
    NONE = "NONE"

    @property
    def is_concrete(self) -> bool:
        return self not in (Color.WILD, Color.NONE)


class Rank(Enum):
    ZERO = "ZERO"
    ONE = "ONE"
    TWO = "TWO"
    THREE = "THREE"
    FOUR = "FOUR"
    FIVE = "FIVE"
    SIX = "SIX"
    SEVEN = "SEVEN"
    EIGHT = "EIGHT"
    NINE = "NINE"
    REVERSE = "REVERSE"
    SKIP = "SKIP"
    SKIP_EVERYONE = "SKIP_EVERYONE"
    DRAW_ONE = "DRAW_ONE"
    DRAW_FIVE = "DRAW_FIVE"
    WILD_DRAW_TWO = "WILD_DRAW_TWO"
    FLIP = "FLIP"
    WILD = "WILD"
    WILD_DRAW_COLOR = "WILD_DRAW_COLOR"


LIGHT_COLORS: tuple[Color, ...] = (Color.RED, Color.YELLOW, Color.GREEN, Color.BLUE)
DARK_COLORS: tuple[Color, ...] = (Color.TEAL, Color.PURPLE, Color.PINK, Color.ORANGE)

# Light color -> its fixed dark counterpart on the back of the same card.
DARK_COUNTERPART: dict[Color, Color] = dict(zip(LIGHT_COLORS, DARK_COLORS))

NUMERIC_RANKS: tuple[Rank, ...] = (
    Rank.ZERO,
    Rank.ONE,
    Rank.TWO,
    Rank.THREE,
    Rank.FOUR,
    Rank.FIVE,
    Rank.SIX,
    Rank.SEVEN,
    Rank.EIGHT,
    Rank.NINE,
)

WILD_RANKS: frozenset[Rank] = frozenset({Rank.WILD, Rank.WILD_DRAW_TWO, Rank.WILD_DRAW_COLOR})
ACTION_RANKS: frozenset[Rank] = frozenset(
    {Rank.REVERSE, Rank.SKIP, Rank.SKIP_EVERYONE, Rank.DRAW_ONE, Rank.DRAW_FIVE, Rank.FLIP}
)


def palette(is_dark: bool) -> tuple[Color, ...]:
    """The four playable colors of the given polarity."""
    return DARK_COLORS if is_dark else LIGHT_COLORS


def default_color(is_dark: bool) -> Color:
    """Color used when a wild face has to become concrete without a choice."""
    return Color.TEAL if is_dark else Color.RED
