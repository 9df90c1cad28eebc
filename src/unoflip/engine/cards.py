from __future__ import annotations

from dataclasses import dataclass

from .types import (
    DARK_COUNTERPART,
    LIGHT_COLORS,
    NUMERIC_RANKS,
    WILD_RANKS,
    Color,
    Rank,
)

DECK_SIZE = 108


@dataclass(frozen=True)
class Card:
    """A dual-sided card. Only `face` reads the light/dark fields."""

    light_color: Color
    light_rank: Rank
    dark_color: Color
    dark_rank: Rank

    def face(self, is_dark: bool) -> tuple[Color, Rank]:
        if is_dark:
            return self.dark_color, self.dark_rank
        return self.light_color, self.light_rank

    def color(self, is_dark: bool) -> Color:
        return self.face(is_dark)[0]

    def rank(self, is_dark: bool) -> Rank:
        return self.face(is_dark)[1]

    def is_wild(self, is_dark: bool) -> bool:
        return self.rank(is_dark) in WILD_RANKS

    def matches(self, top: "Card", active_color: Color, is_dark: bool) -> bool:
        if self.is_wild(is_dark):
            return True
        color, rank = self.face(is_dark)
        return color == active_color or rank == top.rank(is_dark)

    def text(self, is_dark: bool) -> str:
        color, rank = self.face(is_dark)
        if color == Color.WILD:
            return rank.value
        return f"{color.value}-{rank.value}"


def _pair(light: Color, light_rank: Rank, dark_rank: Rank) -> Card:
    return Card(
        light_color=light,
        light_rank=light_rank,
        dark_color=DARK_COUNTERPART[light],
        dark_rank=dark_rank,
    )


def build_deck() -> list[Card]:
    """Returns the full, unshuffled 108 card deck."""
    deck: list[Card] = []
    for c in LIGHT_COLORS:
        deck.append(_pair(c, Rank.ZERO, Rank.ZERO))
        for r in NUMERIC_RANKS[1:]:
            deck.append(_pair(c, r, r))
            deck.append(_pair(c, r, r))

        for _ in range(2):
            deck.append(_pair(c, Rank.SKIP, Rank.SKIP_EVERYONE))
            deck.append(_pair(c, Rank.REVERSE, Rank.REVERSE))
            deck.append(_pair(c, Rank.FLIP, Rank.FLIP))
        deck.append(_pair(c, Rank.DRAW_ONE, Rank.DRAW_FIVE))

    for _ in range(2):
        deck.append(Card(Color.WILD, Rank.WILD, Color.WILD, Rank.WILD_DRAW_COLOR))
        deck.append(Card(Color.WILD, Rank.WILD_DRAW_TWO, Color.WILD, Rank.WILD_DRAW_COLOR))
    return deck


_RANK_POINTS: dict[Rank, int] = {
    Rank.WILD_DRAW_COLOR: 60,
    Rank.WILD_DRAW_TWO: 50,
    Rank.WILD: 40,
    Rank.SKIP_EVERYONE: 30,
    Rank.DRAW_FIVE: 20,
    Rank.FLIP: 20,
    Rank.DRAW_ONE: 20,
    Rank.SKIP: 20,
    Rank.REVERSE: 20,
}
_RANK_POINTS.update({r: value for value, r in enumerate(NUMERIC_RANKS)})


def card_points(card: Card, is_dark: bool) -> int:
    return _RANK_POINTS.get(card.rank(is_dark), 0)
