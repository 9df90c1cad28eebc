from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Sequence

from .actions import Action, AdvanceTurnAction, DrawAction, PlayCardAction, PlayWildAction
from .cards import Card
from .types import ACTION_RANKS, Color, palette


@dataclass
class HandCandidates:
    """Legal hand indexes, bucketed by category in hand order."""

    action: list[int] = field(default_factory=list)
    normal: list[int] = field(default_factory=list)
    wild: list[int] = field(default_factory=list)


def classify_hand(hand: Sequence[Card], top: Card, active_color: Color, is_dark: bool) -> HandCandidates:
    cands = HandCandidates()
    for idx, card in enumerate(hand):
        if not card.matches(top, active_color, is_dark):
            continue
        if card.is_wild(is_dark):
            cands.wild.append(idx)
        elif card.rank(is_dark) in ACTION_RANKS:
            cands.action.append(idx)
        else:
            cands.normal.append(idx)
    return cands


def choose_action(
    hand: Sequence[Card],
    top: Card,
    active_color: Color,
    is_dark: bool,
    must_press_next: bool,
    rng: random.Random,
) -> Action:
    """Pick the AI's next command.

    Priority: legal action card, then legal plain card, then a wild with a
    random color of the current polarity. Draws when nothing is legal.
    `rng` is only consulted for the wild color so games stay reproducible.
    """
    if must_press_next:
        return AdvanceTurnAction()

    cands = classify_hand(hand, top, active_color, is_dark)
    if cands.action:
        return PlayCardAction(hand_index=cands.action[0])
    if cands.normal:
        return PlayCardAction(hand_index=cands.normal[0])
    if cands.wild:
        return PlayWildAction(hand_index=cands.wild[0], color=rng.choice(palette(is_dark)))
    return DrawAction()
