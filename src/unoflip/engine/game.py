from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, Protocol, Sequence

from .actions import (
    Action,
    AdvanceTurnAction,
    AITurnAction,
    DrawAction,
    PlayCardAction,
    PlayWildAction,
)
from .ai import choose_action
from .cards import Card, build_deck, card_points
from .effects import describe, effect_for
from .errors import GameError, GameOverError, IllegalPlayError, SequenceError
from .types import Color, default_color, palette


@dataclass(frozen=True)
class GameConfig:
    starting_hand: int = 7
    min_players: int = 2
    max_players: int = 4


@dataclass
class Player:
    name: str
    is_ai: bool = False
    hand: list[Card] = field(default_factory=list)


@dataclass(frozen=True)
class GameEvent:
    """Immutable snapshot pushed to observers after every state change."""

    hand: tuple[Card, ...]
    top_text: str
    current_player_name: str
    is_dark: bool
    is_ai: bool
    info: str
    must_press_next: bool
    active_color: Color


class GameObserver(Protocol):
    def handle_update(self, event: GameEvent) -> None: ...

    def handle_end(self, message: str) -> None: ...


@dataclass
class StepResult:
    ok: bool
    event: GameEvent | None = None
    error: str | None = None


class Game:
    """The rules engine. Mutated only through the command methods.

    Piles are lists used as stacks (top = last element). Not thread-safe:
    callers sharing a Game across threads must serialize access.
    """

    def __init__(
        self,
        player_count: int,
        names: Sequence[str],
        ai_flags: Sequence[bool] | None = None,
        *,
        seed: int | None = None,
        rng: random.Random | None = None,
        config: GameConfig | None = None,
    ) -> None:
        cfg = config or GameConfig()
        if player_count < cfg.min_players or player_count > cfg.max_players:
            raise ValueError(
                f"Number of players must be {cfg.min_players}-{cfg.max_players}, got {player_count}."
            )
        flags = list(ai_flags) if ai_flags is not None else [False] * player_count
        if len(names) < player_count or len(flags) < player_count:
            raise ValueError(f"Need a name and an AI flag for each of the {player_count} players.")

        self.config = cfg
        self.seed = seed
        self.rng = rng or random.Random(seed)
        self.players: list[Player] = [
            Player(name=names[i], is_ai=bool(flags[i])) for i in range(player_count)
        ]
        self.draw_pile: list[Card] = build_deck()
        self.discard_pile: list[Card] = []
        self.current = 0
        self.direction = 1
        self.is_dark = False
        self.active_color = Color.NONE
        self.must_press_next = False
        self.pending_steps = 1
        self.winner: int | None = None
        self.final_score: int | None = None
        self.action_log: list[Action] = []
        self._observers: list[GameObserver] = []

        self.rng.shuffle(self.draw_pile)
        for _ in range(cfg.starting_hand):
            for p in self.players:
                p.hand.append(self.draw_pile.pop())

        first = self.draw_pile.pop()
        self.discard_pile.append(first)
        self.active_color = self._concrete_color(first)
        self.info = f"First card on top is {first.text(self.is_dark)}. {self.current_player.name}, it's your turn."

    # ------------------------------------------------------------------
    # Queries

    @property
    def current_player(self) -> Player:
        return self.players[self.current]

    @property
    def top_card(self) -> Card:
        return self.discard_pile[-1]

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def card_count(self) -> int:
        return len(self.draw_pile) + len(self.discard_pile) + sum(len(p.hand) for p in self.players)

    def top_text(self) -> str:
        text = self.top_card.text(self.is_dark)
        if self.active_color != Color.NONE:
            text += f" [{self.active_color.value}]"
        return text

    def peek_card(self, hand_index: int) -> Card | None:
        hand = self.current_player.hand
        if hand_index < 0 or hand_index >= len(hand):
            return None
        return hand[hand_index]

    def is_card_wild(self, hand_index: int) -> bool:
        card = self.peek_card(hand_index)
        return card is not None and card.is_wild(self.is_dark)

    def score(self) -> int:
        """Points left in every hand, counted on the active face."""
        return sum(card_points(c, self.is_dark) for p in self.players for c in p.hand)

    def snapshot(self) -> GameEvent:
        p = self.current_player
        return GameEvent(
            hand=tuple(p.hand),
            top_text=self.top_text(),
            current_player_name=p.name,
            is_dark=self.is_dark,
            is_ai=p.is_ai,
            info=self.info,
            must_press_next=self.must_press_next,
            active_color=self.active_color,
        )

    # ------------------------------------------------------------------
    # Observers

    def register_observer(self, observer: GameObserver) -> None:
        self._observers.append(observer)
        observer.handle_update(self.snapshot())

    def _notify(self) -> None:
        event = self.snapshot()
        for o in self._observers:
            o.handle_update(event)

    def _broadcast_end(self, message: str) -> None:
        for o in self._observers:
            o.handle_end(message)

    # ------------------------------------------------------------------
    # Commands

    def play(self, hand_index: int) -> None:
        self._ensure_awaiting_action()
        chosen = self._card_at(hand_index)
        top = self.top_card
        if not chosen.matches(top, self.active_color, self.is_dark):
            raise IllegalPlayError(
                f"You cannot play {chosen.text(self.is_dark)} on {top.text(self.is_dark)}."
            )

        self.current_player.hand.pop(hand_index)
        self.discard_pile.append(chosen)
        self.active_color = self._concrete_color(chosen)
        self._resolve(chosen, f" played {chosen.text(self.is_dark)}.")

    def play_wild(self, hand_index: int, color: Color) -> None:
        self._ensure_awaiting_action()
        if color not in palette(self.is_dark):
            raise IllegalPlayError(f"{color.value} is not a color of the side in play.")
        chosen = self._card_at(hand_index)

        self.current_player.hand.pop(hand_index)
        self.discard_pile.append(chosen)
        self.active_color = color
        self._resolve(chosen, f" played {chosen.text(self.is_dark)} and set color to {color.value}.")

    def draw(self) -> None:
        self._ensure_awaiting_action()
        p = self.current_player
        card = self._pop_or_recycle()
        if card is None:
            self.info = f"{p.name} could not draw: the piles are exhausted. Press Next to continue."
        else:
            p.hand.append(card)
            self.info = f"{p.name} drew 1 card. Press Next to continue."
        self.must_press_next = True
        self._notify()

    def advance_turn(self) -> None:
        self._ensure_running()
        if not self.must_press_next:
            raise SequenceError("You must perform an action first.")

        self.current = (self.current + self.direction * self.pending_steps) % len(self.players)
        self.must_press_next = False
        self.pending_steps = 1
        self.info = f"{self.current_player.name}, your turn."
        self._notify()

    def run_ai_turn(self) -> None:
        self._ensure_running()
        p = self.current_player
        if not p.is_ai:
            raise SequenceError(f"{p.name} is not an AI player.")
        action = choose_action(
            p.hand,
            self.top_card,
            self.active_color,
            self.is_dark,
            self.must_press_next,
            self.rng,
        )
        self._apply(action)

    def step(self, action: Action) -> StepResult:
        """Apply an action, reporting recoverable failures instead of raising."""
        if self.is_over:
            return StepResult(ok=False, error="Game already ended.")

        # Log first so replay sees every attempted action
        self.action_log.append(action)
        try:
            self._apply(action)
        except GameError as e:
            return StepResult(ok=False, error=str(e))
        return StepResult(ok=True, event=self.snapshot())

    def _apply(self, action: Action) -> None:
        if isinstance(action, PlayCardAction):
            self.play(action.hand_index)
        elif isinstance(action, PlayWildAction):
            self.play_wild(action.hand_index, action.color)
        elif isinstance(action, DrawAction):
            self.draw()
        elif isinstance(action, AdvanceTurnAction):
            self.advance_turn()
        elif isinstance(action, AITurnAction):
            self.run_ai_turn()
        else:
            raise GameError(f"Unknown action: {action!r}")

    # ------------------------------------------------------------------
    # Rules

    def _ensure_running(self) -> None:
        if self.is_over:
            raise GameOverError("The game is over.")

    def _ensure_awaiting_action(self) -> None:
        self._ensure_running()
        if self.must_press_next:
            raise SequenceError("Press next to continue.")

    def _card_at(self, hand_index: int) -> Card:
        card = self.peek_card(hand_index)
        if card is None:
            raise IllegalPlayError(f"No card at hand index {hand_index}.")
        return card

    def _concrete_color(self, card: Card) -> Color:
        color = card.color(self.is_dark)
        if color.is_concrete:
            return color
        return default_color(self.is_dark)

    def _victim_index(self) -> int:
        return (self.current + self.direction) % len(self.players)

    def _resolve(self, played: Card, tail: str) -> None:
        rank = played.rank(self.is_dark)
        eff = effect_for(rank)
        note = describe(rank)

        if eff.reverse:
            self.direction = -self.direction
        if eff.flip:
            self.is_dark = not self.is_dark
            self.active_color = self._concrete_color(self.top_card)

        victim = self._victim_index()
        exhausted = False
        if eff.victim_draws:
            exhausted = self._give(victim, eff.victim_draws) < eff.victim_draws
        if eff.draw_until_color:
            exhausted = not self._draw_until(victim, self.active_color)
        if exhausted:
            note += " The piles are exhausted."

        self.pending_steps = eff.steps
        self._finish_play(tail, note)

    def _finish_play(self, tail: str, note: str) -> None:
        p = self.current_player
        if not p.hand:
            self.winner = self.current
            self.final_score = self.score()
            self.info = f"{p.name} won! Score: {self.final_score}"
            self._broadcast_end(self.info)
            self._notify()
            return

        self.must_press_next = True
        parts = [p.name + tail]
        if note:
            parts.append(note)
        parts.append("Press Next to continue.")
        self.info = " ".join(parts)
        self._notify()

    def _give(self, player_index: int, count: int) -> int:
        """Victim draws `count` cards; returns how many were available."""
        hand = self.players[player_index].hand
        drawn = 0
        for _ in range(count):
            card = self._pop_or_recycle()
            if card is None:
                break
            hand.append(card)
            drawn += 1
        return drawn

    def _draw_until(self, player_index: int, color: Color) -> bool:
        """Victim draws until a card of `color` (inclusive). False if the piles ran out first."""
        hand = self.players[player_index].hand
        while True:
            card = self._pop_or_recycle()
            if card is None:
                return False
            hand.append(card)
            if card.color(self.is_dark) == color:
                return True

    def _pop_or_recycle(self) -> Card | None:
        if not self.draw_pile:
            self._recycle()
        if not self.draw_pile:
            return None
        return self.draw_pile.pop()

    def _recycle(self) -> None:
        if len(self.discard_pile) < 2:
            return
        top = self.discard_pile.pop()
        back = self.discard_pile
        self.discard_pile = [top]
        self.rng.shuffle(back)
        self.draw_pile.extend(back)


def replay(
    player_count: int,
    names: Sequence[str],
    ai_flags: Sequence[bool] | None,
    seed: int,
    actions: Iterable[Action],
    config: GameConfig | None = None,
) -> Game:
    game = Game(player_count, names, ai_flags, seed=seed, config=config)
    for a in actions:
        game.step(a)
        if game.is_over:
            break
    return game
