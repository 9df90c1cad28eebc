from __future__ import annotations


from .actions import Action, AdvanceTurnAction, AITurnAction, DrawAction, PlayCardAction, PlayWildAction
from .cards import Card
from .game import Game, GameEvent, Player


def card_to_dict(c: Card) -> dict[str, object]:
    return {
        "light": {"color": c.light_color.value, "rank": c.light_rank.value},
        "dark": {"color": c.dark_color.value, "rank": c.dark_rank.value},
    }


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, PlayCardAction):
        return {"type": "play", "hand_index": a.hand_index}
    if isinstance(a, PlayWildAction):
        return {"type": "play_wild", "hand_index": a.hand_index, "color": a.color.value}
    if isinstance(a, DrawAction):
        return {"type": "draw"}
    if isinstance(a, AdvanceTurnAction):
        return {"type": "advance_turn"}
    if isinstance(a, AITurnAction):
        return {"type": "ai_turn"}
    # should be unreachable
    return {"type": "unknown"}


def event_to_dict(e: GameEvent) -> dict[str, object]:
    return {
        "hand": [c.text(e.is_dark) for c in e.hand],
        "top_text": e.top_text,
        "current_player_name": e.current_player_name,
        "is_dark": e.is_dark,
        "is_ai": e.is_ai,
        "info": e.info,
        "must_press_next": e.must_press_next,
        "active_color": e.active_color.value,
    }


def _player_to_dict(p: Player) -> dict[str, object]:
    return {
        "name": p.name,
        "is_ai": p.is_ai,
        "hand": [card_to_dict(c) for c in p.hand],
    }


def snapshot(game: Game) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the whole game."""
    return {
        "seed": game.seed,
        "current": game.current,
        "direction": game.direction,
        "is_dark": game.is_dark,
        "active_color": game.active_color.value,
        "must_press_next": game.must_press_next,
        "pending_steps": game.pending_steps,
        "winner": game.winner,
        "final_score": game.final_score,
        "players": [_player_to_dict(p) for p in game.players],
        "draw_pile": [card_to_dict(c) for c in game.draw_pile],
        "discard_pile": [card_to_dict(c) for c in game.discard_pile],
        "action_log": [action_to_dict(a) for a in game.action_log],
    }
