from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from unoflip.engine.actions import AITurnAction
from unoflip.engine.game import Game
from unoflip.paths import get_paths
from unoflip.services.schemas import SchemaService
from unoflip.services.telemetry import TelemetryObserver, TelemetryService


@dataclass(frozen=True)
class SimResult:
    seed: int
    winner: str | None
    score: int | None
    steps: int


def simulate_game(
    player_count: int,
    seed: int,
    max_steps: int = 5000,
    telemetry: TelemetryService | None = None,
) -> SimResult:
    """Play an all-AI game to the end (or until `max_steps` AI triggers)."""
    names = [f"Bot{i + 1}" for i in range(player_count)]
    game = Game(player_count, names, [True] * player_count, seed=seed)
    if telemetry is not None:
        game.register_observer(TelemetryObserver(telemetry))

    steps = 0
    while not game.is_over and steps < max_steps:
        result = game.step(AITurnAction())
        if not result.ok:
            raise RuntimeError(f"AI step failed: {result.error}")
        steps += 1

    winner = game.players[game.winner].name if game.winner is not None else None
    return SimResult(seed=seed, winner=winner, score=game.final_score, steps=steps)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="unoflip-sim")
    parser.add_argument("--players", type=int, default=2)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--games", type=int, default=1)
    parser.add_argument("--max-steps", type=int, default=5000)
    paths = get_paths()
    parser.add_argument(
        "--telemetry",
        type=Path,
        nargs="?",
        const=paths.userdata_dir / "telemetry.jsonl",
        default=None,
        help="append JSONL events to this file (default: userdata/telemetry.jsonl)",
    )
    args = parser.parse_args(argv)

    telemetry: TelemetryService | None = None
    if args.telemetry is not None:
        telemetry = TelemetryService(args.telemetry, schemas=SchemaService(paths.schema_dir))

    for i in range(args.games):
        res = simulate_game(args.players, args.seed + i, max_steps=args.max_steps, telemetry=telemetry)
        outcome = f"{res.winner} won with {res.score} points" if res.winner else "no winner"
        print(f"game {i + 1} seed={res.seed}: {outcome} after {res.steps} steps")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
