from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping

from unoflip.engine.game import GameEvent
from unoflip.engine.serialize import event_to_dict
from unoflip.services.schemas import SchemaService


@dataclass
class TelemetryService:
    path: Path
    schemas: SchemaService | None = None

    def log(self, event_type: str, payload: Mapping[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        rec = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "type": event_type,
            "payload": dict(payload),
        }
        if self.schemas is not None:
            self.schemas.validate("event", rec)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")


class TelemetryObserver:
    """Game observer that appends every snapshot and the final message to the log."""

    def __init__(self, telemetry: TelemetryService) -> None:
        self.telemetry = telemetry

    def handle_update(self, event: GameEvent) -> None:
        self.telemetry.log("update", event_to_dict(event))

    def handle_end(self, message: str) -> None:
        self.telemetry.log("game_end", {"message": message})
