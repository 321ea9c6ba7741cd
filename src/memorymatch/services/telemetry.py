from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping

from memorymatch.engine.game import GameState, StepResult

# engine event type -> telemetry record type
_OUTCOME_EVENTS = {
    "ROUND_LOST": "round_lost",
    "GAME_WON": "game_won",
    "GAME_RESET": "game_reset",
}


@dataclass
class TelemetryService:
    """JSONL log of one play session; every record carries the session seed."""

    path: Path
    seed: int | None = None
    enabled: bool = True

    def log(self, event_type: str, payload: Mapping[str, object]) -> None:
        if not self.enabled:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        rec = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "seed": self.seed,
            "type": event_type,
            "payload": dict(payload),
        }
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")

    def record_step(self, state: GameState, result: StepResult) -> int:
        """Log round outcomes from a step's events. Returns the number of records written."""
        written = 0
        for ev in result.events:
            kind = _OUTCOME_EVENTS.get(str(ev.get("type")))
            if kind is None:
                continue
            self.log(
                kind,
                {
                    "score": state.score.current,
                    "best": state.score.best,
                    "shuffles": state.shuffle_count,
                },
            )
            written += 1
        return written
