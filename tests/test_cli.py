from __future__ import annotations

import io
import json
from pathlib import Path

from memorymatch.cli import main, render, run
from memorymatch.engine.game import new_game, pick_card
from memorymatch.engine.messages import MessageCatalog
from memorymatch.services.telemetry import TelemetryService


def test_render_shows_score_message_and_cards() -> None:
    state = new_game(1)
    lines = render(state, MessageCatalog())
    assert lines[0] == "Current Score: 0   Best Score: 0"
    assert lines[1] == "Pick a card, and remember which card you picked."
    assert lines[2].count("[") == 3


def test_run_loses_then_resets(tmp_path: Path) -> None:
    state = new_game(2)
    telemetry = TelemetryService(tmp_path / "telemetry.jsonl")
    out: list[str] = []

    def commands():
        yield "1"
        pos = next(i for i, c in enumerate(state.hand, start=1) if c.picked)
        yield str(pos)
        yield "2"
        yield "r"
        yield "bogus"
        yield "\u00b2"  # superscript two: isdigit() but not int()-parsable
        yield "q"
        yield "1"

    assert run(state, MessageCatalog(), telemetry, commands(), out.append) == 0

    assert "You already picked that card!" in out
    assert "Play again? (r)" in out
    assert "Round is over." in out
    assert sum(line.startswith("Pick a card between 1 and 3") for line in out) == 2
    assert state.score.current == 0
    assert state.score.best == 1
    assert state.can_play

    records = [json.loads(x) for x in (tmp_path / "telemetry.jsonl").read_text(encoding="utf-8").splitlines()]
    assert [r["type"] for r in records] == ["round_lost", "game_reset"]
    assert records[0]["payload"] == {"score": 1, "best": 1, "shuffles": 1}
    assert records[1]["payload"]["score"] == 0


def test_telemetry_disabled_writes_nothing(tmp_path: Path) -> None:
    telemetry = TelemetryService(tmp_path / "t.jsonl", enabled=False)
    telemetry.log("game_won", {"score": 18})
    assert not (tmp_path / "t.jsonl").exists()


def test_main_reads_stdin(monkeypatch, capsys, tmp_path: Path) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nq\n"))
    log = tmp_path / "session.jsonl"
    assert main(["--seed", "3", "--telemetry", str(log)]) == 0

    printed = capsys.readouterr().out
    assert "Current Score: 1   Best Score: 1" in printed
    assert "Now pick a different card." in printed
    records = [json.loads(x) for x in log.read_text(encoding="utf-8").splitlines()]
    assert records[0]["type"] == "session_started"
    assert records[0]["payload"] == {"deck_size": 52}
    assert all(r["seed"] == 3 for r in records)


def test_record_step_only_logs_round_outcomes(tmp_path: Path) -> None:
    state = new_game(4)
    telemetry = TelemetryService(tmp_path / "t.jsonl", seed=4)

    res = pick_card(state, state.hand[0].id)
    assert telemetry.record_step(state, res) == 0
    assert not (tmp_path / "t.jsonl").exists()

    res = pick_card(state, next(c.id for c in state.hand if c.picked))
    assert telemetry.record_step(state, res) == 1
    rec = json.loads((tmp_path / "t.jsonl").read_text(encoding="utf-8"))
    assert rec["type"] == "round_lost"
    assert rec["seed"] == 4
