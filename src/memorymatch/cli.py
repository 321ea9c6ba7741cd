from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, Sequence

from memorymatch.engine.game import GameState, new_game, pick_card, reset_game
from memorymatch.engine.messages import MessageCatalog, message_for
from memorymatch.paths import get_paths
from memorymatch.services.content import ContentService
from memorymatch.services.telemetry import TelemetryService

Writer = Callable[[str], None]


def render(state: GameState, catalog: MessageCatalog) -> list[str]:
    msg = message_for(state, catalog)
    lines = [
        f"Current Score: {state.score.current}   Best Score: {state.score.best}",
        msg.text,
    ]
    cards = []
    for pos, card in enumerate(state.hand, start=1):
        mark = "*" if card.picked and not state.can_play else ""
        cards.append(f"[{pos}] {card.label()}{mark}")
    lines.append("  ".join(cards))
    if msg.offers_reset:
        lines.append(f"{msg.reset_label} (r)")
    return lines


def run(
    state: GameState,
    catalog: MessageCatalog,
    telemetry: TelemetryService,
    commands: Iterable[str],
    write: Writer,
) -> int:
    """Drive a game from text commands: a card position, ``r`` to reset, ``q`` to quit."""
    for line in render(state, catalog):
        write(line)

    for raw in commands:
        cmd = raw.strip().lower()
        if cmd in ("q", "quit"):
            break
        if cmd in ("r", "reset"):
            result = reset_game(state)
        elif cmd.isdecimal() and 1 <= int(cmd) <= len(state.hand):
            result = pick_card(state, state.hand[int(cmd) - 1].id)
        else:
            write(f"Pick a card between 1 and {len(state.hand)}, 'r' to reset or 'q' to quit.")
            continue

        if not result.ok and result.error:
            write(result.error)
        telemetry.record_step(state, result)
        for line in render(state, catalog):
            write(line)

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="memorymatch")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--telemetry", type=Path, default=None, help="JSONL telemetry file")
    parser.add_argument("--no-telemetry", action="store_true")
    args = parser.parse_args(argv)

    paths = get_paths()
    content = ContentService(data_dir=paths.data_dir, schema_dir=paths.schema_dir)
    cards = content.load_deck()
    catalog = content.load_messages()
    seed = args.seed if args.seed is not None else random.randrange(2**32)
    telemetry = TelemetryService(
        args.telemetry or paths.userdata_dir / "telemetry.jsonl",
        seed=seed,
        enabled=not args.no_telemetry,
    )

    state = new_game(seed, cards=cards)
    telemetry.log("session_started", {"deck_size": len(cards)})

    return run(state, catalog, telemetry, sys.stdin, print)


if __name__ == "__main__":
    raise SystemExit(main())
