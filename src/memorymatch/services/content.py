from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from memorymatch.engine.messages import MessageCatalog
from memorymatch.engine.types import SUITS, CardDefinition


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def _load_schema(path: Path) -> object:
    return _load_json(path)


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.path])
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_str(obj: Mapping[str, object], key: str) -> str:
    v = obj.get(key)
    if not isinstance(v, str):
        raise ContentError(f"Expected string for {key}")
    return v


def _require_int(obj: Mapping[str, object], key: str) -> int:
    v = obj.get(key)
    if not isinstance(v, int):
        raise ContentError(f"Expected int for {key}")
    return v


def _parse_card(raw: Mapping[str, object]) -> CardDefinition:
    suit = _require_str(raw, "suit")
    if suit not in SUITS:
        raise ContentError(f"Unknown suit: {suit}")
    return CardDefinition(suit=suit, number=_require_int(raw, "number"))  # type: ignore[arg-type]


class ContentService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def load_deck(self) -> tuple[CardDefinition, ...]:
        path = self._data_dir / "deck.json"
        schema = _load_schema(self._schema_dir / "deck.schema.json")
        raw = _load_json(path)
        validate_json(raw, schema, context=str(path))

        if not isinstance(raw, dict):
            raise ContentError("deck.json must be an object")
        raw_cards = raw.get("cards")
        if not isinstance(raw_cards, list):
            raise ContentError("deck.json.cards must be a list")

        cards: list[CardDefinition] = []
        seen: set[CardDefinition] = set()
        for item in raw_cards:
            if not isinstance(item, dict):
                continue
            card = _parse_card(item)
            # JSON Schema's uniqueItems can't express "unique by suit+number" cleanly
            if card in seen:
                raise ContentError(f"Duplicate card in {path}: {card.label()}")
            seen.add(card)
            cards.append(card)
        return tuple(cards)

    def load_messages(self) -> MessageCatalog:
        path = self._data_dir / "messages.json"
        schema = _load_schema(self._schema_dir / "messages.schema.json")
        raw = _load_json(path)
        validate_json(raw, schema, context=str(path))
        if not isinstance(raw, dict):
            raise ContentError("messages.json must be an object")

        progress = raw.get("progress")
        if not isinstance(progress, list):
            raise ContentError("messages.json.progress must be a list")
        return MessageCatalog(
            progress=tuple(str(p) for p in progress),
            already_picked=_require_str(raw, "already_picked"),
            play_again=_require_str(raw, "play_again"),
        )

    def validate_all(self) -> None:
        # Load is validation (schema + parse)
        _ = self.load_deck()
        _ = self.load_messages()
