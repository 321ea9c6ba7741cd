from __future__ import annotations


from .actions import Action, PickCardAction, ResetAction
from .game import GameState
from .types import HandCard


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, PickCardAction):
        return {"type": "pick", "card_id": a.card_id}
    if isinstance(a, ResetAction):
        return {"type": "reset"}
    # should be unreachable
    return {"type": "unknown"}


def action_from_dict(d: dict[str, object]) -> Action:
    t = d.get("type")
    if t == "pick":
        card_id = d.get("card_id")
        if not isinstance(card_id, int):
            raise ValueError("pick action needs an integer card_id")
        return PickCardAction(card_id=card_id)
    if t == "reset":
        return ResetAction()
    raise ValueError(f"Unknown action type: {t}")


def _hand_card_to_dict(c: HandCard) -> dict[str, object]:
    return {"id": c.id, "suit": c.suit, "number": c.number, "picked": c.picked}


def snapshot(state: GameState) -> dict[str, object]:
    """Return a JSON-serializable, read-only view of what a renderer needs."""
    return {
        "hand": [_hand_card_to_dict(c) for c in state.hand],
        "score": {"current": state.score.current, "best": state.score.best},
        "can_play": state.can_play,
        "shuffle_count": state.shuffle_count,
        "status": state.status,
    }


def full_snapshot(state: GameState) -> dict[str, object]:
    """Snapshot plus the bookkeeping needed to compare replays."""
    out = snapshot(state)
    out["seed"] = state.seed
    out["drawn"] = state.deck.drawn_indices()
    out["action_log"] = [action_to_dict(a) for a in state.action_log]
    return out
