from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PickCardAction:
    card_id: int


@dataclass(frozen=True)
class ResetAction:
    pass


Action = PickCardAction | ResetAction
