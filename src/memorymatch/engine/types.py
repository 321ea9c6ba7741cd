from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

Suit = Literal["hearts", "diamonds", "spades", "clubs"]

SUITS: tuple[Suit, ...] = ("hearts", "diamonds", "spades", "clubs")
NUMBERS: tuple[int, ...] = tuple(range(1, 14))

SUIT_SYMBOLS: dict[Suit, str] = {
    "hearts": "♥",
    "diamonds": "♦",
    "spades": "♠",
    "clubs": "♣",
}


@dataclass(frozen=True)
class CardDefinition:
    suit: Suit
    number: int

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self.suit]

    def label(self) -> str:
        return f"{self.number}{self.symbol}"


@dataclass(frozen=True)
class HandCard:
    """A dealt card. ``id`` is the card's position in the deck."""

    id: int
    suit: Suit
    number: int
    picked: bool = False

    def mark_picked(self) -> "HandCard":
        return replace(self, picked=True)

    def label(self) -> str:
        return f"{self.number}{SUIT_SYMBOLS[self.suit]}"


@dataclass
class Score:
    current: int = 0
    best: int = 0

    def add_point(self) -> int:
        self.current += 1
        self.best = max(self.best, self.current)
        return self.current
