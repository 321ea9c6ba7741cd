from __future__ import annotations

from collections.abc import Iterable, Sequence

from .types import NUMBERS, SUITS, CardDefinition


class Deck:
    """Fixed pool of card definitions with a drawn flag per position.

    Position in the deck is the card's identity; hand cards refer back to it.
    """

    def __init__(self, definitions: Iterable[CardDefinition]) -> None:
        self._cards: tuple[CardDefinition, ...] = tuple(definitions)
        if len(set(self._cards)) != len(self._cards):
            raise ValueError("Deck definitions must be unique.")
        self._drawn: list[bool] = [False] * len(self._cards)

    @classmethod
    def standard(cls) -> "Deck":
        return cls(CardDefinition(suit=s, number=n) for s in SUITS for n in NUMBERS)

    def __len__(self) -> int:
        return len(self._cards)

    def __getitem__(self, index: int) -> CardDefinition:
        return self._cards[index]

    @property
    def definitions(self) -> Sequence[CardDefinition]:
        return self._cards

    def is_drawn(self, index: int) -> bool:
        return self._drawn[index]

    def mark_drawn(self, index: int) -> None:
        if self._drawn[index]:
            raise ValueError(f"Card {index} has already been drawn.")
        self._drawn[index] = True

    def undrawn_indices(self) -> list[int]:
        return [i for i, drawn in enumerate(self._drawn) if not drawn]

    def undrawn_count(self) -> int:
        return self._drawn.count(False)

    def drawn_indices(self) -> list[int]:
        return [i for i, drawn in enumerate(self._drawn) if drawn]

    def reset(self) -> None:
        for i in range(len(self._drawn)):
            self._drawn[i] = False
