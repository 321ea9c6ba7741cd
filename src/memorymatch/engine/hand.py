from __future__ import annotations

import random
from typing import MutableSequence, TypeVar

from .deck import Deck
from .types import HandCard

T = TypeVar("T")


class InsufficientCardsError(RuntimeError):
    pass


def shuffle(items: MutableSequence[T], rng: random.Random) -> MutableSequence[T]:
    """Fisher-Yates shuffle, in place. Returns ``items`` for chaining."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def draw_hand(deck: Deck, hand_size: int, rng: random.Random) -> list[HandCard]:
    """Draw ``hand_size`` distinct undrawn cards and mark them drawn.

    Selection is a partial Fisher-Yates over the undrawn positions, so every
    subset of the pool is equally likely and the work is bounded by the deck
    size. The deck is untouched when the request cannot be satisfied.
    """
    if hand_size < 0:
        raise ValueError("hand_size must be non-negative")

    pool = deck.undrawn_indices()
    if hand_size > len(pool):
        raise InsufficientCardsError(
            f"Cannot draw {hand_size} cards, only {len(pool)} left in the deck."
        )

    for i in range(hand_size):
        j = rng.randrange(i, len(pool))
        pool[i], pool[j] = pool[j], pool[i]

    hand: list[HandCard] = []
    for index in pool[:hand_size]:
        deck.mark_drawn(index)
        card = deck[index]
        hand.append(HandCard(id=index, suit=card.suit, number=card.number, picked=False))
    return hand
