from __future__ import annotations

import random
from collections import Counter

import pytest

from memorymatch.engine.deck import Deck
from memorymatch.engine.hand import InsufficientCardsError, draw_hand, shuffle
from memorymatch.engine.types import CardDefinition


def test_standard_deck_has_52_unique_cards() -> None:
    deck = Deck.standard()
    assert len(deck) == 52
    assert len(set(deck.definitions)) == 52
    assert deck.undrawn_count() == 52
    assert {c.suit for c in deck.definitions} == {"hearts", "diamonds", "spades", "clubs"}
    assert {c.number for c in deck.definitions} == set(range(1, 14))


def test_duplicate_definitions_rejected() -> None:
    card = CardDefinition(suit="hearts", number=1)
    with pytest.raises(ValueError):
        Deck([card, card])


def test_reset_clears_drawn_flags() -> None:
    deck = Deck.standard()
    draw_hand(deck, 9, random.Random(0))
    assert deck.undrawn_count() == 43
    deck.reset()
    assert deck.undrawn_count() == 52
    assert deck.drawn_indices() == []


def test_draw_hand_marks_exactly_the_drawn_cards() -> None:
    deck = Deck.standard()
    rng = random.Random(42)
    first = draw_hand(deck, 3, rng)
    before = set(deck.drawn_indices())

    hand = draw_hand(deck, 6, rng)
    ids = [c.id for c in hand]
    assert len(hand) == 6
    assert len(set(ids)) == 6
    assert before.isdisjoint(ids)
    assert set(deck.drawn_indices()) == before | set(ids)
    assert {c.id for c in first} == before
    for c in hand:
        assert not c.picked
        assert deck[c.id].suit == c.suit
        assert deck[c.id].number == c.number


def test_draw_hand_zero_cards() -> None:
    deck = Deck.standard()
    assert draw_hand(deck, 0, random.Random(1)) == []
    assert deck.undrawn_count() == 52


def test_draw_hand_insufficient_cards_leaves_deck_untouched() -> None:
    deck = Deck.standard()
    rng = random.Random(3)
    draw_hand(deck, 50, rng)
    drawn_before = deck.drawn_indices()
    with pytest.raises(InsufficientCardsError):
        draw_hand(deck, 3, rng)
    assert deck.drawn_indices() == drawn_before
    # the last two are still available
    assert len(draw_hand(deck, 2, rng)) == 2
    assert deck.undrawn_count() == 0


def test_draw_hand_negative_size() -> None:
    with pytest.raises(ValueError):
        draw_hand(Deck.standard(), -1, random.Random(0))


def test_draw_hand_subsets_are_uniform() -> None:
    cards = [CardDefinition(suit="spades", number=n) for n in range(1, 5)]
    rng = random.Random(2024)
    counts: Counter[frozenset[int]] = Counter()
    for _ in range(6000):
        deck = Deck(cards)
        counts[frozenset(c.id for c in draw_hand(deck, 2, rng))] += 1
    assert len(counts) == 6
    for n in counts.values():
        assert 850 < n < 1150


def test_shuffle_is_in_place_bijection() -> None:
    items = list(range(20))
    out = shuffle(items, random.Random(5))
    assert out is items
    assert sorted(items) == list(range(20))


def test_shuffle_short_sequences() -> None:
    rng = random.Random(0)
    assert shuffle([], rng) == []
    assert shuffle([7], rng) == [7]


def test_shuffle_permutations_are_uniform() -> None:
    rng = random.Random(1234)
    counts: Counter[tuple[int, ...]] = Counter()
    for _ in range(6000):
        counts[tuple(shuffle([0, 1, 2], rng))] += 1
    assert len(counts) == 6
    for n in counts.values():
        assert 850 < n < 1150
