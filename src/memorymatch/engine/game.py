from __future__ import annotations

import copy
import random
from dataclasses import dataclass, field
from typing import Iterable, Literal, Sequence

from .actions import Action, PickCardAction, ResetAction
from .deck import Deck
from .hand import draw_hand, shuffle
from .types import CardDefinition, HandCard, Score

Event = dict[str, object]
Status = Literal["playing", "round_ended", "game_won"]


@dataclass(frozen=True)
class GameConfig:
    starting_hand: int = 3
    # (score milestone, size of the hand dealt when it is reached)
    redeals: tuple[tuple[int, int], ...] = ((3, 6), (9, 9))
    winning_score: int = 18

    def redeal_size(self, score: int) -> int | None:
        for milestone, size in self.redeals:
            if milestone == score:
                return size
        return None

    def validate(self, deck_size: int) -> None:
        if self.starting_hand <= 0:
            raise ValueError("starting_hand must be positive.")
        if self.winning_score <= 0:
            raise ValueError("winning_score must be positive.")
        milestones = [m for m, _ in self.redeals]
        if len(set(milestones)) != len(milestones):
            raise ValueError("Redeal milestones must be unique.")
        for milestone, size in self.redeals:
            if not 0 < milestone < self.winning_score:
                raise ValueError("Redeal milestones must lie between 0 and winning_score.")
            if size <= 0:
                raise ValueError("Redeal hand sizes must be positive.")
        # A hand dealt at score s yields at most len(hand) points before a repeat is forced.
        reach = self.starting_hand
        for milestone, size in sorted(self.redeals):
            if milestone > reach:
                raise ValueError(f"Score {milestone} cannot be reached with the hand dealt before it.")
            reach = milestone + size
        if self.winning_score > reach:
            raise ValueError(f"winning_score {self.winning_score} cannot be reached; the last hand tops out at {reach}.")
        # The deck is only refilled on reset, so every hand of one run must fit.
        needed = self.starting_hand + sum(size for _, size in self.redeals)
        if needed > deck_size:
            raise ValueError(f"Config deals {needed} cards per run but the deck holds {deck_size}.")


@dataclass
class StepResult:
    ok: bool
    events: list[Event]
    error: str | None = None


@dataclass
class GameState:
    config: GameConfig
    seed: int
    rng: random.Random
    deck: Deck
    hand: list[HandCard] = field(default_factory=list)
    score: Score = field(default_factory=Score)
    can_play: bool = True
    shuffle_count: int = 0
    action_log: list[Action] = field(default_factory=list)
    event_log: list[Event] = field(default_factory=list)

    @property
    def status(self) -> Status:
        if self.can_play:
            return "playing"
        if self.score.current == self.config.winning_score:
            return "game_won"
        return "round_ended"

    def find_card(self, card_id: int) -> HandCard | None:
        for card in self.hand:
            if card.id == card_id:
                return card
        return None


def _deal(state: GameState, size: int) -> None:
    state.hand = draw_hand(state.deck, size, state.rng)
    state.event_log.append(
        {"type": "HAND_DEALT", "size": size, "card_ids": [c.id for c in state.hand]}
    )


def _mark_and_shuffle(state: GameState, card_id: int) -> None:
    hand = [c.mark_picked() if c.id == card_id else c for c in state.hand]
    state.hand = list(shuffle(hand, state.rng))
    state.shuffle_count += 1
    state.event_log.append({"type": "HAND_SHUFFLED", "shuffle_count": state.shuffle_count})


def _pick_card(state: GameState, action: PickCardAction) -> StepResult:
    if not state.can_play:
        return StepResult(ok=False, events=[], error="Round is over.")

    card = state.find_card(action.card_id)
    if card is None:
        return StepResult(ok=False, events=[], error="Unknown card.")

    start = len(state.event_log)

    if card.picked:
        state.can_play = False
        state.event_log.append(
            {"type": "ROUND_LOST", "card_id": card.id, "score": state.score.current}
        )
        return StepResult(ok=True, events=state.event_log[start:])

    current = state.score.add_point()
    state.event_log.append({"type": "CARD_PICKED", "card_id": card.id, "score": current})

    # A milestone deal replaces the hand outright: nothing to mark or shuffle.
    redeal = state.config.redeal_size(current)
    if redeal is not None:
        _deal(state, redeal)
        return StepResult(ok=True, events=state.event_log[start:])

    if current == state.config.winning_score:
        state.can_play = False
        state.event_log.append({"type": "GAME_WON", "score": current})

    _mark_and_shuffle(state, card.id)
    return StepResult(ok=True, events=state.event_log[start:])


def _reset(state: GameState) -> StepResult:
    start = len(state.event_log)
    state.deck.reset()
    _deal(state, state.config.starting_hand)
    state.score.current = 0
    state.can_play = True
    state.event_log.append({"type": "GAME_RESET", "best": state.score.best})
    return StepResult(ok=True, events=state.event_log[start:])


def step(state: GameState, action: Action) -> StepResult:
    """Apply a single action to the game state.

    This mutates `state` in-place but remains deterministic for a given
    (seed, config, action sequence).
    """
    state.action_log.append(action)

    if isinstance(action, PickCardAction):
        return _pick_card(state, action)
    if isinstance(action, ResetAction):
        return _reset(state)
    return StepResult(ok=False, events=[], error="Unknown action.")


def reduce(state: GameState, action: Action) -> GameState:
    """Pure form of :func:`step`: returns the next state, leaving `state` untouched."""
    nxt = copy.deepcopy(state)
    step(nxt, action)
    return nxt


def pick_card(state: GameState, card_id: int) -> StepResult:
    return step(state, PickCardAction(card_id=card_id))


def reset_game(state: GameState) -> StepResult:
    return step(state, ResetAction())


def new_game(
    seed: int,
    config: GameConfig | None = None,
    cards: Sequence[CardDefinition] | None = None,
) -> GameState:
    cfg = config or GameConfig()
    deck = Deck(cards) if cards is not None else Deck.standard()
    cfg.validate(len(deck))

    state = GameState(config=cfg, seed=seed, rng=random.Random(seed), deck=deck)
    _deal(state, cfg.starting_hand)
    return state


def replay(
    seed: int,
    actions: Iterable[Action],
    config: GameConfig | None = None,
    cards: Sequence[CardDefinition] | None = None,
) -> GameState:
    state = new_game(seed, config=config, cards=cards)
    for a in actions:
        step(state, a)
    return state
