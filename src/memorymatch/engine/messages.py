from __future__ import annotations

from dataclasses import dataclass

from .game import GameState

DEFAULT_PROGRESS: tuple[str, ...] = (
    "Pick a card, and remember which card you picked.",
    "Now pick a different card.",
    "Nicely done! There's one more you haven't picked...",
    "Fantastic! I'll deal you a new hand. Can you do it with more cards?",
    "Good! Keep going...",
    "Level 3! Can you do it one more time with an even bigger hand?",
    "Your memory is incredible. Keep going!",
    "You beat the game!",
)


@dataclass(frozen=True)
class MessageCatalog:
    """Text shown above the hand.

    progress:
      0-3 = tutorial lines for the first hand
      4   = second hand, keep going
      5   = third hand reached
      6   = third hand, keep going
      7   = win
    """

    progress: tuple[str, ...] = DEFAULT_PROGRESS
    already_picked: str = "You already picked that card!"
    play_again: str = "Play again?"

    def __post_init__(self) -> None:
        if len(self.progress) != len(DEFAULT_PROGRESS):
            raise ValueError(f"progress must hold exactly {len(DEFAULT_PROGRESS)} messages")


@dataclass(frozen=True)
class Message:
    text: str
    offers_reset: bool = False
    reset_label: str | None = None


DEFAULT_CATALOG = MessageCatalog()


def select_message(
    can_play: bool,
    current: int,
    catalog: MessageCatalog | None = None,
    *,
    winning_score: int = 18,
    third_hand_at: int = 9,
) -> Message:
    cat = catalog or DEFAULT_CATALOG

    if not can_play and current != winning_score:
        return Message(text=cat.already_picked, offers_reset=True, reset_label=cat.play_again)

    if current == winning_score:
        return Message(text=cat.progress[7], offers_reset=True, reset_label=cat.play_again)
    if current <= 5:
        return Message(text=cat.progress[current])
    if current < third_hand_at:
        return Message(text=cat.progress[4])
    if current == third_hand_at:
        return Message(text=cat.progress[5])
    if current < winning_score:
        return Message(text=cat.progress[6])
    return Message(text=cat.progress[7], offers_reset=True, reset_label=cat.play_again)


def message_for(state: GameState, catalog: MessageCatalog | None = None) -> Message:
    redeals = state.config.redeals
    third_hand_at = max((m for m, _ in redeals), default=state.config.winning_score)
    return select_message(
        state.can_play,
        state.score.current,
        catalog,
        winning_score=state.config.winning_score,
        third_hand_at=third_hand_at,
    )
