"""Headless rules engine for MemoryMatch.

IMPORTANT: This package must never perform I/O.
"""

from .actions import PickCardAction, ResetAction
from .deck import Deck
from .game import GameConfig, GameState, StepResult, new_game, pick_card, reduce, replay, reset_game, step
from .hand import InsufficientCardsError, draw_hand, shuffle
from .messages import Message, MessageCatalog, message_for, select_message
from .types import CardDefinition, HandCard, Score, Suit

__all__ = [
    "CardDefinition",
    "Deck",
    "GameConfig",
    "GameState",
    "HandCard",
    "InsufficientCardsError",
    "Message",
    "MessageCatalog",
    "PickCardAction",
    "ResetAction",
    "Score",
    "StepResult",
    "Suit",
    "draw_hand",
    "message_for",
    "new_game",
    "pick_card",
    "reduce",
    "replay",
    "reset_game",
    "select_message",
    "shuffle",
    "step",
]
