"""
Core game logic for console Blackjack.

This package contains the fundamental game components: cards, the deck,
hand valuation, the event bus and the exception hierarchy.
"""

import random
from typing import Optional

from .enums import (
    Suit, Rank, Phase, Decision, Recipient, Outcome, ResultReason,
    get_all_suits, get_all_ranks
)
from .cards import Card, Deck, RandomSource, DECK_SIZE
from .scoring import Hand, value_of, BLACKJACK, DEALER_STAND_TOTAL
from .events import EventBus, EventType, GameEvent, get_event_bus, set_event_bus
from .exceptions import (
    BlackjackError, DeckExhaustedError, InvalidDeckError,
    RoundStateError, GameConfigError
)


def new_deck(shuffle: bool = True, seed: Optional[int] = None) -> Deck:
    """Create a new deck of cards.

    Args:
        shuffle: Whether to shuffle the deck after creation.
        seed: Optional seed for a reproducible shuffle.

    Returns:
        A new deck of cards.
    """
    deck = Deck(random.Random(seed))
    if shuffle:
        deck.shuffle()
    return deck


__all__ = [
    # Enums
    'Suit', 'Rank', 'Phase', 'Decision', 'Recipient', 'Outcome', 'ResultReason',

    # Cards
    'Card', 'Deck', 'RandomSource', 'DECK_SIZE',

    # Scoring
    'Hand', 'value_of', 'BLACKJACK', 'DEALER_STAND_TOTAL',

    # Events
    'EventBus', 'EventType', 'GameEvent', 'get_event_bus', 'set_event_bus',

    # Exceptions
    'BlackjackError', 'DeckExhaustedError', 'InvalidDeckError',
    'RoundStateError', 'GameConfigError',

    # Convenience functions
    'new_deck',

    # Utility functions
    'get_all_suits', 'get_all_ranks'
]
