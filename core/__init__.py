"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, DeckExhaustedError, Rank, Suit
from core.hand import BLACKJACK, Hand

__all__ = [
    "BLACKJACK",
    "Card",
    "Deck",
    "DeckExhaustedError",
    "Rank",
    "Suit",
    "Hand",
]
