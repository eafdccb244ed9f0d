"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass, field
from enum import Enum
from random import Random
from typing import Iterator


class Suit(Enum):
    """Card suits, in deck construction order."""

    HEARTS = 1
    DIAMONDS = 2
    SPADES = 3
    CLUBS = 4


class Rank(Enum):
    """Card ranks. The value is the numeric rank (Ace is 1)."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 1, face cards = 10)."""
        return min(self.value, 10)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


class DeckExhaustedError(IndexError):
    """Raised when a card is dealt from an empty deck."""


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    suit: Suit
    rank: Rank
    value: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.rank.blackjack_value)

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace


class Deck:
    """A standard 52-card deck dealt from the top."""

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a new deck in construction order.

        Args:
            rng: Random number generator used for shuffling
        """
        self._rng = rng or Random()
        self._cards: list[Card] = [Card(suit, rank) for suit in Suit for rank in Rank]

    def shuffle(self) -> None:
        """Shuffle the remaining cards."""
        self._rng.shuffle(self._cards)

    def deal(self) -> Card:
        """Remove and return the top card of the deck."""
        if not self._cards:
            raise DeckExhaustedError("Cannot deal from an empty deck")
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
