"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterator

from core.cards import Card

BLACKJACK = 21


@dataclass
class Hand:
    """A blackjack hand with value calculation."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    @property
    def hard_total(self) -> int:
        """Sum of card values with every Ace counted as 1."""
        return sum(card.value for card in self.cards)

    @property
    def total(self) -> int:
        """
        Calculate the hand total.

        Aces count as 1. When the hand holds an Ace and the hard total is
        11 or less, one Ace is promoted to 11. At most one Ace is ever
        promoted, since a second promotion would always bust.
        """
        total = self.hard_total
        if self.has_ace and total <= 11:
            return total + 10
        return total

    @property
    def has_ace(self) -> bool:
        """Check if the hand holds at least one Ace."""
        return any(card.is_ace for card in self.cards)

    @property
    def is_soft(self) -> bool:
        """Check if the hand is soft (an Ace is counted as 11)."""
        return self.total != self.hard_total

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (total > 21)."""
        return self.total > BLACKJACK

    @property
    def is_twenty_one(self) -> bool:
        """Check if the hand totals exactly 21."""
        return self.total == BLACKJACK

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, total={self.total})"
