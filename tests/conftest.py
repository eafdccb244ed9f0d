"""Pytest fixtures for blackjack round tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from core.cards import Card, Deck, Rank, Suit
from core.hand import Hand


class StackedRandom(Random):
    """Random whose shuffle puts chosen cards on top of the deck.

    ``top`` lists cards in the order they will be dealt; every other card
    keeps its construction order underneath.
    """

    top: list[Card] = []

    def shuffle(self, x):
        rest = [card for card in x if card not in self.top]
        x[:] = rest + self.top[::-1]


def stacked_rng(*top: Card) -> StackedRandom:
    """Build a StackedRandom that deals ``top`` first."""
    rng = StackedRandom()
    rng.top = list(top)
    return rng


def make_hand(*cards: Card) -> Hand:
    hand = Hand()
    for card in cards:
        hand.add_card(card)
    return hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand(Card(Suit.SPADES, Rank.ACE), Card(Suit.HEARTS, Rank.KING))


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand(Card(Suit.SPADES, Rank.ACE), Card(Suit.HEARTS, Rank.SIX))


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand(Card(Suit.SPADES, Rank.TEN), Card(Suit.HEARTS, Rank.SIX))


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand(
        Card(Suit.SPADES, Rank.TEN),
        Card(Suit.HEARTS, Rank.SIX),
        Card(Suit.CLUBS, Rank.KING),
    )


# Hypothesis strategies for property-based testing
NON_ACE_RANKS = [rank for rank in Rank if rank is not Rank.ACE]


@st.composite
def card_strategy(draw, ranks=None):
    """Generate a random card."""
    rank = draw(st.sampled_from(ranks or list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(suit, rank)


@st.composite
def hand_strategy(draw, min_cards=2, max_cards=5, ranks=None):
    """Generate a random hand."""
    cards = draw(
        st.lists(card_strategy(ranks=ranks), min_size=min_cards, max_size=max_cards)
    )
    return make_hand(*cards)
