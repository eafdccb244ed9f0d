"""Text rendering of cards, hands and outcomes."""

from core.cards import Card, Rank, Suit
from core.hand import Hand
from core.game.state import RoundOutcome

SUIT_SYMBOLS: dict[Suit, str] = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.SPADES: "♠",
    Suit.CLUBS: "♣",
}

RANK_LABELS: dict[Rank, str] = {
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

OUTCOME_MESSAGES: dict[RoundOutcome, str] = {
    RoundOutcome.PLAYER_BLACKJACK: "Blackjack! You win!",
    RoundOutcome.PLAYER_BUST: "You've gone and busted my good man.",
    RoundOutcome.DEALER_BUST: "You win!",
    RoundOutcome.PLAYER_WINS: "You win!",
    RoundOutcome.DEALER_WINS: "You lose!",
}

HIDDEN_CARD = "??"


def format_rank(rank: Rank) -> str:
    """Return the short label for a rank (A, 2-10, J, Q, K)."""
    return RANK_LABELS.get(rank, str(rank.value))


def format_card(card: Card) -> str:
    """Render a card as rank label followed by suit symbol, e.g. '10♥'."""
    return f"{format_rank(card.rank)}{SUIT_SYMBOLS[card.suit]}"


def format_hand(hand: Hand, show_total: bool = False) -> str:
    """
    Render a hand as space-separated cards.

    Args:
        hand: Hand to render
        show_total: Append the total, marked soft when an Ace counts as 11
    """
    cards_str = " ".join(format_card(card) for card in hand)
    if not show_total:
        return cards_str
    total_str = f"soft {hand.total}" if hand.is_soft else str(hand.total)
    return f"{cards_str} ({total_str})"


def format_upcard(hand: Hand) -> str:
    """Render the dealer's first card with the rest hidden."""
    if not hand.cards:
        return ""
    hidden = [HIDDEN_CARD] * (len(hand) - 1)
    return " ".join([format_card(hand.cards[0]), *hidden])


def outcome_message(outcome: RoundOutcome) -> str:
    return OUTCOME_MESSAGES[outcome]
