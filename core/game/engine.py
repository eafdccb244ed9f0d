"""Single-round blackjack engine with state machine."""

import logging
from random import Random
from typing import Any, Callable

from transitions import Machine

from core.cards import Card, Deck
from core.hand import Hand
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import Decision, RoundOutcome, RoundState

logger = logging.getLogger(__name__)

# Dealer stands on any 17, soft or hard
DEALER_STANDS_ON = 17


class RoundEngine:
    """
    One round of blackjack against a fixed-policy dealer.

    This is the core game logic, completely UI-agnostic. The player's
    decisions arrive one per call and results are exposed through
    read-only properties and events.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "open_player_turn", "source": "dealing", "dest": "player_turn"},
        {"trigger": "resolve_blackjack", "source": "dealing", "dest": "resolved"},
        {"trigger": "take_card", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "resolve_bust", "source": "player_turn", "dest": "resolved"},
        {"trigger": "finish_player_turn", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "resolve_dealer", "source": "dealer_turn", "dest": "resolved"},
    ]

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a new round with a fresh, shuffled deck.

        Args:
            rng: Random number generator for reproducible rounds
        """
        self.events = EventEmitter()
        self._deck = Deck(rng=rng)
        self._deck.shuffle()
        self.events.emit_new(EventType.DECK_SHUFFLED, cards_remaining=len(self._deck))

        self._player_hand = Hand()
        self._dealer_hand = Hand()
        self._outcome: RoundOutcome | None = None

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    @property
    def deck(self) -> Deck:
        return self._deck

    @property
    def player_hand(self) -> Hand:
        return self._player_hand

    @property
    def dealer_hand(self) -> Hand:
        return self._dealer_hand

    @property
    def outcome(self) -> RoundOutcome | None:
        """The round outcome, or None until the round is resolved."""
        return self._outcome

    @property
    def is_over(self) -> bool:
        return self.state == RoundState.RESOLVED

    @property
    def player_won(self) -> bool:
        return self._outcome is not None and self._outcome.player_won

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to round events."""
        self.events.subscribe(handler, event_type)

    def deal(self) -> bool:
        """
        Deal the opening cards: two to the player, then two to the dealer.

        A player total of 21 ends the round at once as a blackjack.

        Returns:
            True if the cards were dealt
        """
        if self.state != RoundState.DEALING:
            return self._reject("Cards have already been dealt")

        self._deal_card_to_hand(self._player_hand)
        self._deal_card_to_hand(self._player_hand)
        self._deal_card_to_hand(self._dealer_hand)
        self._deal_card_to_hand(self._dealer_hand, face_up=False)

        self.events.emit_new(EventType.ROUND_STARTED)

        if self._player_hand.is_twenty_one:
            self.events.emit_new(EventType.PLAYER_BLACKJACK)
            self.resolve_blackjack()
            return self._finish(RoundOutcome.PLAYER_BLACKJACK)

        self.open_player_turn()
        return True

    def submit(self, decision: Any) -> bool:
        """
        Apply one player decision.

        Anything other than a Decision member is ignored and leaves the
        round untouched, so the caller can simply ask again.

        Returns:
            True if the decision was applied
        """
        if decision is Decision.HIT:
            return self.hit()
        if decision is Decision.STAND:
            return self.stand()
        return self._reject(f"Unrecognized decision: {decision!r}")

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        if self.state != RoundState.PLAYER_TURN:
            return self._reject("Cannot hit outside the player's turn")

        self._deal_card_to_hand(self._player_hand)
        self.events.emit_new(EventType.PLAYER_HIT, hand_total=self._player_hand.total)

        if self._player_hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_total=self._player_hand.total)
            self.resolve_bust()
            return self._finish(RoundOutcome.PLAYER_BUST)

        self.take_card()
        return True

    def stand(self) -> bool:
        """Player stands; the dealer then plays out their hand."""
        if self.state != RoundState.PLAYER_TURN:
            return self._reject("Cannot stand outside the player's turn")

        self.events.emit_new(EventType.PLAYER_STAND, hand_total=self._player_hand.total)
        self.finish_player_turn()
        return self._play_dealer()

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Card:
        """Deal a card to a hand."""
        card = self._deck.deal()
        hand.add_card(card)
        name = self._hand_name(hand)
        logger.debug("Dealt %r to %s (total %d)", card, name, hand.total)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=card if face_up else None,
            hand=name,
            hand_total=hand.total if face_up else None,
        )
        return card

    def _hand_name(self, hand: Hand) -> str:
        return "dealer" if hand is self._dealer_hand else "player"

    def _play_dealer(self) -> bool:
        """Dealer draws until reaching 17 or more."""
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=self._dealer_hand.cards[1],
            hand_total=self._dealer_hand.total,
        )

        while self._dealer_hand.total < DEALER_STANDS_ON:
            self._deal_card_to_hand(self._dealer_hand)
            self.events.emit_new(EventType.DEALER_HITS, hand_total=self._dealer_hand.total)

        self.resolve_dealer()

        if self._dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_total=self._dealer_hand.total)
            return self._finish(RoundOutcome.DEALER_BUST)

        self.events.emit_new(EventType.DEALER_STANDS, hand_total=self._dealer_hand.total)
        # Equal totals go to the dealer; there is no push
        if self._dealer_hand.total < self._player_hand.total:
            return self._finish(RoundOutcome.PLAYER_WINS)
        return self._finish(RoundOutcome.DEALER_WINS)

    def _finish(self, outcome: RoundOutcome) -> bool:
        """Record the outcome of a resolved round."""
        self._outcome = outcome
        self.events.emit_new(
            EventType.PLAYER_WINS if outcome.player_won else EventType.PLAYER_LOSES,
            outcome=outcome,
        )
        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=outcome,
            player_total=self._player_hand.total,
            dealer_total=self._dealer_hand.total,
        )
        logger.info(
            "Round resolved: %s (player %d, dealer %d)",
            outcome.name,
            self._player_hand.total,
            self._dealer_hand.total,
        )
        return True

    def _reject(self, message: str) -> bool:
        logger.warning("%s (state: %s)", message, self.state.name)
        self.events.emit_new(EventType.INVALID_ACTION, message=message, state=self.state)
        return False

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == RoundState.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == RoundState.PLAYER_TURN


def play_round(
    decide: Callable[[RoundEngine], Any],
    rng: Random | None = None,
) -> RoundEngine:
    """
    Play a complete round, asking ``decide`` for each player decision.

    Unrecognized decisions are ignored and ``decide`` is asked again.

    Returns:
        The resolved engine
    """
    engine = RoundEngine(rng=rng)
    engine.deal()
    while engine.state == RoundState.PLAYER_TURN:
        engine.submit(decide(engine))
    return engine
