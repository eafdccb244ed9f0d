"""Round state, player decisions and outcomes."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: DEALING → PLAYER_TURN → DEALER_TURN → RESOLVED
    """

    # Initial two cards each
    DEALING = auto()

    # Waiting for Hit/Stand decisions
    PLAYER_TURN = auto()

    # Dealer draws to 17
    DEALER_TURN = auto()

    # Terminal
    RESOLVED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class Decision(Enum):
    """Decisions the player may submit during their turn."""

    HIT = auto()
    STAND = auto()


class RoundOutcome(Enum):
    """Final result of a round."""

    PLAYER_BLACKJACK = auto()
    PLAYER_BUST = auto()
    DEALER_BUST = auto()
    PLAYER_WINS = auto()
    DEALER_WINS = auto()

    @property
    def player_won(self) -> bool:
        """Check if this outcome is a win for the player."""
        return self in (
            RoundOutcome.PLAYER_BLACKJACK,
            RoundOutcome.DEALER_BUST,
            RoundOutcome.PLAYER_WINS,
        )

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[RoundState, list[RoundState]] = {
    RoundState.DEALING: [RoundState.PLAYER_TURN, RoundState.RESOLVED],  # RESOLVED on blackjack
    RoundState.PLAYER_TURN: [RoundState.PLAYER_TURN, RoundState.DEALER_TURN, RoundState.RESOLVED],
    RoundState.DEALER_TURN: [RoundState.RESOLVED],
    RoundState.RESOLVED: [],  # Terminal state
}


def is_valid_transition(from_state: RoundState, to_state: RoundState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
