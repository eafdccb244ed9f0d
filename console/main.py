"""Console entry point for playing one round of blackjack."""

import logging
import sys
from random import Random
from typing import Callable

from config import AppConfig, config as default_config
from console.formatting import format_hand, format_upcard, outcome_message
from console.prompt import prompt_decision
from core.game import RoundEngine, RoundOutcome, RoundState

logger = logging.getLogger(__name__)

INTRO_LINES = (
    "Make a hand more than the dealer's and less than 22.",
    "Enter (H)it or (S)tand to make a move.",
)


def play(
    engine: RoundEngine,
    read: Callable[[], str],
    write: Callable[[str], None],
    show_dealer_upcard: bool = True,
) -> RoundOutcome:
    """
    Drive one round through text input and output.

    Args:
        engine: A round that has not been dealt yet
        read: Returns one line of player input per call
        write: Receives one line of output per call
        show_dealer_upcard: Show the dealer's first card during the player's turn

    Returns:
        The round outcome
    """
    engine.deal()

    if engine.state == RoundState.PLAYER_TURN:
        for line in INTRO_LINES:
            write(line)
        if show_dealer_upcard:
            write(f"Dealer shows: {format_upcard(engine.dealer_hand)}")
        write("Your turn")

    while engine.state == RoundState.PLAYER_TURN:
        write(format_hand(engine.player_hand, show_total=True))
        engine.submit(prompt_decision(read))

    outcome = engine.outcome
    if outcome == RoundOutcome.PLAYER_BLACKJACK:
        write(format_hand(engine.player_hand))
    elif outcome == RoundOutcome.PLAYER_BUST:
        write(format_hand(engine.player_hand, show_total=True))
    else:
        write("Dealer's turn")
        write(format_hand(engine.dealer_hand, show_total=True))

    write(outcome_message(outcome))
    return outcome


def main(app_config: AppConfig | None = None) -> int:
    """Play a single round on stdin/stdout."""
    app_config = app_config or default_config
    logging.basicConfig(
        level=logging.DEBUG if app_config.debug else app_config.log.level,
        format=app_config.log.format,
    )

    engine = RoundEngine(rng=Random(app_config.game.seed))
    try:
        outcome = play(
            engine,
            read=input,
            write=print,
            show_dealer_upcard=app_config.game.show_dealer_upcard,
        )
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed before the round finished")
        return 1

    logger.debug("Exiting after %s", outcome.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
