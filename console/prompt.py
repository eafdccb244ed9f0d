"""Reading player decisions from text input."""

import logging
from typing import Callable

from core.game.state import Decision

logger = logging.getLogger(__name__)

DECISION_KEYS: dict[str, Decision] = {
    "H": Decision.HIT,
    "S": Decision.STAND,
}


def parse_decision(raw: str) -> Decision | None:
    """Map 'H' or 'S' (any case, surrounding whitespace ignored) to a Decision."""
    return DECISION_KEYS.get(raw.strip().upper())


def prompt_decision(read: Callable[[], str]) -> Decision:
    """
    Read input until it names a valid decision.

    Args:
        read: Returns one line of raw input per call

    Raises:
        EOFError: If the input runs out before a valid decision
    """
    while True:
        raw = read()
        decision = parse_decision(raw)
        if decision is not None:
            return decision
        logger.debug("Ignoring unrecognized input %r", raw)
