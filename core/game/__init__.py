"""Round engine and state management."""

from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import Decision, RoundOutcome, RoundState, is_valid_transition
from core.game.engine import DEALER_STANDS_ON, RoundEngine, play_round

__all__ = [
    "DEALER_STANDS_ON",
    "Decision",
    "EventEmitter",
    "EventType",
    "GameEvent",
    "RoundEngine",
    "RoundOutcome",
    "RoundState",
    "is_valid_transition",
    "play_round",
]
