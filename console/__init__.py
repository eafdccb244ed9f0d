"""Console shell: renders a round as text and reads Hit/Stand from input."""

from console.formatting import format_card, format_hand, outcome_message
from console.prompt import parse_decision, prompt_decision

__all__ = [
    "format_card",
    "format_hand",
    "outcome_message",
    "parse_decision",
    "prompt_decision",
]
