"""Tests for the console round driver."""

import pytest

from config import AppConfig, GameConfig
from conftest import stacked_rng
from console import main as console_main
from console.main import INTRO_LINES, main, play
from core.cards import Card, Rank, Suit
from core.game import RoundEngine, RoundOutcome


def C(rank: Rank, suit: Suit = Suit.SPADES) -> Card:
    return Card(suit, rank)


BUST_DEAL = (C(Rank.TEN), C(Rank.NINE), C(Rank.SEVEN, Suit.HEARTS), C(Rank.EIGHT, Suit.HEARTS), C(Rank.FIVE))
DEALER_BUST_DEAL = (
    C(Rank.TEN),
    C(Rank.EIGHT),
    C(Rank.TEN, Suit.HEARTS),
    C(Rank.SIX, Suit.HEARTS),
    C(Rank.KING, Suit.HEARTS),
)


def run(top, inputs, show_dealer_upcard=True):
    lines = iter(inputs)
    output = []
    engine = RoundEngine(rng=stacked_rng(*top))
    outcome = play(engine, lambda: next(lines), output.append, show_dealer_upcard)
    return outcome, output


class TestPlay:
    """Tests for playing a round through text input and output."""

    def test_blackjack_needs_no_input(self):
        outcome, output = run((C(Rank.ACE), C(Rank.KING), C(Rank.TWO), C(Rank.THREE)), [])
        assert outcome == RoundOutcome.PLAYER_BLACKJACK
        assert output == ["A♠ K♠", "Blackjack! You win!"]

    def test_player_bust(self):
        outcome, output = run(BUST_DEAL, ["x", "H"])
        assert outcome == RoundOutcome.PLAYER_BUST
        assert output == [
            *INTRO_LINES,
            "Dealer shows: 7♥ ??",
            "Your turn",
            "10♠ 9♠ (19)",
            "10♠ 9♠ 5♠ (24)",
            "You've gone and busted my good man.",
        ]

    def test_stand_and_dealer_bust(self):
        outcome, output = run(DEALER_BUST_DEAL, ["s"], show_dealer_upcard=False)
        assert outcome == RoundOutcome.DEALER_BUST
        assert "Dealer shows: 10♥ ??" not in output
        assert output[-3:] == ["Dealer's turn", "10♥ 6♥ K♥ (26)", "You win!"]

    def test_hit_then_stand(self):
        outcome, output = run(
            (C(Rank.TEN), C(Rank.TWO), C(Rank.TEN, Suit.HEARTS), C(Rank.SEVEN, Suit.HEARTS), C(Rank.SEVEN)),
            ["H", "S"],
        )
        # 19 against the dealer's 17
        assert outcome == RoundOutcome.PLAYER_WINS
        assert "10♠ 2♠ 7♠ (19)" in output
        assert output[-1] == "You win!"


class TestMain:
    """Tests for the console entry point."""

    @pytest.fixture
    def stacked(self, monkeypatch):
        def install(*top):
            monkeypatch.setattr(console_main, "Random", lambda seed: stacked_rng(*top))

        return install

    def test_round_exits_zero(self, monkeypatch, capsys, stacked):
        stacked(*DEALER_BUST_DEAL)
        answers = iter(["S"])
        monkeypatch.setattr("builtins.input", lambda: next(answers))

        assert main(AppConfig(game=GameConfig(seed=1))) == 0
        assert "You win!" in capsys.readouterr().out

    def test_closed_input_exits_one(self, monkeypatch, stacked):
        stacked(*BUST_DEAL)

        def closed():
            raise EOFError

        monkeypatch.setattr("builtins.input", closed)
        assert main(AppConfig(game=GameConfig(seed=1))) == 1

    def test_seeded_rounds_complete(self, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda: "S")
        assert main(AppConfig(game=GameConfig(seed=2024))) == 0
