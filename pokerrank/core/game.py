"""
Heads-up Texas Hold'em deal sequence.

This module runs a two-seat hand with no betting:
- Deal two hole cards to the player and to the opponent
- Reveal the flop, turn and river one stage at a time
- At showdown, evaluate both 7-card hands and pick the winner (or a tie)

The evaluator itself holds no state; everything a hand needs lives on the
HeadsUpGame instance.
"""

from __future__ import annotations
from typing import List, Dict, Optional, Any
from dataclasses import dataclass
from enum import Enum
import random
import logging

from pokerrank.core.card import Card, Deck, format_cards
from pokerrank.core.exceptions import StageError
from pokerrank.core.hand import EvaluationResult, evaluate_best_hand, compare_results
from pokerrank.core.rules import (
    GamePhase, STAGE_DEALS, HOLE_CARDS,
    PLAYER_SEAT, OPPONENT_SEAT, SEATS,
)


logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Who won the showdown."""
    PLAYER = "player"
    OPPONENT = "opponent"
    TIE = "tie"


@dataclass(frozen=True)
class ShowdownResult:
    """Both evaluated hands and the outcome."""
    player: EvaluationResult
    opponent: EvaluationResult
    outcome: Outcome

    @property
    def message(self) -> str:
        if self.outcome == Outcome.PLAYER:
            return f"You win with {self.player.description}!"
        if self.outcome == Outcome.OPPONENT:
            return f"Opponent wins with {self.opponent.description}!"
        return "It's a tie!"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "message": self.message,
            "player": self.player.to_dict(),
            "opponent": self.opponent.to_dict(),
        }


def decide_showdown(player: EvaluationResult, opponent: EvaluationResult) -> ShowdownResult:
    """Compare two evaluated hands; equal scores are an explicit tie."""
    cmp = compare_results(player, opponent)
    if cmp > 0:
        outcome = Outcome.PLAYER
    elif cmp < 0:
        outcome = Outcome.OPPONENT
    else:
        outcome = Outcome.TIE
    return ShowdownResult(player=player, opponent=opponent, outcome=outcome)


class HeadsUpGame:
    """
    Two-seat deal sequence: pre-flop, flop, turn, river, showdown.

    Usage:
        game = HeadsUpGame()
        game.start_hand()
        while game.phase != GamePhase.SHOWDOWN:
            game.next_stage()
        print(game.showdown.message)
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Optional random source for reproducible shuffles
        """
        self._rng = rng
        self.deck: Optional[Deck] = None
        self.hands: Dict[str, List[Card]] = {seat: [] for seat in SEATS}
        self.community_cards: List[Card] = []
        self.phase = GamePhase.WAITING
        self.hand_number = 0
        self.showdown: Optional[ShowdownResult] = None

    @property
    def player_hand(self) -> List[Card]:
        return self.hands[PLAYER_SEAT]

    @property
    def opponent_hand(self) -> List[Card]:
        return self.hands[OPPONENT_SEAT]

    def is_hand_running(self) -> bool:
        """Check if a hand is dealt and not yet at showdown."""
        return self.phase not in (GamePhase.WAITING, GamePhase.SHOWDOWN)

    def start_hand(self) -> None:
        """Shuffle a fresh deck and deal two hole cards to each seat."""
        self.hand_number += 1
        logger.info(f"Starting hand #{self.hand_number}")

        self.deck = Deck(shuffle=True, rng=self._rng)
        self.community_cards = []
        self.showdown = None
        for seat in SEATS:
            self.hands[seat] = self.deck.deal(HOLE_CARDS)

        self.phase = GamePhase.PRE_FLOP

    def next_stage(self) -> GamePhase:
        """
        Advance one stage: reveal flop, turn or river, or go to showdown.

        Returns:
            The new phase

        Raises:
            StageError: If no hand is running
        """
        if self.phase == GamePhase.WAITING:
            raise StageError("No hand in progress, call start_hand() first")
        if self.phase == GamePhase.SHOWDOWN:
            raise StageError("Hand is over, call start_hand() to deal again")

        if self.phase == GamePhase.RIVER:
            self._go_to_showdown()
            return self.phase

        next_phase, count = STAGE_DEALS[self.phase]
        self.community_cards.extend(self.deck.deal(count))
        self.phase = next_phase
        logger.info(f"{self.phase.display_name}: {' '.join(map(str, self.community_cards))}")
        return self.phase

    def _go_to_showdown(self) -> None:
        """Evaluate both 7-card hands and record the outcome."""
        player = evaluate_best_hand(self.player_hand + self.community_cards)
        opponent = evaluate_best_hand(self.opponent_hand + self.community_cards)
        self.showdown = decide_showdown(player, opponent)
        self.phase = GamePhase.SHOWDOWN
        logger.info(
            f"Showdown #{self.hand_number}: {player.description} vs "
            f"{opponent.description} -> {self.showdown.outcome.value}"
        )

    def get_state(self, reveal: bool = False) -> Dict[str, Any]:
        """
        Get the current table state.

        Args:
            reveal: Show the opponent's cards before showdown

        Returns:
            State dictionary
        """
        show_opponent = reveal or self.phase == GamePhase.SHOWDOWN
        state: Dict[str, Any] = {
            "phase": self.phase.name,
            "stage": self.phase.display_name,
            "hand_number": self.hand_number,
            "player_hand": [c.to_dict() for c in self.player_hand],
            "community_cards": [c.to_dict() for c in self.community_cards],
            "opponent_hand": (
                [c.to_dict() for c in self.opponent_hand] if show_opponent else None
            ),
        }
        if self.showdown is not None:
            state["showdown"] = self.showdown.to_dict()
        return state

    def render(self) -> str:
        """Render the table as text."""
        if self.phase == GamePhase.SHOWDOWN:
            return (
                f"Your Hand: {format_cards(self.player_hand)}\n"
                f"Community: {format_cards(self.community_cards)}\n"
                f"Opponent: {format_cards(self.opponent_hand)}\n\n"
                f"--- Showdown ---\n"
                f"You: {self.showdown.player.description}\n"
                f"Opponent: {self.showdown.opponent.description}\n"
                f"{self.showdown.message}"
            )
        return (
            f"Your Hand: {format_cards(self.player_hand)}\n"
            f"Community: {format_cards(self.community_cards)}\n"
            f"Opponent: [Hidden, Hidden]\n\n"
            f"Stage: {self.phase.display_name}"
        )
