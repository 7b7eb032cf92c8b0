"""
Hand Evaluation for Texas Hold'em.

This module evaluates 5-7 cards and returns the best 5-card hand.
Every result carries a single integer score, higher = better hand, so two
hands are compared with plain integer comparison.

Hand Rankings (best to worst):
10. Royal Flush: A♠ K♠ Q♠ J♠ T♠
 9. Straight Flush: 5 consecutive cards of same suit
 8. Four of a Kind: 4 cards of same rank
 7. Full House: 3 of a kind + pair
 6. Flush: 5 cards of same suit
 5. Straight: 5 consecutive cards
 4. Three of a Kind: 3 cards of same rank
 3. Two Pair: 2 different pairs
 2. One Pair: 2 cards of same rank
 1. High Card: No made hand

Note: Ace can be low in A-2-3-4-5 straight (wheel).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Optional, Sequence, Tuple, Union
import logging

from pokerrank.core.card import Card, Rank, NUM_RANKS, RANK_NAMES
from pokerrank.core.detectors import (
    HandMatch, rank_order,
    detect_royal_flush, detect_straight_flush, detect_four_of_a_kind,
    detect_full_house, detect_flush, detect_straight,
    detect_three_of_a_kind, detect_two_pair, detect_one_pair,
    detect_high_card,
)
from pokerrank.core.exceptions import InsufficientCards
from pokerrank.core.rules import HAND_SIZE, MIN_EVALUATION_CARDS


logger = logging.getLogger(__name__)


class HandCategory(IntEnum):
    """Hand categories from best (highest value) to worst (lowest value)."""
    ROYAL_FLUSH = 10
    STRAIGHT_FLUSH = 9
    FOUR_OF_A_KIND = 8
    FULL_HOUSE = 7
    FLUSH = 6
    STRAIGHT = 5
    THREE_OF_A_KIND = 4
    TWO_PAIR = 3
    ONE_PAIR = 2
    HIGH_CARD = 1


# Hand category names for display
HAND_CATEGORY_NAMES = {
    HandCategory.ROYAL_FLUSH: "Royal Flush",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.HIGH_CARD: "High Card",
}


Detector = Callable[[Sequence[Card]], Optional[HandMatch]]

# Tried in this order; the first match wins.
DETECTORS: Tuple[Tuple[HandCategory, Detector], ...] = (
    (HandCategory.ROYAL_FLUSH, detect_royal_flush),
    (HandCategory.STRAIGHT_FLUSH, detect_straight_flush),
    (HandCategory.FOUR_OF_A_KIND, detect_four_of_a_kind),
    (HandCategory.FULL_HOUSE, detect_full_house),
    (HandCategory.FLUSH, detect_flush),
    (HandCategory.STRAIGHT, detect_straight),
    (HandCategory.THREE_OF_A_KIND, detect_three_of_a_kind),
    (HandCategory.TWO_PAIR, detect_two_pair),
    (HandCategory.ONE_PAIR, detect_one_pair),
    (HandCategory.HIGH_CARD, detect_high_card),
)


# Kickers are base-13 digits; at most five of them, so every kicker
# encoding is below 13**5 and categories never overlap.
KICKER_BASE = NUM_RANKS
CATEGORY_BASE = KICKER_BASE ** HAND_SIZE


@dataclass(frozen=True, order=True)
class EvaluationResult:
    """
    The best 5-card classification of a card set.

    Results compare by ``score`` alone: ``a > b`` means a is the stronger
    hand and ``a == b`` is a tie.

    Attributes:
        category: The hand category
        kickers: Tie-break ranks, most significant first
        score: Single comparable strength (higher is better)
        cards: The five cards that make the hand
    """
    category: HandCategory = field(compare=False)
    kickers: Tuple[Rank, ...] = field(compare=False)
    score: int
    cards: Tuple[Card, ...] = field(default=(), compare=False)

    @property
    def name(self) -> str:
        return HAND_CATEGORY_NAMES[self.category]

    @property
    def description(self) -> str:
        return describe_result(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "category": self.category.name,
            "name": self.name,
            "kickers": [RANK_NAMES[r] for r in self.kickers],
            "score": self.score,
            "cards": [c.to_dict() for c in self.cards],
            "description": self.description,
        }


def encode_score(category: HandCategory, kickers: Sequence[Rank]) -> int:
    """
    Encode a category and its kickers as one integer.

    Formula: category * 13**5 + kickers read as base-13 digits.
    """
    kicker_value = 0
    for rank in kickers:
        kicker_value = kicker_value * KICKER_BASE + int(rank)
    return int(category) * CATEGORY_BASE + kicker_value


def decode_category(score: int) -> HandCategory:
    """Recover the hand category from a score."""
    return HandCategory(score // CATEGORY_BASE)


def evaluate_hand(cards: Sequence[Card]) -> EvaluationResult:
    """
    Evaluate a poker hand (5-7 cards).

    The caller's sequence is not modified. More than 7 cards are accepted;
    duplicates are not rejected.

    Args:
        cards: Hole cards plus community cards

    Returns:
        EvaluationResult for the best 5-card hand

    Raises:
        InsufficientCards: If fewer than 5 cards are provided
    """
    if len(cards) < MIN_EVALUATION_CARDS:
        raise InsufficientCards(
            f"Need at least {MIN_EVALUATION_CARDS} cards, got {len(cards)}"
        )

    ranked = rank_order(cards)
    for category, detect in DETECTORS:
        match = detect(ranked)
        if match is None:
            continue
        result = EvaluationResult(
            category=category,
            kickers=match.kickers,
            score=encode_score(category, match.kickers),
            cards=match.cards,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Evaluated {' '.join(map(str, ranked))} as {result.name}")
        return result

    # detect_high_card always matches
    raise AssertionError("no detector matched")


# Boundary name used by the game and the server
evaluate_best_hand = evaluate_hand


def compare_results(result1: EvaluationResult, result2: EvaluationResult) -> int:
    """
    Compare two evaluated hands.

    Returns:
        1 if result1 wins, -1 if result2 wins, 0 if tie
    """
    if result1.score > result2.score:
        return 1
    elif result1.score < result2.score:
        return -1
    else:
        return 0


def compare_hands(cards1: Sequence[Card], cards2: Sequence[Card]) -> int:
    """
    Compare two hands.

    Returns:
        1 if cards1 wins, -1 if cards2 wins, 0 if tie
    """
    return compare_results(evaluate_hand(cards1), evaluate_hand(cards2))


def hand_score_to_string(score: int) -> str:
    """Convert numeric score to the hand category name."""
    try:
        return HAND_CATEGORY_NAMES[decode_category(score)]
    except ValueError:
        return "Unknown"


def get_hand_description(hand: Union[Sequence[Card], EvaluationResult]) -> str:
    """Get a human-readable description of a hand or an evaluation."""
    if isinstance(hand, EvaluationResult):
        return describe_result(hand)
    if len(hand) < MIN_EVALUATION_CARDS:
        return "Incomplete hand"
    return describe_result(evaluate_hand(hand))


def describe_result(result: EvaluationResult) -> str:
    """Describe an evaluation, e.g. 'Full House, Twos full of Fives'."""
    category = result.category
    kickers = result.kickers

    if category == HandCategory.ROYAL_FLUSH:
        return "Royal Flush"
    elif category == HandCategory.STRAIGHT_FLUSH:
        return f"Straight Flush, {_rank_name(kickers[0])} high"
    elif category == HandCategory.FOUR_OF_A_KIND:
        return f"Four of a Kind, {_plural(kickers[0])}"
    elif category == HandCategory.FULL_HOUSE:
        return f"Full House, {_plural(kickers[0])} full of {_plural(kickers[1])}"
    elif category == HandCategory.FLUSH:
        return f"Flush, {_rank_name(kickers[0])} high"
    elif category == HandCategory.STRAIGHT:
        if kickers[0] == Rank.FIVE:
            return "Straight, Five high (Wheel)"
        return f"Straight, {_rank_name(kickers[0])} high"
    elif category == HandCategory.THREE_OF_A_KIND:
        return f"Three of a Kind, {_plural(kickers[0])}"
    elif category == HandCategory.TWO_PAIR:
        return f"Two Pair, {_plural(kickers[0])} and {_plural(kickers[1])}"
    elif category == HandCategory.ONE_PAIR:
        return f"Pair of {_plural(kickers[0])}"
    else:
        return f"High Card, {_rank_name(kickers[0])}"


def _rank_name(rank: Rank) -> str:
    """Get the name of a rank."""
    return RANK_NAMES[rank]


def _plural(rank: Rank) -> str:
    name = RANK_NAMES[rank]
    return name + "es" if rank == Rank.SIX else name + "s"
