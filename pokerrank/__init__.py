"""
PokerRank - Texas Hold'em Hand Ranking Engine

Evaluates 5-7 cards into one of the ten poker hand categories and a single
comparable score:
- Pure Python evaluator (no external poker dependencies)
- Heads-up deal sequence (pre-flop, flop, turn, river, showdown)
- FastAPI server exposing evaluation and comparison

Usage:
    from pokerrank import Card, evaluate_best_hand, compare_hands
"""

__version__ = "0.1.0"

from pokerrank.core.card import Card, Deck, Rank, Suit, parse_cards
from pokerrank.core.exceptions import PokerRankError, InvalidCard, InsufficientCards
from pokerrank.core.hand import (
    HandCategory, EvaluationResult,
    evaluate_hand, evaluate_best_hand, compare_hands,
)
from pokerrank.core.game import HeadsUpGame, Outcome

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "parse_cards",
    "PokerRankError",
    "InvalidCard",
    "InsufficientCards",
    "HandCategory",
    "EvaluationResult",
    "evaluate_hand",
    "evaluate_best_hand",
    "compare_hands",
    "HeadsUpGame",
    "Outcome",
    "__version__",
]
