"""
PokerRank Core - Pure Python hand ranking

This module contains the card model, category detectors, hand evaluator and
the heads-up deal sequence, without any network dependencies.
"""

from pokerrank.core.card import Card, Deck, Rank, Suit, parse_cards, format_cards
from pokerrank.core.exceptions import (
    PokerRankError, InvalidCard, InsufficientCards, DeckExhausted, StageError,
)
from pokerrank.core.hand import (
    HandCategory, EvaluationResult,
    evaluate_hand, evaluate_best_hand, compare_hands, compare_results,
    get_hand_description,
)
from pokerrank.core.game import HeadsUpGame, Outcome, ShowdownResult
from pokerrank.core.rules import GamePhase

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "parse_cards",
    "format_cards",
    "PokerRankError",
    "InvalidCard",
    "InsufficientCards",
    "DeckExhausted",
    "StageError",
    "HandCategory",
    "EvaluationResult",
    "evaluate_hand",
    "evaluate_best_hand",
    "compare_hands",
    "compare_results",
    "get_hand_description",
    "HeadsUpGame",
    "Outcome",
    "ShowdownResult",
    "GamePhase",
]
