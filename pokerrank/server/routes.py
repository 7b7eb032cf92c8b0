"""
HTTP API Routes for PokerRank.

Stateless routes evaluate and compare hands. The heads-up routes drive a
single global game, one stage per request.
"""

from typing import Dict, Any, Optional
import logging
import random

from fastapi import APIRouter, HTTPException

from pokerrank.core.card import parse_card_list
from pokerrank.core.exceptions import PokerRankError
from pokerrank.core.game import HeadsUpGame
from pokerrank.core.hand import evaluate_best_hand, compare_results
from pokerrank.server.schemas import (
    EvaluateRequest, CompareRequest, StartHandRequest,
    EvaluationSchema, CompareResponse, GameStateSchema,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Global game instance for single-table mode
_game: Optional[HeadsUpGame] = None

WINNER_LABELS = {1: "first", -1: "second", 0: "tie"}


def get_game() -> HeadsUpGame:
    """Get the current game instance."""
    if _game is None:
        raise HTTPException(status_code=400, detail="Game not started")
    return _game


def _bad_request(error: PokerRankError) -> HTTPException:
    logger.warning(f"Rejected request: {error}")
    return HTTPException(status_code=400, detail=str(error))


@router.post("/evaluate", response_model=EvaluationSchema)
async def evaluate(req: EvaluateRequest) -> Dict[str, Any]:
    """
    Evaluate a hand of 5-7 cards.

    Returns the category, kickers, score and the five cards used.
    """
    try:
        result = evaluate_best_hand(parse_card_list(req.cards))
    except PokerRankError as e:
        raise _bad_request(e)
    return result.to_dict()


@router.post("/compare", response_model=CompareResponse)
async def compare(req: CompareRequest) -> Dict[str, Any]:
    """
    Compare two hands.

    ``winner`` is "first", "second" or "tie".
    """
    try:
        first = evaluate_best_hand(parse_card_list(req.first))
        second = evaluate_best_hand(parse_card_list(req.second))
    except PokerRankError as e:
        raise _bad_request(e)

    return {
        "winner": WINNER_LABELS[compare_results(first, second)],
        "first": first.to_dict(),
        "second": second.to_dict(),
    }


@router.post("/start_hand", response_model=GameStateSchema)
async def start_hand(req: Optional[StartHandRequest] = None) -> Dict[str, Any]:
    """
    Start a new heads-up hand.

    Deals two hole cards to each seat. A seed makes the deal reproducible.
    """
    global _game

    seed = req.seed if req is not None else None
    if _game is None or seed is not None:
        rng = random.Random(seed) if seed is not None else None
        _game = HeadsUpGame(rng=rng)

    _game.start_hand()
    return _game.get_state()


@router.post("/next_stage", response_model=GameStateSchema)
async def next_stage() -> Dict[str, Any]:
    """
    Reveal the next community cards, or go to showdown after the river.
    """
    game = get_game()

    try:
        game.next_stage()
    except PokerRankError as e:
        raise _bad_request(e)

    return game.get_state()


@router.get("/get_game_state", response_model=GameStateSchema)
async def get_game_state() -> Dict[str, Any]:
    """
    Get the current table state. The opponent's cards stay hidden until showdown.
    """
    return get_game().get_state()


@router.post("/reset_game")
async def reset_game() -> Dict[str, Any]:
    """
    Reset the game (for development/testing).
    """
    global _game
    _game = None
    return {"success": True, "message": "Game reset"}
