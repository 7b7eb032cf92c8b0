"""
Pydantic schemas for API request/response validation.
"""

from typing import List, Optional
from pydantic import BaseModel, Field


# ============= Request Schemas =============

class EvaluateRequest(BaseModel):
    """Request to evaluate one hand."""
    cards: List[str] = Field(..., description='Card codes, e.g. ["As", "Kd", "10♥"]')


class CompareRequest(BaseModel):
    """Request to compare two hands."""
    first: List[str] = Field(..., description="Cards of the first hand")
    second: List[str] = Field(..., description="Cards of the second hand")


class StartHandRequest(BaseModel):
    """Request to deal a new heads-up hand."""
    seed: Optional[int] = Field(default=None, description="Seed for a reproducible shuffle")


# ============= Response Schemas =============

class CardSchema(BaseModel):
    """Card representation."""
    rank: str
    suit: str
    text: str
    code: str
    color: str


class EvaluationSchema(BaseModel):
    """Evaluated hand."""
    category: str
    name: str
    kickers: List[str]
    score: int
    cards: List[CardSchema]
    description: str


class CompareResponse(BaseModel):
    """Result of comparing two hands."""
    winner: str = Field(..., description="first, second or tie")
    first: EvaluationSchema
    second: EvaluationSchema


class ShowdownSchema(BaseModel):
    """Heads-up showdown result."""
    outcome: str
    message: str
    player: EvaluationSchema
    opponent: EvaluationSchema


class GameStateSchema(BaseModel):
    """Heads-up table state."""
    phase: str
    stage: str
    hand_number: int
    player_hand: List[CardSchema]
    community_cards: List[CardSchema]
    opponent_hand: Optional[List[CardSchema]] = None
    showdown: Optional[ShowdownSchema] = None

