"""
Heads-up Texas Hold'em stages and constants.

The game reveals community cards in three steps (flop, turn, river) after
each of the two seats has received its hole cards, then goes to showdown
where both 7-card hands are evaluated.
"""

from enum import Enum


class GamePhase(Enum):
    """Stages of a heads-up hand, with their display names."""
    WAITING = "Waiting"       # No hand dealt yet
    PRE_FLOP = "Pre-Flop"     # Hole cards dealt
    FLOP = "Flop"             # 3 community cards
    TURN = "Turn"             # 4th community card
    RIVER = "River"           # 5th community card
    SHOWDOWN = "Showdown"     # Hands revealed and ranked

    @property
    def display_name(self) -> str:
        return self.value


# Seats
PLAYER_SEAT = "player"
OPPONENT_SEAT = "opponent"
SEATS = (PLAYER_SEAT, OPPONENT_SEAT)

# Cards per phase
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
RIVER_CARDS = 1
TOTAL_COMMUNITY_CARDS = 5

# Hand evaluation
HAND_SIZE = 5  # Best 5-card hand
MIN_EVALUATION_CARDS = 5

# Cards revealed when leaving each phase
STAGE_DEALS = {
    GamePhase.PRE_FLOP: (GamePhase.FLOP, FLOP_CARDS),
    GamePhase.FLOP: (GamePhase.TURN, TURN_CARDS),
    GamePhase.TURN: (GamePhase.RIVER, RIVER_CARDS),
}
