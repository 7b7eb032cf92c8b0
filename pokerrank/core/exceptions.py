"""
Exceptions raised by the PokerRank core.

Every error derives from PokerRankError so callers (and the HTTP layer) can
catch domain failures in one place. Errors that signal bad input also derive
from ValueError.
"""


class PokerRankError(Exception):
    """Base class for all PokerRank errors."""
    pass


class InvalidCard(PokerRankError, ValueError):
    """A rank or suit outside the 52-card universe."""
    pass


class InsufficientCards(PokerRankError, ValueError):
    """Fewer cards than a 5-card hand needs were given to the evaluator."""
    pass


class DeckExhausted(PokerRankError, ValueError):
    """More cards were requested than the deck still holds."""
    pass


class StageError(PokerRankError):
    """Illegal heads-up stage transition."""
    pass
