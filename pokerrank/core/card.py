"""
Card and Deck classes for hand evaluation.

Cards are immutable (rank, suit) values. Ranks carry a strict total order
(Two lowest, Ace highest) through their integer value, so sorting and
kicker comparison work directly on Rank members. Suits are only used to
group cards for flush detection.
"""

from __future__ import annotations
import random
from typing import Iterable, List, Optional, Sequence
from enum import IntEnum

from pokerrank.core.exceptions import InvalidCard, DeckExhausted


class Suit(IntEnum):
    """Card suits. The integer value is an encoding, not a strength."""
    CLUBS = 0     # ♣
    DIAMONDS = 1  # ♦
    HEARTS = 2    # ♥
    SPADES = 3    # ♠


class Rank(IntEnum):
    """Card ranks from 2 (lowest) to Ace (highest)."""
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


NUM_RANKS = len(Rank)
NUM_SUITS = len(Suit)
DECK_SIZE = NUM_RANKS * NUM_SUITS

# String mappings
SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

SUIT_CHARS = {
    Suit.CLUBS: "c",
    Suit.DIAMONDS: "d",
    Suit.HEARTS: "h",
    Suit.SPADES: "s",
}

RANK_CHARS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Face values as the table shows them ("10" rather than "T")
RANK_LABELS = {rank: char for rank, char in RANK_CHARS.items()}
RANK_LABELS[Rank.TEN] = "10"

RANK_NAMES = {
    Rank.TWO: "Two", Rank.THREE: "Three", Rank.FOUR: "Four",
    Rank.FIVE: "Five", Rank.SIX: "Six", Rank.SEVEN: "Seven",
    Rank.EIGHT: "Eight", Rank.NINE: "Nine", Rank.TEN: "Ten",
    Rank.JACK: "Jack", Rank.QUEEN: "Queen", Rank.KING: "King",
    Rank.ACE: "Ace",
}

# Reverse mappings
CHAR_TO_RANK = {v: k for k, v in RANK_CHARS.items()}
CHAR_TO_RANK["10"] = Rank.TEN  # Also accept "10"
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}


def rank_from_char(rank_char: str) -> Rank:
    """Look up a rank symbol ("2".."10", "T", "J", "Q", "K", "A")."""
    try:
        return CHAR_TO_RANK[rank_char.upper()]
    except KeyError:
        raise InvalidCard(f"Invalid rank: {rank_char!r}") from None


def suit_from_char(suit_char: str) -> Suit:
    """Look up a suit letter ("c", "d", "h", "s") or symbol ("♣", "♦", "♥", "♠")."""
    if suit_char in SYMBOL_TO_SUIT:
        return SYMBOL_TO_SUIT[suit_char]
    try:
        return CHAR_TO_SUIT[suit_char.lower()]
    except KeyError:
        raise InvalidCard(f"Invalid suit: {suit_char!r}") from None


class Card:
    """
    An immutable playing card represented as (rank, suit).

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - String notation: Card.from_string("As"), Card.from_string("10♥")
    - Integer (0-51): Card.from_int(51) = Ace of Spades

    The integer encoding is: card_int = rank * 4 + suit
    Two cards are equal iff both rank and suit match.
    """

    __slots__ = ("rank", "suit", "_int")

    def __init__(self, rank: Rank, suit: Suit):
        try:
            rank = Rank(rank)
            suit = Suit(suit)
        except ValueError:
            raise InvalidCard(f"Invalid card: rank={rank!r}, suit={suit!r}") from None
        object.__setattr__(self, "rank", rank)
        object.__setattr__(self, "suit", suit)
        object.__setattr__(self, "_int", int(rank) * NUM_SUITS + int(suit))

    def __setattr__(self, name: str, value) -> None:
        raise AttributeError(f"Card is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Card is immutable, cannot delete {name!r}")

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        Accepts formats:
        - "As", "Kh", "Td", "2c" (rank + suit char)
        - "10s" (two-character ten)
        - "A♠", "K♥", "10♦", "2♣" (rank + suit symbol)

        Raises:
            InvalidCard: If the rank or suit is not recognized.
        """
        s = s.strip()
        if len(s) < 2:
            raise InvalidCard(f"Invalid card string: {s!r}")

        return cls(rank_from_char(s[:-1]), suit_from_char(s[-1]))

    @classmethod
    def from_int(cls, card_int: int) -> Card:
        """Create a card from integer (0-51)."""
        if not 0 <= card_int < DECK_SIZE:
            raise InvalidCard(f"Card int must be 0-51, got {card_int}")
        return cls(Rank(card_int // NUM_SUITS), Suit(card_int % NUM_SUITS))

    def to_int(self) -> int:
        """Return the integer representation (0-51)."""
        return self._int

    def __int__(self) -> int:
        return self._int

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self._int == other._int
        return NotImplemented

    def __hash__(self) -> int:
        return self._int

    def __reduce__(self):
        return (Card, (self.rank, self.suit))

    def __repr__(self) -> str:
        return f"Card({RANK_CHARS[self.rank]}{SUIT_CHARS[self.suit]})"

    def __str__(self) -> str:
        return f"{RANK_CHARS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    @property
    def short_str(self) -> str:
        """Short string like 'As', 'Kh'."""
        return f"{RANK_CHARS[self.rank]}{SUIT_CHARS[self.suit]}"

    @property
    def display_str(self) -> str:
        """Table string like '[♠ A]' or '[♥ 10]'."""
        return f"[{SUIT_SYMBOLS[self.suit]} {RANK_LABELS[self.rank]}]"

    @property
    def color(self) -> str:
        """Return 'red' for hearts/diamonds, 'black' for clubs/spades."""
        return "red" if self.suit in (Suit.HEARTS, Suit.DIAMONDS) else "black"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rank": RANK_LABELS[self.rank],
            "suit": SUIT_SYMBOLS[self.suit],
            "text": str(self),
            "code": self.short_str,
            "color": self.color,
        }


class Deck:
    """
    A standard 52-card deck.

    Usage:
        deck = Deck()
        hole_cards = deck.deal(2)
        flop = deck.deal(3)

    Pass a seeded ``random.Random`` as ``rng`` for a reproducible shuffle.
    """

    def __init__(self, shuffle: bool = True, rng: Optional[random.Random] = None):
        """Initialize a new deck, optionally shuffled."""
        self._rng = rng if rng is not None else random.Random()
        self.reset()
        if shuffle:
            self.shuffle()

    def reset(self) -> None:
        """Reset the deck to a full 52 cards in order."""
        self._cards: List[Card] = [
            Card(rank, suit)
            for suit in Suit
            for rank in Rank
        ]
        self._dealt: List[Card] = []

    def shuffle(self) -> None:
        """Shuffle the remaining cards in the deck."""
        self._rng.shuffle(self._cards)

    def deal(self, n: int = 1) -> List[Card]:
        """
        Deal n cards from the top of the deck.

        Raises:
            DeckExhausted: If not enough cards remain.
        """
        if n > len(self._cards):
            raise DeckExhausted(f"Cannot deal {n} cards, only {len(self._cards)} remain")

        dealt = self._cards[:n]
        self._cards = self._cards[n:]
        self._dealt.extend(dealt)
        return dealt

    def deal_one(self) -> Card:
        """Deal a single card."""
        return self.deal(1)[0]

    def burn(self) -> Card:
        """Burn (discard) the top card."""
        return self.deal_one()

    @property
    def remaining(self) -> int:
        """Number of cards remaining in the deck."""
        return len(self._cards)

    @property
    def dealt_cards(self) -> List[Card]:
        """List of cards that have been dealt."""
        return self._dealt.copy()

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({self.remaining} cards remaining)"


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse multiple cards from a string.

    Accepts formats:
    - "As Kh Td" (space-separated)
    - "AsKhTd" / "10sJs" (no separator)
    - "A♠ K♥ 10♦" (with symbols)

    Returns:
        List of Card objects

    Raises:
        InvalidCard: If any chunk is not a card.
    """
    cards_str = cards_str.strip()

    # Try space-separated first
    if " " in cards_str:
        return [Card.from_string(s) for s in cards_str.split()]

    result = []
    i = 0
    while i < len(cards_str):
        # "10" is the only two-character rank
        width = 3 if cards_str.startswith("10", i) else 2
        chunk = cards_str[i:i + width]
        if len(chunk) < width:
            raise InvalidCard(f"Cannot parse card at position {i}: {cards_str[i:]}")
        result.append(Card.from_string(chunk))
        i += width

    return result


def parse_card_list(codes: Iterable[str]) -> List[Card]:
    """Parse an iterable of single-card strings such as ["As", "10♥"]."""
    return [Card.from_string(code) for code in codes]


def format_cards(cards: Sequence[Card]) -> str:
    """Format cards for the table, e.g. '[♠ A] [♥ 10]'."""
    return " ".join(card.display_str for card in cards)
