"""
Hand category detectors.

One pure function per poker hand category. Every detector takes the cards
sorted by descending rank (see ``rank_order``) and returns either None or a
HandMatch holding the kicker ranks (most significant first) and the five
cards that make the hand.

Detectors do not know about each other; several categories are special cases
of others (a straight flush is also a straight and a flush), so they must be
tried from strongest to weakest. The evaluator in ``pokerrank.core.hand`` owns
that order.

Rank counts are taken over the full input. Only the straight checks
deduplicate ranks.
"""

from __future__ import annotations
from collections import Counter
from typing import List, NamedTuple, Optional, Sequence, Tuple

from pokerrank.core.card import Card, Rank, Suit
from pokerrank.core.rules import HAND_SIZE


# Wheel straights treat the Ace as one below Two
LOW_ACE = -1


class HandMatch(NamedTuple):
    """A successful detection: ordered kicker ranks and the cards used."""
    kickers: Tuple[Rank, ...]
    cards: Tuple[Card, ...]


def rank_order(cards: Sequence[Card]) -> List[Card]:
    """Return a new list sorted by descending rank (suit breaks ties)."""
    return sorted(cards, key=lambda c: (c.rank, c.suit), reverse=True)


# ============= Helpers =============

def _rank_counts(ranked: Sequence[Card]) -> Counter:
    return Counter(c.rank for c in ranked)


def _distinct_ranks(ranked: Sequence[Card]) -> List[Rank]:
    """Distinct ranks, highest first."""
    return sorted({c.rank for c in ranked}, reverse=True)


def _split(ranked: Sequence[Card], rank: Rank, n: int) -> Tuple[List[Card], List[Card]]:
    """Take the first n cards of ``rank``; return (taken, rest) keeping order."""
    taken: List[Card] = []
    rest: List[Card] = []
    for card in ranked:
        if card.rank == rank and len(taken) < n:
            taken.append(card)
        else:
            rest.append(card)
    return taken, rest


def _flush_suit(ranked: Sequence[Card]) -> Optional[Suit]:
    """
    The suit holding at least five cards, if any.

    When several suits qualify (only possible with more than 7 cards or
    duplicates) the suit with most cards wins, then the first in Suit order.
    """
    suit_counts = Counter(c.suit for c in ranked)
    best: Optional[Suit] = None
    for suit in Suit:
        count = suit_counts[suit]
        if count >= HAND_SIZE and (best is None or count > suit_counts[best]):
            best = suit
    return best


def _straight_top(ranked: Sequence[Card]) -> Optional[Rank]:
    """
    Top rank of the highest run of five consecutive ranks.

    Ace also plays low: a present Ace adds LOW_ACE below Two, so A-2-3-4-5
    is found with Five on top.
    """
    values = [int(r) for r in _distinct_ranks(ranked)]
    if values and values[0] == Rank.ACE:
        values.append(LOW_ACE)

    for i in range(len(values) - HAND_SIZE + 1):
        window = values[i:i + HAND_SIZE]
        if all(window[k] - window[k + 1] == 1 for k in range(HAND_SIZE - 1)):
            return Rank(window[0])
    return None


def _straight_cards(ranked: Sequence[Card], top: Rank) -> Tuple[Card, ...]:
    """One card per rank of the run, top first (the wheel's Ace comes last)."""
    cards = []
    for value in range(int(top), int(top) - HAND_SIZE, -1):
        rank = Rank.ACE if value == LOW_ACE else Rank(value)
        cards.append(next(c for c in ranked if c.rank == rank))
    return tuple(cards)


def _ranks_of(cards: Sequence[Card]) -> Tuple[Rank, ...]:
    return tuple(c.rank for c in cards)


# ============= Detectors (strongest first) =============

def detect_royal_flush(ranked: Sequence[Card]) -> Optional[HandMatch]:
    """A straight flush with an Ace on top."""
    match = detect_straight_flush(ranked)
    if match is None or match.kickers[0] != Rank.ACE:
        return None
    return match


def detect_straight_flush(ranked: Sequence[Card]) -> Optional[HandMatch]:
    """Five consecutive ranks inside the flush suit."""
    suit = _flush_suit(ranked)
    if suit is None:
        return None

    # The run may use any of the suited cards, not only the five highest
    suited = [c for c in ranked if c.suit == suit]
    top = _straight_top(suited)
    if top is None:
        return None
    return HandMatch((top,), _straight_cards(suited, top))


def detect_four_of_a_kind(ranked: Sequence[Card]) -> Optional[HandMatch]:
    """Four cards of one rank plus the best remaining card."""
    counts = _rank_counts(ranked)
    quads = [r for r in _distinct_ranks(ranked) if counts[r] >= 4]
    if not quads:
        return None

    taken, rest = _split(ranked, quads[0], 4)
    kicker = rest[0]
    return HandMatch((quads[0], kicker.rank), tuple(taken) + (kicker,))


def detect_full_house(ranked: Sequence[Card]) -> Optional[HandMatch]:
    """The highest rank with three or more cards over the best other pair."""
    counts = _rank_counts(ranked)
    ranks = _distinct_ranks(ranked)

    three = next((r for r in ranks if counts[r] >= 3), None)
    if three is None:
        return None
    two = next((r for r in ranks if r != three and counts[r] >= 2), None)
    if two is None:
        return None

    trips, _ = _split(ranked, three, 3)
    pair, _ = _split(ranked, two, 2)
    return HandMatch((three, two), tuple(trips + pair))


def detect_flush(ranked: Sequence[Card]) -> Optional[HandMatch]:
    """The five highest cards of a suit with at least five cards."""
    suit = _flush_suit(ranked)
    if suit is None:
        return None

    best = [c for c in ranked if c.suit == suit][:HAND_SIZE]
    return HandMatch(_ranks_of(best), tuple(best))


def detect_straight(ranked: Sequence[Card]) -> Optional[HandMatch]:
    """Five consecutive distinct ranks; Ace plays high or low."""
    top = _straight_top(ranked)
    if top is None:
        return None
    return HandMatch((top,), _straight_cards(ranked, top))


def detect_three_of_a_kind(ranked: Sequence[Card]) -> Optional[HandMatch]:
    """Exactly three cards of one rank plus the two best other cards."""
    counts = _rank_counts(ranked)
    # count == 3 only; four of a kind was already taken
    trips = [r for r in _distinct_ranks(ranked) if counts[r] == 3]
    if not trips:
        return None

    taken, rest = _split(ranked, trips[0], 3)
    others = rest[:2]
    return HandMatch((trips[0],) + _ranks_of(others), tuple(taken + others))


def detect_two_pair(ranked: Sequence[Card]) -> Optional[HandMatch]:
    """The two highest pairs plus the best remaining card."""
    counts = _rank_counts(ranked)
    pairs = [r for r in _distinct_ranks(ranked) if counts[r] == 2]
    if len(pairs) < 2:
        return None

    high, low = pairs[0], pairs[1]
    high_cards, rest = _split(ranked, high, 2)
    low_cards, rest = _split(rest, low, 2)
    # The kicker may come from a third pair
    kicker = rest[0]
    return HandMatch((high, low, kicker.rank), tuple(high_cards + low_cards) + (kicker,))


def detect_one_pair(ranked: Sequence[Card]) -> Optional[HandMatch]:
    """The highest pair plus the three best other cards."""
    counts = _rank_counts(ranked)
    pairs = [r for r in _distinct_ranks(ranked) if counts[r] == 2]
    if not pairs:
        return None

    taken, rest = _split(ranked, pairs[0], 2)
    others = rest[:3]
    return HandMatch((pairs[0],) + _ranks_of(others), tuple(taken + others))


def detect_high_card(ranked: Sequence[Card]) -> Optional[HandMatch]:
    """Always matches: the five highest cards."""
    best = list(ranked[:HAND_SIZE])
    return HandMatch(_ranks_of(best), tuple(best))
