"""
Property checks for the evaluator over enumerated and generated hands.
"""

import itertools

import pytest
from hypothesis import given, strategies as st

from pokerrank.core.card import Card, Rank, Suit, DECK_SIZE
from pokerrank.core.detectors import rank_order, detect_high_card
from pokerrank.core.hand import (
    DETECTORS, HandCategory, evaluate_hand, compare_results,
)


ALL_CARDS = [Card.from_int(i) for i in range(DECK_SIZE)]

# Hypothesis strategies
hand_strategy = st.lists(st.sampled_from(ALL_CARDS), min_size=5, max_size=7, unique=True)
result_strategy = hand_strategy.map(evaluate_hand)


def _sign(x):
    return (x > 0) - (x < 0)


class TestCategoryProperties:

    @pytest.mark.parametrize("suit", list(Suit))
    def test_ace_high_straight_flush_is_royal(self, suit):
        hand = [Card(rank, suit) for rank in (Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN)]
        assert evaluate_hand(hand).category == HandCategory.ROYAL_FLUSH

    def test_royal_with_extra_cards(self):
        hand = [Card(rank, Suit.CLUBS) for rank in (Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN, Rank.NINE)]
        hand.append(Card(Rank.ACE, Suit.HEARTS))
        assert evaluate_hand(hand).category == HandCategory.ROYAL_FLUSH

    def test_wheel_is_always_five_high(self):
        """Every suit assignment of A-2-3-4-5 is a five-high straight (flush when suited)."""
        ranks = (Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE)
        for suits in itertools.product(Suit, repeat=5):
            result = evaluate_hand([Card(r, s) for r, s in zip(ranks, suits)])
            expected = (
                HandCategory.STRAIGHT_FLUSH if len(set(suits)) == 1 else HandCategory.STRAIGHT
            )
            assert result.category == expected
            assert result.kickers == (Rank.FIVE,)

    def test_four_of_a_kind_beats_every_full_house(self):
        quads = [
            evaluate_hand([Card(q, s) for s in Suit] + [Card(k, Suit.CLUBS)])
            for q in Rank for k in Rank if k != q
        ]
        full_houses = [
            evaluate_hand(
                [Card(t, s) for s in (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS)]
                + [Card(p, s) for s in (Suit.CLUBS, Suit.DIAMONDS)]
            )
            for t in Rank for p in Rank if p != t
        ]
        assert all(r.category == HandCategory.FOUR_OF_A_KIND for r in quads)
        assert all(r.category == HandCategory.FULL_HOUSE for r in full_houses)
        weakest_quads = min(quads)
        strongest_full_house = max(full_houses)
        assert weakest_quads > strongest_full_house

    @given(hand_strategy)
    def test_first_matching_detector_wins(self, hand):
        """The chosen category is the first detector in order that matches."""
        ranked = rank_order(hand)
        matched = [category for category, detect in DETECTORS if detect(ranked) is not None]
        assert detect_high_card(ranked) is not None
        assert evaluate_hand(hand).category == matched[0]

    @given(hand_strategy)
    def test_best_five_cards_come_from_the_hand(self, hand):
        result = evaluate_hand(hand)
        assert len(result.cards) == 5
        assert len(set(result.cards)) == 5
        assert set(result.cards) <= set(hand)

    @given(hand_strategy)
    def test_input_order_does_not_matter(self, hand):
        assert evaluate_hand(hand) == evaluate_hand(list(reversed(hand)))


class TestOrderProperties:

    @given(result_strategy, result_strategy)
    def test_score_order_matches_category_then_kickers(self, a, b):
        """Score comparison agrees with (category, kickers) lexicographic comparison."""
        key_a = (a.category, a.kickers)
        key_b = (b.category, b.kickers)
        expected = (key_a > key_b) - (key_a < key_b)
        assert _sign(a.score - b.score) == expected

    @given(result_strategy)
    def test_reflexive(self, result):
        assert compare_results(result, result) == 0

    @given(result_strategy, result_strategy)
    def test_antisymmetric(self, a, b):
        assert compare_results(a, b) == -compare_results(b, a)

    @given(result_strategy, result_strategy, result_strategy)
    def test_transitive(self, a, b, c):
        if compare_results(a, b) >= 0 and compare_results(b, c) >= 0:
            assert compare_results(a, c) >= 0
        if compare_results(a, b) > 0 and compare_results(b, c) > 0:
            assert compare_results(a, c) > 0
