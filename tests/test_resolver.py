"""Tests for batch strength resolution."""

from pokerhands.core.evaluator import Category
from pokerhands.core.hand import Hand
from pokerhands.core.resolver import mark_strongest


def hand(i: int, category: Category, rank: int) -> Hand:
    return Hand(
        request_id=f"h-{i}",
        text="",
        category=category,
        tie_break_rank=rank,
    )


class TestMarkStrongest:
    def test_empty_batch(self):
        assert mark_strongest([]) == []

    def test_single_hand_is_strongest(self):
        h = hand(1, Category.HIGH_CARD, 9)
        assert mark_strongest([h]) == [h]
        assert h.strongest is True

    def test_higher_category_wins_regardless_of_rank(self):
        quads = hand(1, Category.FOUR_OF_A_KIND, 2)
        full_house = hand(2, Category.FULL_HOUSE, 14)
        mark_strongest([quads, full_house])
        assert quads.strongest is True
        assert full_house.strongest is False

    def test_rank_breaks_tie_within_category(self):
        kings = hand(1, Category.ONE_PAIR, 13)
        aces = hand(2, Category.ONE_PAIR, 14)
        mark_strongest([kings, aces])
        assert aces.strongest is True
        assert kings.strongest is False

    def test_full_tie_marks_all(self):
        a = hand(1, Category.FLUSH, 12)
        b = hand(2, Category.FLUSH, 12)
        c = hand(3, Category.STRAIGHT, 14)
        assert mark_strongest([a, b, c]) == [a, b]
        assert (a.strongest, b.strongest, c.strongest) == (True, True, False)

    def test_ranks_never_compared_across_categories(self):
        # The pair has a higher tie-break rank but is not in the top category.
        trips = hand(1, Category.THREE_OF_A_KIND, 3)
        pair = hand(2, Category.ONE_PAIR, 14)
        later_trips = hand(3, Category.THREE_OF_A_KIND, 5)
        mark_strongest([pair, trips, later_trips])
        assert later_trips.strongest is True
        assert trips.strongest is False
        assert pair.strongest is False

    def test_leaders_reset_on_better_category(self):
        first = hand(1, Category.TWO_PAIR, 14)
        second = hand(2, Category.TWO_PAIR, 14)
        better = hand(3, Category.STRAIGHT, 6)
        mark_strongest([first, second, better])
        assert [h.strongest for h in (first, second, better)] == [False, False, True]

    def test_stale_flags_cleared(self):
        h1 = hand(1, Category.HIGH_CARD, 9)
        h1.strongest = True
        h2 = hand(2, Category.FLUSH, 9)
        mark_strongest([h1, h2])
        assert h1.strongest is False


class TestHandScore:
    def test_score_follows_category(self):
        h = hand(1, Category.FULL_HOUSE, 5)
        assert h.category_score == 7
        h.category = Category.ROYAL_FLUSH
        assert h.category_score == 10
