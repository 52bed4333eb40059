"""Poker hand evaluator — category classification and tie-break ranks.

Classifies a legal 5-card hand into one of ten categories and computes
the single decisive rank used to order hands of the same category within
a batch. Rank 1 is the Ace; it counts as 14 wherever ranks are compared.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum

from pokerhands.core.cards import ACE, Card

__all__ = [
    "Category",
    "RankCounts",
    "classify",
    "category_score",
    "tie_break_rank",
]

ACE_HIGH = 14
# 10-J-Q-K-A, written with the Ace as rank 1
BROADWAY = (1, 10, 11, 12, 13)


class Category(IntEnum):
    """Hand categories ordered from weakest to strongest.

    The value is the category score used for cross-hand comparison.
    """

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10


def _ace_high(rank: int) -> int:
    return ACE_HIGH if rank == ACE else rank


@dataclass(frozen=True)
class RankCounts:
    """Rank multiplicities of a hand: rank -> number of cards holding it."""

    counts: dict[int, int]

    @classmethod
    def of(cls, cards: list[Card]) -> RankCounts:
        return cls(dict(sorted(Counter(c.rank for c in cards).items())))

    @property
    def ranks(self) -> list[int]:
        """Distinct ranks, ascending."""
        return list(self.counts)

    @property
    def distinct(self) -> int:
        return len(self.counts)

    def has_group(self, size: int) -> bool:
        return size in self.counts.values()

    def group_ranks(self, size: int) -> list[int]:
        """Ranks held by exactly `size` cards, ascending."""
        return [rank for rank, n in self.counts.items() if n == size]

    def is_broadway(self) -> bool:
        return tuple(self.ranks) == BROADWAY

    def is_run(self) -> bool:
        """Five distinct ranks spanning exactly four steps."""
        ranks = self.ranks
        return len(ranks) == 5 and ranks[-1] - ranks[0] == 4


def _is_flush(cards: list[Card]) -> bool:
    """Check if all five cards share the same suit."""
    return len({c.suit for c in cards}) == 1


def _classify_unpaired(cards: list[Card], counts: RankCounts) -> Category:
    flush = _is_flush(cards)
    if flush and counts.is_broadway():
        return Category.ROYAL_FLUSH
    if flush and counts.is_run():
        return Category.STRAIGHT_FLUSH
    if flush:
        return Category.FLUSH
    if counts.is_run() or counts.is_broadway():
        return Category.STRAIGHT
    return Category.HIGH_CARD


def classify(cards: list[Card], counts: RankCounts | None = None) -> Category:
    """Return the category of a legal 5-card hand.

    Only the distinct-rank count, the group sizes and the suits matter, so
    the result does not depend on card order. Raises ValueError for a hand
    with a single distinct rank, which the validator never lets through.
    """
    if counts is None:
        counts = RankCounts.of(cards)

    distinct = counts.distinct
    if distinct == 5:
        return _classify_unpaired(cards, counts)
    if distinct == 4:
        return Category.ONE_PAIR
    if distinct == 3:
        return Category.THREE_OF_A_KIND if counts.has_group(3) else Category.TWO_PAIR
    if distinct == 2:
        return Category.FOUR_OF_A_KIND if counts.has_group(4) else Category.FULL_HOUSE
    raise ValueError(f"Cannot classify a hand with {distinct} distinct rank(s)")


def category_score(category: Category) -> int:
    """Ordinal strength 1-10 of a category."""
    return int(category)


def _top_group(counts: RankCounts, size: int) -> int:
    return max((_ace_high(r) for r in counts.group_ranks(size)), default=0)


def tie_break_rank(cards: list[Card], score: int, counts: RankCounts | None = None) -> int:
    """Decisive rank for ordering hands that share a category score.

    Pairs, trips and quads are compared by the rank of their group; two
    pair and full house look only at the top pair and the triple
    respectively, never at the second group or kickers. Straights use
    the top card, with 10-J-Q-K-A counted as Ace-high and A-2-3-4-5 as
    five-high. Flushes and high cards use the top card with any Ace
    counted as 14. Royal flushes all tie and get 0.
    """
    if counts is None:
        counts = RankCounts.of(cards)

    if score in (Category.ONE_PAIR, Category.TWO_PAIR):
        return _top_group(counts, 2)
    if score in (Category.THREE_OF_A_KIND, Category.FULL_HOUSE):
        return _top_group(counts, 3)
    if score == Category.FOUR_OF_A_KIND:
        return _top_group(counts, 4)
    if score in (Category.STRAIGHT, Category.STRAIGHT_FLUSH):
        return ACE_HIGH if counts.is_broadway() else max(counts.ranks)
    if score in (Category.FLUSH, Category.HIGH_CARD):
        return max(_ace_high(r) for r in counts.ranks)
    return 0
