"""Batch strength resolution — which hands of a batch are strongest.

Category scores are compared first; tie-break ranks are compared only
among the hands that share the top score, since a tie-break rank means
nothing across categories.
"""

from __future__ import annotations

from pokerhands.core.hand import Hand


def mark_strongest(hands: list[Hand]) -> list[Hand]:
    """Set `strongest` on the leading hand(s) and return them.

    Every hand tied on both the top category score and the top tie-break
    rank among those leaders is marked; an empty batch marks nothing.
    """
    best_score = 0
    leaders: list[Hand] = []

    for hand in hands:
        hand.strongest = False
        if hand.category_score > best_score:
            best_score = hand.category_score
            leaders = [hand]
        elif hand.category_score == best_score:
            leaders.append(hand)

    if not leaders:
        return []

    best_rank = max(h.tie_break_rank for h in leaders)
    strongest = [h for h in leaders if h.tie_break_rank == best_rank]
    for hand in strongest:
        hand.strongest = True
    return strongest
