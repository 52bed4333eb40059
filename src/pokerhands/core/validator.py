"""Hand legality checks.

Checks run in a fixed order and the first failure wins, so every illegal
hand maps to exactly one HandErrorKind:

1. wrong number of cards, or a card with no suit
2. the same card entered twice
3. an unknown suit or a rank outside 1-13
4. all five cards of one rank
"""

from __future__ import annotations

from pokerhands.core.cards import SUITS, Card
from pokerhands.core.errors import HandErrorKind

HAND_SIZE = 5
MIN_RANK = 1
MAX_RANK = 13


def _has_duplicates(cards: list[Card]) -> bool:
    return len(set(cards)) != len(cards)


def _is_legal_card(card: Card) -> bool:
    return card.suit in SUITS and MIN_RANK <= card.rank <= MAX_RANK


def validate_cards(cards: list[Card]) -> HandErrorKind | None:
    """Return the first failing check, or None if the hand is legal."""
    if len(cards) != HAND_SIZE or any(not c.suit for c in cards):
        return HandErrorKind.INVALID_HAND_LENGTH
    if _has_duplicates(cards):
        return HandErrorKind.INVALID_SAME_CARDS
    if not all(_is_legal_card(c) for c in cards):
        return HandErrorKind.INVALID_CARD
    if len({c.rank for c in cards}) == 1:
        return HandErrorKind.INVALID_SAME_RANK
    return None
