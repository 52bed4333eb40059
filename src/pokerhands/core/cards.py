"""Card parsing — hand text to Card values.

A hand is written as five tokens joined by ", ", each token a suit symbol
followed by rank digits: "s1, h10, d11, c12, s13". Parsing never rejects
anything; malformed tokens become cards the validator will refuse.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["Card", "EMPTY_CARD", "SUITS", "ACE", "DELIMITER", "parse_card", "parse_hand", "format_card"]

SUITS = ("s", "h", "d", "c")  # spades, hearts, diamonds, clubs
ACE = 1
DELIMITER = ", "

_RANK_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Card:
    """A playing card. Rank 1 is the Ace; 11, 12, 13 are J, Q, K."""

    suit: str
    rank: int

    def __repr__(self) -> str:
        return format_card(self)


EMPTY_CARD = Card(suit="", rank=0)


def parse_card(token: str) -> Card:
    """Parse one token. Unreadable rank digits give rank 0."""
    if not token:
        return EMPTY_CARD
    digits = token[1:]
    rank = int(digits) if _RANK_RE.fullmatch(digits) else 0
    return Card(suit=token[0], rank=rank)


def parse_hand(text: str) -> list[Card]:
    """Split hand text on ", " and parse every token positionally."""
    return [parse_card(token) for token in text.split(DELIMITER)]


def format_card(card: Card) -> str:
    return f"{card.suit}{card.rank}" if card.suit else ""
