"""Error types raised or collected while judging hands."""

from __future__ import annotations

from enum import Enum


class HandErrorKind(Enum):
    """Per-hand validation failures. Collected, never raised."""

    INVALID_HAND_LENGTH = "invalid_hand_length"
    INVALID_SAME_CARDS = "invalid_same_cards"
    INVALID_CARD = "invalid_card"
    INVALID_SAME_RANK = "invalid_same_rank"


class PokerHandsError(Exception):
    """Base class for request-level failures."""


class MalformedRequestError(PokerHandsError):
    """The request body cannot be decoded into a batch of hands."""


class StorageError(PokerHandsError):
    """Persisting an evaluated hand failed. Fails the whole request."""
