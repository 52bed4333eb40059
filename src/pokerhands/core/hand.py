"""Per-request hand records produced by the judge."""

from __future__ import annotations

from dataclasses import dataclass, field

from pokerhands.core.cards import Card
from pokerhands.core.errors import HandErrorKind
from pokerhands.core.evaluator import Category, category_score


@dataclass
class Hand:
    """One successfully classified hand of a batch."""

    request_id: str
    text: str
    category: Category
    cards: list[Card] = field(default_factory=list)
    tie_break_rank: int = 0
    strongest: bool = False

    @property
    def category_score(self) -> int:
        return category_score(self.category)


@dataclass(frozen=True)
class HandError:
    """One hand diverted from evaluation by a validation failure."""

    request_id: str
    text: str
    kind: HandErrorKind


@dataclass(frozen=True)
class HandRecord:
    """What gets persisted for each classified hand."""

    request_id: str
    hand: str
    result: str
