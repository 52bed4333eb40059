"""HandJudge — evaluates one batch of hands end to end.

For each hand string: parse -> validate -> classify -> score -> rank ->
store. Validation failures are collected per hand and never stop the
batch; a storage failure aborts the whole batch. Once every hand is
through, the strongest hand(s) of the batch are marked.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pokerhands.core.cards import parse_hand
from pokerhands.core.evaluator import RankCounts, category_score, classify, tie_break_rank
from pokerhands.core.hand import Hand, HandError, HandRecord
from pokerhands.core.messages import category_name, check_language, error_message
from pokerhands.core.mongo_store import HandStore
from pokerhands.core.resolver import mark_strongest
from pokerhands.core.validator import validate_cards

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_ID_PREFIX = "01-00002"


@dataclass
class Judgement:
    """Outcome of one batch: classified hands and per-hand errors, in input order."""

    results: list[Hand] = field(default_factory=list)
    errors: list[HandError] = field(default_factory=list)
    language: str = "en"

    @property
    def strongest(self) -> list[Hand]:
        return [h for h in self.results if h.strongest]

    def to_dict(self) -> dict:
        """Response body shape: {"results": [...], "errors": [...]}."""
        return {
            "results": [
                {
                    "requestId": h.request_id,
                    "hand": h.text,
                    "yaku": category_name(h.category, self.language),
                    "strongest": h.strongest,
                }
                for h in self.results
            ],
            "errors": [
                {
                    "requestId": e.request_id,
                    "hand": e.text,
                    "errorMessage": error_message(e.kind, self.language),
                }
                for e in self.errors
            ],
        }


class HandJudge:
    """Evaluates batches of hand strings.

    Holds no per-request state; the only shared collaborator is the
    optional store, which must make its own writes thread-safe.
    """

    def __init__(
        self,
        store: HandStore | None = None,
        *,
        request_id_prefix: str = DEFAULT_REQUEST_ID_PREFIX,
        language: str = "en",
    ) -> None:
        self._store = store
        self._prefix = request_id_prefix
        self._language = check_language(language)

    @property
    def language(self) -> str:
        return self._language

    def request_id(self, index: int) -> str:
        """Identifier of the index-th hand (0-based) of a batch."""
        return f"{self._prefix}-{index + 1:02d}"

    def judge(self, hand_texts: list[str]) -> Judgement:
        """Evaluate a batch. Raises StorageError if a classified hand cannot be stored."""
        judgement = Judgement(language=self._language)

        for index, text in enumerate(hand_texts):
            request_id = self.request_id(index)
            outcome = self.evaluate(request_id, text)
            if isinstance(outcome, HandError):
                logger.debug("%s %r rejected: %s", request_id, text, outcome.kind.value)
                judgement.errors.append(outcome)
                continue

            if self._store is not None:
                self._store.save(
                    HandRecord(
                        request_id=request_id,
                        hand=text,
                        result=category_name(outcome.category, self._language),
                    )
                )
            judgement.results.append(outcome)

        mark_strongest(judgement.results)
        logger.info(
            "Judged %d hand(s): %d classified, %d rejected, %d strongest",
            len(hand_texts),
            len(judgement.results),
            len(judgement.errors),
            len(judgement.strongest),
        )
        return judgement

    def evaluate(self, request_id: str, text: str) -> Hand | HandError:
        """Parse, validate and classify a single hand string."""
        cards = parse_hand(text)
        kind = validate_cards(cards)
        if kind is not None:
            return HandError(request_id=request_id, text=text, kind=kind)

        counts = RankCounts.of(cards)
        category = classify(cards, counts)
        score = category_score(category)
        hand = Hand(
            request_id=request_id,
            text=text,
            cards=cards,
            category=category,
            tie_break_rank=tie_break_rank(cards, score, counts),
        )
        logger.debug(
            "%s %r -> %s (score=%d, rank=%d)",
            request_id, text, category.name, score, hand.tie_break_rank,
        )
        return hand
