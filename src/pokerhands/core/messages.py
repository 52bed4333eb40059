"""Display names for categories and human-readable error messages.

English is the default; the Japanese table carries the labels and
messages used by earlier Japanese-language clients.
"""

from __future__ import annotations

from pokerhands.core.errors import HandErrorKind
from pokerhands.core.evaluator import Category

LANGUAGES = ("en", "ja")

CATEGORY_NAMES: dict[str, dict[Category, str]] = {
    "en": {
        Category.HIGH_CARD: "High Card",
        Category.ONE_PAIR: "One Pair",
        Category.TWO_PAIR: "Two Pair",
        Category.THREE_OF_A_KIND: "Three of a Kind",
        Category.STRAIGHT: "Straight",
        Category.FLUSH: "Flush",
        Category.FULL_HOUSE: "Full House",
        Category.FOUR_OF_A_KIND: "Four of a Kind",
        Category.STRAIGHT_FLUSH: "Straight Flush",
        Category.ROYAL_FLUSH: "Royal Flush",
    },
    "ja": {
        Category.HIGH_CARD: "ハイカード",
        Category.ONE_PAIR: "ワンペア",
        Category.TWO_PAIR: "ツーペア",
        Category.THREE_OF_A_KIND: "スリーカード",
        Category.STRAIGHT: "ストレート",
        Category.FLUSH: "フラッシュ",
        Category.FULL_HOUSE: "フルハウス",
        Category.FOUR_OF_A_KIND: "フォーカード",
        Category.STRAIGHT_FLUSH: "ストレートフラッシュ",
        Category.ROYAL_FLUSH: "ロイヤルストレートフラッシュ",
    },
}

ERROR_MESSAGES: dict[str, dict[HandErrorKind, str]] = {
    "en": {
        HandErrorKind.INVALID_HAND_LENGTH: "Enter exactly 5 cards",
        HandErrorKind.INVALID_SAME_CARDS: "The same card was entered more than once",
        HandErrorKind.INVALID_CARD: "The hand contains an invalid card",
        HandErrorKind.INVALID_SAME_RANK: "At most 4 cards can share a rank",
    },
    "ja": {
        HandErrorKind.INVALID_HAND_LENGTH: "手札は5枚入力してください",
        HandErrorKind.INVALID_SAME_CARDS: "同じカードを2回以上入力しています",
        HandErrorKind.INVALID_CARD: "不正なカードが含まれています",
        HandErrorKind.INVALID_SAME_RANK: "同じランクのカードは最大で4枚までです",
    },
}

REQUEST_MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "invalid_format": "Invalid request format",
        "internal_error": "An error occurred on the server",
    },
    "ja": {
        "invalid_format": "不正なフォーマットです",
        "internal_error": "サーバーでエラーが発生しています",
    },
}


def check_language(language: str) -> str:
    if language not in LANGUAGES:
        raise ValueError(
            f"Unsupported language {language!r}, expected one of {', '.join(LANGUAGES)}"
        )
    return language


def category_name(category: Category, language: str = "en") -> str:
    return CATEGORY_NAMES[check_language(language)][category]


def error_message(kind: HandErrorKind, language: str = "en") -> str:
    return ERROR_MESSAGES[check_language(language)][kind]


def request_message(key: str, language: str = "en") -> str:
    return REQUEST_MESSAGES[check_language(language)][key]
