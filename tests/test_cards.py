"""Tests for card parsing."""

from pokerhands.core.cards import EMPTY_CARD, Card, format_card, parse_card, parse_hand


class TestParseCard:
    def test_single_digit_rank(self):
        assert parse_card("s1") == Card(suit="s", rank=1)

    def test_two_digit_rank(self):
        assert parse_card("h13") == Card(suit="h", rank=13)

    def test_empty_token_is_zero_card(self):
        assert parse_card("") == EMPTY_CARD

    def test_unreadable_rank_is_zero(self):
        assert parse_card("sK") == Card(suit="s", rank=0)
        assert parse_card("s") == Card(suit="s", rank=0)
        assert parse_card("s 5") == Card(suit="s", rank=0)

    def test_non_ascii_digits_are_unreadable(self):
        # Arabic-Indic one and fullwidth one
        assert parse_card("s\u0661") == Card(suit="s", rank=0)
        assert parse_card("h\uff11\uff10") == Card(suit="h", rank=0)

    def test_out_of_range_rank_kept_for_validator(self):
        assert parse_card("d14") == Card(suit="d", rank=14)
        assert parse_card("d0") == Card(suit="d", rank=0)

    def test_unknown_suit_kept_for_validator(self):
        assert parse_card("x5") == Card(suit="x", rank=5)


class TestParseHand:
    def test_five_tokens_in_input_order(self):
        cards = parse_hand("s13, h1, d2, c10, s5")
        assert cards == [
            Card("s", 13), Card("h", 1), Card("d", 2), Card("c", 10), Card("s", 5),
        ]

    def test_splits_on_comma_space_only(self):
        # "s1,s2" is one token: suit "s", rank digits "1,s2"
        cards = parse_hand("s1,s2, h3, d4, c5")
        assert len(cards) == 4
        assert cards[0] == Card("s", 0)

    def test_empty_text_is_single_empty_card(self):
        assert parse_hand("") == [EMPTY_CARD]

    def test_trailing_delimiter_gives_empty_card(self):
        cards = parse_hand("s1, s2, s3, s4, ")
        assert len(cards) == 5
        assert cards[-1] == EMPTY_CARD

    def test_too_many_tokens_all_parsed(self):
        assert len(parse_hand("s1, s2, s3, s4, s5, s6")) == 6


class TestFormatCard:
    def test_round_trip_token(self):
        assert format_card(Card("c", 12)) == "c12"
        assert repr(Card("h", 1)) == "h1"

    def test_empty_card(self):
        assert format_card(EMPTY_CARD) == ""
