"""牌编码测试"""
import pytest
from collections import Counter

from core.cards import (
    RANKS,
    SUITS,
    FULL_DECK,
    SMALL_JOKER,
    BIG_JOKER,
    card_value,
    card_rank,
    card_suit,
    sort_cards,
    cards_to_str,
    str_to_cards,
    is_bomb,
    is_four_kings,
    is_straight_flush,
    is_joker,
    is_valid_card,
    check_deck_limit,
)


class TestFullDeck:
    """完整牌组测试"""

    def test_deck_size(self):
        assert len(FULL_DECK) == 108

    def test_deck_composition(self):
        counter = Counter(FULL_DECK)
        for r in RANKS:
            for s in SUITS:
                assert counter[r + s] == 2
        assert counter[SMALL_JOKER] == 2
        assert counter[BIG_JOKER] == 2


class TestCardValue:
    """牌值测试"""

    def test_rank_values(self):
        assert card_value("2H") == 0
        assert card_value("TS") == 8
        assert card_value("AS") == 12

    def test_joker_values(self):
        assert card_value(SMALL_JOKER) == 100
        assert card_value(BIG_JOKER) == 101
        assert card_value("AH") < card_value(SMALL_JOKER) < card_value(BIG_JOKER)

    def test_rank_and_suit(self):
        assert card_rank("TH") == "T"
        assert card_suit("TH") == "H"
        assert card_rank(BIG_JOKER) == BIG_JOKER
        assert card_suit(BIG_JOKER) is None


class TestSortCards:
    """规范排序测试"""

    def test_value_then_suit(self):
        hand = ["BJ", "3S", "3H", "SJ", "2C"]
        assert sort_cards(hand) == ["2C", "3H", "3S", "SJ", "BJ"]

    def test_suit_precedence(self):
        assert sort_cards(["9S", "9C", "9D", "9H"]) == ["9H", "9D", "9C", "9S"]

    def test_does_not_mutate(self):
        hand = ["KH", "2H"]
        sort_cards(hand)
        assert hand == ["KH", "2H"]


class TestCardsStrConversion:
    """字符串转换测试"""

    def test_cards_to_str(self):
        assert cards_to_str(["3H", "4H", "SJ"]) == "3H 4H SJ"

    def test_str_to_cards(self):
        assert str_to_cards("3H,4H 5H") == ["3H", "4H", "5H"]
        assert str_to_cards("") == []


class TestIsStraightFlush:
    """同花顺检测测试"""

    def test_straight_flush(self):
        assert is_straight_flush(["3H", "4H", "5H", "6H", "7H"]) is True
        assert is_straight_flush(["TS", "JS", "QS", "KS", "AS"]) is True

    def test_gap(self):
        assert is_straight_flush(["3H", "4H", "5H", "6H", "8H"]) is False

    def test_mixed_suits(self):
        assert is_straight_flush(["3H", "4H", "5D", "6H", "7H"]) is False

    def test_wrong_length(self):
        assert is_straight_flush(["3H", "4H", "5H", "6H"]) is False


class TestIsBomb:
    """炸弹检测测试"""

    def test_four_of_a_kind(self):
        assert is_bomb(["7H", "7S", "7D", "7C"]) is True
        assert is_bomb(["7H", "7S", "7D", "7C", "7H"]) is True

    def test_four_kings(self):
        assert is_four_kings(["SJ", "SJ", "BJ", "BJ"]) is True
        assert is_bomb(["SJ", "SJ", "BJ", "BJ"]) is True

    def test_not_bomb(self):
        assert is_bomb(["7H", "7S", "7D"]) is False
        assert is_bomb(["SJ", "BJ"]) is False
        assert is_bomb(["3H", "4H", "5H", "6H"]) is False


class TestCheckDeckLimit:
    """调用方校验测试"""

    def test_two_copies_allowed(self):
        check_deck_limit(["3H", "3H", "SJ", "SJ"])

    def test_too_many_copies(self):
        with pytest.raises(ValueError):
            check_deck_limit(["3H", "3H", "3H"])

    def test_invalid_code(self):
        with pytest.raises(ValueError):
            check_deck_limit(["1H"])
        with pytest.raises(ValueError):
            check_deck_limit(["3X"])

    @pytest.mark.parametrize("card", [3, None, ["3H"], {"rank": "3"}, 3.5])
    def test_non_string_code(self, card):
        assert is_valid_card(card) is False
        assert is_joker(card) is False
        with pytest.raises(ValueError):
            check_deck_limit(["4H", card])
