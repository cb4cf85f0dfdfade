"""掼蛋分析测试"""
import pytest
from collections import Counter

from core.cards import sort_cards
from analysis.guandan import (
    BombType,
    Bomb,
    BombFinder,
    analyze_guandan,
    structured_sort,
)


class TestCanonicalOrder:
    """无炸弹手牌测试"""

    def test_empty_hand(self):
        result = analyze_guandan([])
        assert result.bombs == ()
        assert result.sorted_hand == ()

    def test_bomb_free_hand_is_canonical_sort(self):
        hand = ["KH", "2S", "BJ", "9D", "9H", "3C"]
        result = analyze_guandan(hand)
        assert result.bombs == ()
        assert list(result.sorted_hand) == sort_cards(hand)
        assert result.sorted_hand == ("2S", "3C", "9H", "9D", "KH", "BJ")


class TestRankBombs:
    """同点数炸弹测试"""

    def test_four_of_a_kind(self):
        result = analyze_guandan(["7H", "3S", "7D", "7C", "7S"])
        assert result.bombs == (
            Bomb(("7H", "7D", "7C", "7S"), BombType.FOUR_OF_A_KIND),
        )
        assert result.sorted_hand == ("7H", "7D", "7C", "7S", "3S")

    def test_five_of_a_kind(self):
        result = analyze_guandan(["QH", "QH", "QS", "QD", "QC"])
        assert len(result.bombs) == 1
        assert len(result.bombs[0]) == 5

    def test_three_is_not_a_bomb(self):
        assert analyze_guandan(["7H", "7D", "7C"]).bombs == ()

    def test_bombs_in_rank_order(self):
        hand = ["KH", "KD", "KC", "KS", "4H", "4D", "4C", "4S"]
        result = analyze_guandan(hand)
        assert [b.cards[0][0] for b in result.bombs] == ["4", "K"]


class TestFourKings:
    """天王炸测试"""

    def test_four_jokers(self):
        result = analyze_guandan(["SJ", "BJ", "2H", "SJ", "BJ"])
        assert result.bombs == (
            Bomb(("SJ", "SJ", "BJ", "BJ"), BombType.FOUR_KINGS),
        )
        assert result.sorted_hand == ("SJ", "SJ", "BJ", "BJ", "2H")

    def test_jokers_not_counted_as_rank_bomb(self):
        result = analyze_guandan(["SJ", "SJ", "BJ", "BJ"])
        assert [b.bomb_type for b in result.bombs] == [BombType.FOUR_KINGS]

    def test_three_jokers(self):
        assert analyze_guandan(["SJ", "SJ", "BJ"]).bombs == ()


class TestStraightFlush:
    """同花顺测试"""

    def test_five_card_run(self):
        result = analyze_guandan(["7H", "5H", "3H", "6H", "4H"])
        assert result.bombs == (
            Bomb(("3H", "4H", "5H", "6H", "7H"), BombType.STRAIGHT_FLUSH),
        )

    def test_six_card_run_yields_two_windows(self):
        result = analyze_guandan(["3H", "4H", "5H", "6H", "7H", "8H"])
        assert [b.cards for b in result.bombs] == [
            ("3H", "4H", "5H", "6H", "7H"),
            ("4H", "5H", "6H", "7H", "8H"),
        ]
        assert result.sorted_hand == ("3H", "4H", "5H", "6H", "7H", "8H")

    def test_mixed_suits_not_flush(self):
        assert analyze_guandan(["3H", "4H", "5D", "6H", "7H"]).bombs == ()

    def test_suits_scanned_in_order(self):
        hand = ["3S", "4S", "5S", "6S", "7S", "9H", "TH", "JH", "QH", "KH"]
        result = analyze_guandan(hand)
        assert [b.cards[0] for b in result.bombs] == ["9H", "3S"]

    def test_duplicate_card_tracked_per_instance(self):
        # 第二副牌的 3H 不在同花顺里，整理后仍然保留
        result = analyze_guandan(["3H", "4H", "5H", "6H", "7H", "3H"])
        assert result.bombs == (
            Bomb(("3H", "4H", "5H", "6H", "7H"), BombType.STRAIGHT_FLUSH),
        )
        assert result.sorted_hand == ("3H", "4H", "5H", "6H", "7H", "3H")


class TestStructuredSort:
    """整理排序测试"""

    def test_overlapping_bombs_emit_card_once(self):
        hand = ["5H", "5D", "5C", "5S", "3H", "4H", "6H", "7H"]
        result = analyze_guandan(hand)
        assert [b.bomb_type for b in result.bombs] == [
            BombType.FOUR_OF_A_KIND,
            BombType.STRAIGHT_FLUSH,
        ]
        # 5H 同时属于两个炸弹，只在第一个炸弹中输出
        assert result.sorted_hand == ("5H", "5D", "5C", "5S", "3H", "4H", "6H", "7H")

    @pytest.mark.parametrize("hand", [
        ["5H", "5D", "5C", "5S", "3H", "4H", "6H", "7H", "SJ"],
        ["3H", "4H", "5H", "6H", "7H", "8H", "9H", "3H", "4H"],
        ["SJ", "SJ", "BJ", "BJ", "AH", "AD", "AC", "AS", "AH"],
        ["2C", "TD", "JD", "QD", "KD", "AD", "TD"],
    ])
    def test_sorted_hand_is_permutation(self, hand):
        result = analyze_guandan(hand)
        assert Counter(result.sorted_hand) == Counter(hand)

    def test_structured_sort_with_finder(self):
        finder = BombFinder(["7S", "7H", "7C", "7D", "2H"])
        found = finder.find_all()
        assert found == [((1, 2, 3, 4), BombType.FOUR_OF_A_KIND)]
        assert structured_sort(finder.hand, found) == ["7H", "7D", "7C", "7S", "2H"]


class TestPurity:
    """无副作用测试"""

    def test_input_not_mutated(self):
        hand = ["7S", "7H", "7C", "7D"]
        analyze_guandan(hand)
        assert hand == ["7S", "7H", "7C", "7D"]

    def test_idempotent(self):
        hand = ["3H", "4H", "5H", "6H", "7H", "7D", "7C", "7S"]
        assert analyze_guandan(hand) == analyze_guandan(hand)

    def test_to_dict(self):
        d = analyze_guandan(["7H", "7D", "7C", "7S"]).to_dict()
        assert d == {
            "sorted_hand": ["7H", "7D", "7C", "7S"],
            "bombs": [{"type": "four_of_a_kind", "cards": ["7H", "7D", "7C", "7S"]}],
        }
