"""德州扑克启发式测试"""
import pytest

from analysis.poker import PokerAnalysis, analyze_poker


class TestWinEstimate:
    """胜率估算测试"""

    def test_pocket_aces(self):
        result = analyze_poker(["AH", "AS"])
        assert result == PokerAnalysis(win=100, fold=0, call=20, raise_=80)

    def test_weak_offsuit(self):
        result = analyze_poker(["7H", "2S"])
        assert result.win == 32
        assert (result.raise_, result.call, result.fold) == (10, 60, 30)

    def test_known_opponent_pair(self):
        result = analyze_poker(["5H", "6D"], opponent_hole=["KS", "KD"])
        assert result.win == 0
        assert (result.raise_, result.call, result.fold) == (0, 10, 90)

    def test_community_hit(self):
        result = analyze_poker(["9H", "4D"], community=["9S"])
        # 恰好 70 落在下一档
        assert result.win == 70
        assert (result.raise_, result.call, result.fold) == (40, 55, 5)

    def test_fractional_opponent_average(self):
        result = analyze_poker(["TH", "9D"], opponent_hole=["AS", "KD", "2C"])
        assert result.win == 49
        assert (result.raise_, result.call, result.fold) == (10, 60, 30)

    def test_opponent_hits_community(self):
        alone = analyze_poker(["QH", "JH"], opponent_hole=["8S", "3C"])
        hit = analyze_poker(["QH", "JH"], community=["8D"], opponent_hole=["8S", "3C"])
        assert hit.win == alone.win - 30

    def test_suited_bonus(self):
        suited = analyze_poker(["8H", "6H"])
        offsuit = analyze_poker(["8H", "6S"])
        assert suited.win - offsuit.win == 10


class TestEdgeCases:
    """边界测试"""

    @pytest.mark.parametrize("hole", [[], ["AH"]])
    def test_fewer_than_two_hole_cards(self, hole):
        result = analyze_poker(hole, community=["2C", "3D", "4S"])
        assert result == PokerAnalysis(win=0, fold=0, call=0, raise_=0)

    def test_win_clamped(self):
        result = analyze_poker(["2H", "3S"], opponent_hole=["AH", "AS"])
        assert result.win == 0

    def test_to_dict(self):
        d = analyze_poker(["7H", "2S"]).to_dict()
        assert d == {"win": 32, "fold": 30, "call": 60, "raise": 10}

    def test_shares_sum_to_100(self):
        for hole in (["AH", "AS"], ["9H", "4D"], ["7H", "2S"], ["2H", "3S"]):
            result = analyze_poker(hole, opponent_hole=["TS", "TD"])
            assert result.fold + result.call + result.raise_ == 100
