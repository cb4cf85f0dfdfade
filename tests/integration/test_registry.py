"""注册表集成测试"""
import pytest

from core.pieces import INITIAL_BOARD, board_to_fen
from analysis import (
    AnalysisConfig,
    AnalyzerRegistry,
    GoAnalysis,
    GuandanAnalysis,
    MahjongAnalysis,
    MahjongConfig,
    MahjongRule,
    PokerAnalysis,
    XiangqiAnalysis,
    get_registry,
    run_analysis,
)


NINE_GATES = ["1m", "1m", "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m", "9m", "9m"]


class TestRegistry:
    """注册表测试"""

    def test_singleton(self):
        assert get_registry() is AnalyzerRegistry.get_instance()

    def test_default_games(self):
        assert set(get_registry().list_games()) == {"go", "guandan", "mahjong", "xiangqi", "poker"}

    def test_unknown_game(self):
        with pytest.raises(ValueError):
            run_analysis("chess", {})

    def test_snapshot_must_be_object(self):
        with pytest.raises(ValueError):
            run_analysis("go", [[0, 0], [0, 0]])

    def test_register_custom_runner(self):
        registry = AnalyzerRegistry()
        registry.register("echo", lambda snapshot, config: snapshot)
        assert registry.run("echo", {"a": 1}) == {"a": 1}
        assert "echo" not in get_registry().list_games()


class TestGoRunner:
    """围棋运行函数测试"""

    def test_board(self):
        result = run_analysis("go", {"board": [[1, 0], [0, 0]]})
        assert isinstance(result, GoAnalysis)
        assert result.black_territory == 3

    def test_board_text(self):
        result = run_analysis("go", {"board_text": "B W\n. ."})
        assert result.black_stones == 1
        assert result.white_stones == 1

    def test_default_board_from_config(self):
        config = AnalysisConfig.from_dict({"go": {"board_size": 9}})
        result = run_analysis("go", {}, config)
        assert len(result.territory_map) == 9

    def test_invalid_cell(self):
        with pytest.raises(ValueError):
            run_analysis("go", {"board": [[3, 0], [0, 0]]})


class TestGuandanRunner:
    """掼蛋运行函数测试"""

    def test_hand(self):
        result = run_analysis("guandan", {"hand": ["7H", "7D", "7C", "7S", "3H"]})
        assert isinstance(result, GuandanAnalysis)
        assert len(result.bombs) == 1

    def test_played_counts_toward_deck_limit(self):
        with pytest.raises(ValueError):
            run_analysis("guandan", {"hand": ["3H", "3H"], "played": ["3H"]})

    def test_invalid_card(self):
        with pytest.raises(ValueError):
            run_analysis("guandan", {"hand": ["3X"]})


class TestMahjongRunner:
    """麻将运行函数测试"""

    def test_rule_from_snapshot(self):
        result = run_analysis("mahjong", {"hand": NINE_GATES, "rule": "Tianjin"})
        assert isinstance(result, MahjongAnalysis)
        assert result.rule == MahjongRule.TIANJIN

    def test_rule_from_config(self):
        config = AnalysisConfig(mahjong=MahjongConfig(rule=MahjongRule.TIANJIN))
        result = run_analysis("mahjong", {"hand": NINE_GATES}, config)
        assert result.rule == MahjongRule.TIANJIN

    def test_discards(self):
        result = run_analysis("mahjong", {"hand": NINE_GATES, "discards": ["2m"]})
        by_tile = {w.tile: w.remaining for w in result.waiting_results}
        assert by_tile["2m"] == 2

    def test_too_many_tiles(self):
        with pytest.raises(ValueError):
            run_analysis("mahjong", {"hand": NINE_GATES + ["5m"]})

    def test_fifth_copy(self):
        with pytest.raises(ValueError):
            run_analysis("mahjong", {"hand": NINE_GATES, "discards": ["1m", "1m"]})


class TestXiangqiRunner:
    """象棋运行函数测试"""

    def test_fen(self):
        result = run_analysis("xiangqi", {"fen": board_to_fen(INITIAL_BOARD)})
        assert isinstance(result, XiangqiAnalysis)
        assert result.move.score == 40

    def test_board_with_nulls(self):
        board = [None] * 90
        board[81] = "R"
        board[85] = "n"
        result = run_analysis("xiangqi", {"board": board})
        assert result.best_move == "車九平五"

    def test_bad_board_length(self):
        with pytest.raises(ValueError):
            run_analysis("xiangqi", {"board": [""] * 89})


class TestPokerRunner:
    """扑克运行函数测试"""

    def test_hole(self):
        result = run_analysis("poker", {"hole": ["AH", "AS"]})
        assert isinstance(result, PokerAnalysis)
        assert result.win == 100

    def test_duplicate_card(self):
        with pytest.raises(ValueError):
            run_analysis("poker", {"hole": ["AH", "KS"], "community": ["AH"]})

    def test_joker_rejected(self):
        with pytest.raises(ValueError):
            run_analysis("poker", {"hole": ["AH", "SJ"]})


class TestSnapshotShape:
    """快照结构校验测试"""

    @pytest.mark.parametrize("game, key", [
        ("guandan", "hand"),
        ("guandan", "played"),
        ("mahjong", "discards"),
        ("poker", "community"),
        ("xiangqi", "board"),
    ])
    def test_list_keys_must_be_lists(self, game, key):
        with pytest.raises(ValueError):
            run_analysis(game, {key: "3H"})

    def test_non_string_cards(self):
        with pytest.raises(ValueError):
            run_analysis("guandan", {"hand": [3, "4H"]})
        with pytest.raises(ValueError):
            run_analysis("poker", {"hole": ["AH", 7]})
        with pytest.raises(ValueError):
            run_analysis("poker", {"hole": ["AH", ["KS"]]})

    def test_go_board_out_of_range(self):
        with pytest.raises(ValueError):
            run_analysis("go", {"board": [[300, 0], [0, 0]]})
        with pytest.raises(ValueError):
            run_analysis("go", {"board": None})
