"""
分析器注册表

把游戏名映射到运行函数: 运行函数解包 JSON 快照、执行调用方校验，再调用纯分析函数
"""
from typing import Any, Callable, Dict, List, Optional
import logging

from core.stones import board_to_array, empty_board, str_to_board
from core.cards import check_deck_limit, is_joker
from core.tiles import check_tile_limit
from core.pieces import board_from_fen, check_piece_limits

from .config import AnalysisConfig
from .go import analyze_go_board
from .guandan import analyze_guandan
from .mahjong import analyze_mahjong
from .xiangqi import best_move
from .poker import analyze_poker

logger = logging.getLogger(__name__)

# 运行函数: (快照, 配置) -> 带 to_dict 的结果
Runner = Callable[[Dict[str, Any], AnalysisConfig], Any]


def _code_list(snapshot: Dict[str, Any], key: str) -> List[Any]:
    """读取快照中的牌码/棋子列表，缺省为空"""
    value = snapshot.get(key, [])
    if not isinstance(value, list):
        raise ValueError(f"Snapshot key '{key}' must be a list, got {type(value).__name__}")
    return list(value)


def run_go(snapshot: Dict[str, Any], config: AnalysisConfig):
    if "board" in snapshot:
        try:
            board = board_to_array(snapshot["board"])
        except (OverflowError, TypeError) as e:
            raise ValueError(f"Go board must be an N x N grid of 0/1/2: {e}") from e
    elif "board_text" in snapshot:
        board = str_to_board(snapshot["board_text"])
    else:
        board = empty_board(config.go.board_size)
    if board.size and not set(board.flatten().tolist()) <= {0, 1, 2}:
        raise ValueError("Go board cells must be 0 (empty), 1 (black) or 2 (white)")
    return analyze_go_board(board)


def run_guandan(snapshot: Dict[str, Any], config: AnalysisConfig):
    """hand 为手牌；可选 played 为已出的牌，只参与两副牌张数上限校验"""
    hand = _code_list(snapshot, "hand")
    check_deck_limit(hand + _code_list(snapshot, "played"))
    return analyze_guandan(hand)


def run_mahjong(snapshot: Dict[str, Any], config: AnalysisConfig):
    hand = _code_list(snapshot, "hand")
    discards = _code_list(snapshot, "discards")
    check_tile_limit(hand, discards)
    rule = snapshot.get("rule", config.mahjong.rule)
    return analyze_mahjong(hand, rule=rule, discards=discards)


def run_xiangqi(snapshot: Dict[str, Any], config: AnalysisConfig):
    if "fen" in snapshot:
        board = board_from_fen(snapshot["fen"])
    else:
        board = ['' if p is None else p for p in _code_list(snapshot, "board")]
    check_piece_limits(board)
    return best_move(board)


def run_poker(snapshot: Dict[str, Any], config: AnalysisConfig):
    hole = _code_list(snapshot, "hole")
    community = _code_list(snapshot, "community")
    opponent_hole = _code_list(snapshot, "opponent_hole")
    cards = hole + community + opponent_hole
    if any(is_joker(c) for c in cards):
        raise ValueError("Poker is played without jokers")
    # 单副牌，每张牌只能出现一次
    check_deck_limit(cards, copies=1)
    return analyze_poker(hole=hole, community=community, opponent_hole=opponent_hole)


DEFAULT_RUNNERS: Dict[str, Runner] = {
    "go": run_go,
    "guandan": run_guandan,
    "mahjong": run_mahjong,
    "xiangqi": run_xiangqi,
    "poker": run_poker,
}


class AnalyzerRegistry:
    """
    分析器注册表

    单例模式管理游戏名到运行函数的映射
    """

    _instance: Optional['AnalyzerRegistry'] = None

    def __init__(self):
        self._runners: Dict[str, Runner] = {}
        self._register_defaults()

    @classmethod
    def get_instance(cls) -> 'AnalyzerRegistry':
        """获取单例实例"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _register_defaults(self):
        for name, runner in DEFAULT_RUNNERS.items():
            self._runners[name] = runner

    def register(self, name: str, runner: Runner):
        """注册运行函数"""
        self._runners[name] = runner

    def get(self, name: str) -> Runner:
        if name not in self._runners:
            raise ValueError(f"Unknown game: {name}")
        return self._runners[name]

    def list_games(self) -> List[str]:
        """列出所有注册的游戏"""
        return list(self._runners.keys())

    def run(self, name: str, snapshot: Dict[str, Any], config: Optional[AnalysisConfig] = None):
        """
        运行分析

        Args:
            name: 游戏名
            snapshot: JSON 快照
            config: 配置，缺省使用默认配置

        Returns:
            分析结果

        Raises:
            ValueError: 未知游戏或快照校验失败
        """
        runner = self.get(name)
        if not isinstance(snapshot, dict):
            raise ValueError("Snapshot must be a JSON object")
        logger.debug(f"Running {name} analysis")
        return runner(snapshot, config or AnalysisConfig())


def get_registry() -> AnalyzerRegistry:
    """获取分析器注册表"""
    return AnalyzerRegistry.get_instance()


def run_analysis(game: str, snapshot: Dict[str, Any], config: Optional[AnalysisConfig] = None):
    """便捷函数: 用默认注册表运行分析"""
    return get_registry().run(game, snapshot, config)
