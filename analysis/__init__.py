"""
Analysis Layer - 局面/手牌分析

Modules:
    go: 围棋棋块、气与地盘
    guandan: 掼蛋排序与炸弹检测
    mahjong: 麻将听牌与计番
    xiangqi: 中国象棋着法生成与一步搜索
    poker: 德州扑克胜率启发式
    config: 分析配置
    registry: 分析器注册表
"""
from .go import (
    GoGroup,
    GoAnalysis,
    find_groups,
    estimate_territory,
    analyze_go_board,
)
from .guandan import (
    BombType,
    Bomb,
    BombFinder,
    GuandanAnalysis,
    structured_sort,
    analyze_guandan,
)
from .mahjong import (
    MahjongRule,
    FanResult,
    WaitingTile,
    MahjongAnalysis,
    parse_rule,
    is_hu,
    is_seven_pairs,
    calculate_fan,
    analyze_mahjong,
)
from .xiangqi import (
    Move,
    MoveGenerator,
    XiangqiAnalysis,
    RESIGN,
    generate_moves,
    to_chinese_notation,
    best_move,
)
from .poker import (
    PokerAnalysis,
    analyze_poker,
)
from .config import (
    GoConfig,
    MahjongConfig,
    OutputConfig,
    AnalysisConfig,
)
from .registry import (
    AnalyzerRegistry,
    get_registry,
    run_analysis,
)

__all__ = [
    # go
    "GoGroup",
    "GoAnalysis",
    "find_groups",
    "estimate_territory",
    "analyze_go_board",
    # guandan
    "BombType",
    "Bomb",
    "BombFinder",
    "GuandanAnalysis",
    "structured_sort",
    "analyze_guandan",
    # mahjong
    "MahjongRule",
    "FanResult",
    "WaitingTile",
    "MahjongAnalysis",
    "parse_rule",
    "is_hu",
    "is_seven_pairs",
    "calculate_fan",
    "analyze_mahjong",
    # xiangqi
    "Move",
    "MoveGenerator",
    "XiangqiAnalysis",
    "RESIGN",
    "generate_moves",
    "to_chinese_notation",
    "best_move",
    # poker
    "PokerAnalysis",
    "analyze_poker",
    # config
    "GoConfig",
    "MahjongConfig",
    "OutputConfig",
    "AnalysisConfig",
    # registry
    "AnalyzerRegistry",
    "get_registry",
    "run_analysis",
]
