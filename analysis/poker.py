"""
德州扑克胜率启发式

不做蒙特卡洛模拟，只根据底牌强度、已知对手牌和公共牌命中估算胜率，
再把胜率映射到弃牌/跟注/加注的建议比例
"""
from typing import Any, Dict, List, Sequence
from dataclasses import dataclass
import math
import logging

logger = logging.getLogger(__name__)

RANK_POWER: Dict[str, int] = {
    'A': 14, 'K': 13, 'Q': 12, 'J': 11, 'T': 10,
    '9': 9, '8': 8, '7': 7, '6': 6, '5': 5, '4': 4, '3': 3, '2': 2,
}

POCKET_PAIR_BONUS = 20
SUITED_BONUS = 5
HIT_BONUS = 15
# 未知对手底牌的平均得分
UNKNOWN_OPPONENT_SCORE = 18

# (胜率下限, 加注, 跟注, 弃牌)
STRATEGY_BANDS = (
    (70, 80, 20, 0),
    (50, 40, 55, 5),
    (30, 10, 60, 30),
)
FALLBACK_STRATEGY = (0, 10, 90)


@dataclass(frozen=True, slots=True)
class PokerAnalysis:
    """胜率与行动建议 (百分比)"""
    win: int
    fold: int
    call: int
    raise_: int

    def to_dict(self) -> Dict[str, Any]:
        return {"win": self.win, "fold": self.fold, "call": self.call, "raise": self.raise_}


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _powers(cards: Sequence[str]) -> List[int]:
    return [RANK_POWER[c[0]] for c in cards]


def analyze_poker(
    hole: Sequence[str],
    community: Sequence[str] = (),
    opponent_hole: Sequence[str] = (),
) -> PokerAnalysis:
    """
    估算胜率

    Args:
        hole: 己方底牌，如 ["AH", "KH"]
        community: 公共牌 (最多 5 张)
        opponent_hole: 已知的对手牌 (张数不限)

    Returns:
        PokerAnalysis，底牌不足 2 张时全为 0
    """
    if len(hole) < 2:
        return PokerAnalysis(win=0, fold=0, call=0, raise_=0)

    h1, h2 = RANK_POWER[hole[0][0]], RANK_POWER[hole[1][0]]
    my_score = float(h1 + h2)
    if h1 == h2:
        my_score += POCKET_PAIR_BONUS
    if hole[0][1] == hole[1][1]:
        my_score += SUITED_BONUS

    opp_values = _powers(opponent_hole)
    if opp_values:
        opp_score = sum(opp_values) / len(opp_values) * 2
        if len(set(opp_values)) < len(opp_values):
            opp_score += POCKET_PAIR_BONUS
    else:
        opp_score = float(UNKNOWN_OPPONENT_SCORE)

    for rank in _powers(community):
        if rank in (h1, h2):
            my_score += HIT_BONUS
        if rank in opp_values:
            opp_score += HIT_BONUS

    win = max(0.0, min(100.0, 50 + (my_score - opp_score) * 2))

    for threshold, raise_, call, fold in STRATEGY_BANDS:
        if win > threshold:
            break
    else:
        raise_, call, fold = FALLBACK_STRATEGY

    logger.debug(f"Poker analysis: my={my_score:.1f} opp={opp_score:.1f} win={win:.1f}")

    return PokerAnalysis(win=_round_half_up(win), fold=fold, call=call, raise_=raise_)
