"""
麻将听牌分析

对 13 张手牌，逐一尝试 34 种牌作为第 14 张，检测能否胡牌并按规则计番。

胡牌检测:
- 七对: 计数 >= 2 的牌种不少于 7 种且总数为 14 (沿用的启发式判断，不区分四张重复计对)
- 一般型: 先取一对将，再递归拆出 4 组刻子或顺子 (字牌不成顺)
"""
from typing import Any, Dict, List, Sequence, Tuple, Union
from dataclasses import dataclass
from enum import Enum
import logging

from core.tiles import (
    TILES_ORDER,
    NUM_TILE_TYPES,
    NUM_SUITED_TILES,
    TILES_PER_SUIT,
    MAX_COPIES,
    READY_HAND_SIZE,
    DRAGON_INDICES,
    FIVE_CHARACTERS_INDEX,
    suit_of,
    is_honor,
    tiles_to_counts,
    sort_tiles,
)

logger = logging.getLogger(__name__)


class MahjongRule(Enum):
    """计番规则"""
    NATIONAL = "National"
    TIANJIN = "Tianjin"
    SICHUAN = "Sichuan"
    RIICHI = "Riichi"
    TAIWAN = "Taiwan"


# 胡牌所需面子数
NUM_SETS = 4
WINNING_HAND_SIZE = 14
SEVEN_PAIRS = 7


@dataclass(frozen=True, slots=True)
class FanResult:
    """番数与番种"""
    points: int
    labels: Tuple[str, ...]

    @property
    def label(self) -> str:
        return ' '.join(self.labels)


@dataclass(frozen=True, slots=True)
class WaitingTile:
    """
    听牌结果

    Attributes:
        tile: 和张
        fan: 番数
        labels: 番种
        remaining: 该牌在手牌和牌河之外还剩几张
    """
    tile: str
    fan: int
    labels: Tuple[str, ...]
    remaining: int

    @property
    def label(self) -> str:
        return ' '.join(self.labels)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tile": self.tile,
            "fan": self.fan,
            "label": self.label,
            "remaining": self.remaining,
        }


@dataclass(frozen=True)
class MahjongAnalysis:
    """麻将分析结果"""
    sorted_hand: Tuple[str, ...]
    waiting_results: Tuple[WaitingTile, ...]
    rule: MahjongRule

    @property
    def is_ready(self) -> bool:
        """是否听牌"""
        return bool(self.waiting_results)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rule": self.rule.value,
            "sorted_hand": list(self.sorted_hand),
            "waiting_results": [w.to_dict() for w in self.waiting_results],
        }


def parse_rule(rule: Union[str, MahjongRule]) -> MahjongRule:
    """
    解析规则名

    Raises:
        ValueError: 未知规则
    """
    if isinstance(rule, MahjongRule):
        return rule
    try:
        return MahjongRule(rule)
    except ValueError:
        valid = ", ".join(r.value for r in MahjongRule)
        raise ValueError(f"Unknown mahjong rule: {rule!r} (expected one of {valid})") from None


def _remove_sets(counts: List[int], depth: int) -> bool:
    """递归拆出刻子或顺子，拆满 4 组或拆空即成功"""
    if depth == NUM_SETS:
        return True

    first = next((i for i in range(NUM_TILE_TYPES) if counts[i] > 0), -1)
    if first == -1:
        return True

    # 刻子
    if counts[first] >= 3:
        counts[first] -= 3
        if _remove_sets(counts, depth + 1):
            return True
        counts[first] += 3

    # 顺子 (同一花色内)
    if first < NUM_SUITED_TILES and first % TILES_PER_SUIT <= TILES_PER_SUIT - 3:
        if counts[first + 1] > 0 and counts[first + 2] > 0:
            counts[first] -= 1
            counts[first + 1] -= 1
            counts[first + 2] -= 1
            if _remove_sets(counts, depth + 1):
                return True
            counts[first] += 1
            counts[first + 1] += 1
            counts[first + 2] += 1

    return False


def is_seven_pairs(counts: Sequence[int]) -> bool:
    pairs = sum(1 for c in counts if c >= 2)
    return int(sum(counts)) == WINNING_HAND_SIZE and pairs >= SEVEN_PAIRS


def is_hu(counts: Sequence[int]) -> bool:
    """
    检测 14 张是否构成胡牌

    Args:
        counts: 34 维计数 (不会被修改)

    Returns:
        是否胡牌
    """
    if is_seven_pairs(counts):
        return True

    base = [int(c) for c in counts]
    for i in range(NUM_TILE_TYPES):
        if base[i] >= 2:
            trial = list(base)
            trial[i] -= 2
            if _remove_sets(trial, 0):
                return True
    return False


def calculate_fan(
    counts: Sequence[int],
    win_tile_index: int,
    rule: Union[str, MahjongRule] = MahjongRule.NATIONAL,
) -> FanResult:
    """
    按规则计番

    - 通用: 任一箭牌 (白发中) 成刻 +1 "Dragon Pung"
    - 天津: 和五万 +1，混一色 +3，清一色 +6
    - 没有任何番种时记 1 番 "Ping Hu"

    四川、立直、台湾规则目前不区分，只走通用计番

    Args:
        counts: 含和张的 34 维计数
        win_tile_index: 和张下标
        rule: 规则

    Returns:
        FanResult
    """
    rule = parse_rule(rule)
    points = 0
    labels: List[str] = []

    if any(counts[i] >= 3 for i in DRAGON_INDICES):
        points += 1
        labels.append("Dragon Pung")

    if rule == MahjongRule.TIANJIN:
        if win_tile_index == FIVE_CHARACTERS_INDEX:
            points += 1
            labels.append("Zhuo Wu (5 Wan)")

        suits_present = set()
        has_honors = False
        for i in range(NUM_TILE_TYPES):
            if counts[i] > 0:
                if is_honor(i):
                    has_honors = True
                else:
                    suits_present.add(suit_of(i))

        if len(suits_present) == 1 and has_honors:
            points += 3
            labels.append("Hun Yi Se")
        if len(suits_present) == 1 and not has_honors:
            points += 6
            labels.append("Qing Yi Se")

    if points == 0:
        points = 1
        labels = ["Ping Hu"]

    return FanResult(points=points, labels=tuple(labels))


def analyze_mahjong(
    hand: Sequence[str],
    rule: Union[str, MahjongRule] = MahjongRule.NATIONAL,
    discards: Sequence[str] = (),
) -> MahjongAnalysis:
    """
    分析麻将手牌

    只有手牌恰为 13 张时才计算听牌，否则 waiting_results 为空

    Args:
        hand: 手牌牌码
        rule: 计番规则
        discards: 牌河中可见的牌 (只影响剩余张数)

    Returns:
        MahjongAnalysis
    """
    rule = parse_rule(rule)
    counts = tiles_to_counts(hand)
    seen = counts + tiles_to_counts(discards)
    waiting: List[WaitingTile] = []

    if len(hand) == READY_HAND_SIZE:
        for i in range(NUM_TILE_TYPES):
            if counts[i] >= MAX_COPIES:
                continue
            trial = counts.copy()
            trial[i] += 1
            if is_hu(trial):
                fan = calculate_fan(trial, i, rule)
                waiting.append(WaitingTile(
                    tile=TILES_ORDER[i],
                    fan=fan.points,
                    labels=fan.labels,
                    remaining=max(MAX_COPIES - int(seen[i]), 0),
                ))

    logger.debug(
        f"Mahjong analysis ({rule.value}): {len(hand)} tiles, "
        f"waiting on {[w.tile for w in waiting]}"
    )

    return MahjongAnalysis(
        sorted_hand=tuple(sort_tiles(hand)),
        waiting_results=tuple(waiting),
        rule=rule,
    )
