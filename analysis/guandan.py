"""
掼蛋手牌分析

炸弹检测按固定顺序执行，结果全部收集 (同一张牌可以出现在多个炸弹中):
1. 同点数四张及以上
2. 天王炸 (四张王)
3. 同花顺 (同花色 5 张连续，长顺中每个 5 张窗口各算一个)

王不参与第 1 类，只由第 2 类检测，避免四张王被重复计为两个炸弹
"""
from typing import Any, Dict, List, Tuple
from dataclasses import dataclass
from enum import Enum
from collections import defaultdict
import logging

from core.cards import (
    SUIT_ORDER,
    STRAIGHT_FLUSH_LEN,
    MIN_BOMB_SIZE,
    card_rank,
    card_suit,
    is_joker,
    is_straight_flush,
    sort_cards,
)

logger = logging.getLogger(__name__)


class BombType(Enum):
    """炸弹类型"""
    FOUR_OF_A_KIND = "four_of_a_kind"    # 同点数炸弹
    FOUR_KINGS = "four_kings"            # 天王炸
    STRAIGHT_FLUSH = "straight_flush"    # 同花顺


@dataclass(frozen=True, slots=True)
class Bomb:
    """
    炸弹

    Attributes:
        cards: 组成炸弹的牌码 (检测时的顺序)
        bomb_type: 炸弹类型
    """
    cards: Tuple[str, ...]
    bomb_type: BombType

    def __len__(self) -> int:
        return len(self.cards)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.bomb_type.value, "cards": list(self.cards)}


@dataclass(frozen=True)
class GuandanAnalysis:
    """
    掼蛋分析结果

    Attributes:
        sorted_hand: 整理后的手牌 (炸弹在前，其余按规范顺序)
        bombs: 检测到的炸弹 (检测顺序)
    """
    sorted_hand: Tuple[str, ...]
    bombs: Tuple[Bomb, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sorted_hand": list(self.sorted_hand),
            "bombs": [b.to_dict() for b in self.bombs],
        }


class BombFinder:
    """
    炸弹检测器

    以规范排序后的手牌下标表示每一张牌，
    重复牌码 (两副牌) 因此可以逐张区分
    """

    def __init__(self, hand: List[str]):
        self.hand = sort_cards(list(hand))
        self._bombs: List[Tuple[Tuple[int, ...], BombType]] = []

    def find_all(self) -> List[Tuple[Tuple[int, ...], BombType]]:
        """按固定顺序检测所有炸弹，返回 (牌下标, 类型) 列表"""
        self._bombs = []
        self._find_rank_bombs()
        self._find_four_kings()
        self._find_straight_flushes()
        return list(self._bombs)

    def _find_rank_bombs(self):
        """同点数四张及以上 (点数从小到大)"""
        by_rank: Dict[str, List[int]] = defaultdict(list)
        for i, card in enumerate(self.hand):
            if is_joker(card):
                continue
            by_rank[card_rank(card)].append(i)

        for indices in by_rank.values():
            if len(indices) >= MIN_BOMB_SIZE:
                self._bombs.append((tuple(indices), BombType.FOUR_OF_A_KIND))

    def _find_four_kings(self):
        jokers = [i for i, card in enumerate(self.hand) if is_joker(card)]
        if len(jokers) == 4:
            self._bombs.append((tuple(jokers), BombType.FOUR_KINGS))

    def _find_straight_flushes(self):
        """逐花色扫描所有 5 张窗口"""
        by_suit: Dict[str, List[int]] = {s: [] for s in SUIT_ORDER}
        for i, card in enumerate(self.hand):
            suit = card_suit(card)
            if suit is not None:
                by_suit[suit].append(i)

        for suit in SUIT_ORDER:
            indices = by_suit[suit]
            for start in range(len(indices) - STRAIGHT_FLUSH_LEN + 1):
                window = indices[start:start + STRAIGHT_FLUSH_LEN]
                if is_straight_flush([self.hand[i] for i in window]):
                    self._bombs.append((tuple(window), BombType.STRAIGHT_FLUSH))


def structured_sort(hand: List[str], bombs: List[Tuple[Tuple[int, ...], BombType]]) -> List[str]:
    """
    整理手牌: 炸弹牌在前 (按炸弹检测顺序)，其余牌按规范顺序在后

    一张牌被多个炸弹使用时只输出一次，归属第一个包含它的炸弹

    Args:
        hand: 规范排序后的手牌
        bombs: BombFinder.find_all 的结果

    Returns:
        与输入手牌多重集合相同的新排列
    """
    used = [False] * len(hand)
    result: List[str] = []

    for indices, _ in bombs:
        for i in indices:
            if not used[i]:
                used[i] = True
                result.append(hand[i])

    result.extend(card for i, card in enumerate(hand) if not used[i])
    return result


def analyze_guandan(hand: List[str]) -> GuandanAnalysis:
    """
    分析掼蛋手牌

    Args:
        hand: 牌码列表，如 ["3H", "4H", "SJ"]

    Returns:
        GuandanAnalysis
    """
    finder = BombFinder(hand)
    found = finder.find_all()

    bombs = tuple(
        Bomb(cards=tuple(finder.hand[i] for i in indices), bomb_type=bomb_type)
        for indices, bomb_type in found
    )
    sorted_hand = structured_sort(finder.hand, found)

    logger.debug(f"Guandan analysis: {len(hand)} cards, {len(bombs)} bombs")

    return GuandanAnalysis(sorted_hand=tuple(sorted_hand), bombs=bombs)
