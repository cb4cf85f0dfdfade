"""
牌的定义与编码

掼蛋使用两副牌共 108 张:
- 2-A 每种花色各 2 张
- 小王 (SJ)、大王 (BJ) 各 2 张

牌码为 "点数+花色"，如 "TH" (红桃10)、"7S" (黑桃7)，或王牌码 "SJ"/"BJ"
"""
from typing import Dict, List, Optional, Tuple
from collections import Counter


# 点数从小到大
RANKS: Tuple[str, ...] = ('2', '3', '4', '5', '6', '7', '8', '9', 'T', 'J', 'Q', 'K', 'A')

# 花色 (红桃、黑桃、方块、梅花)
SUITS: Tuple[str, ...] = ('H', 'S', 'D', 'C')

# 同点数排序时的花色优先级
SUIT_ORDER: Tuple[str, ...] = ('H', 'D', 'C', 'S')

SMALL_JOKER = 'SJ'
BIG_JOKER = 'BJ'
JOKERS: Tuple[str, ...] = (SMALL_JOKER, BIG_JOKER)

# 王的牌值高于 A
JOKER_VALUES: Dict[str, int] = {SMALL_JOKER: 100, BIG_JOKER: 101}

# 每种牌码的张数上限 (两副牌)
DECK_COPIES = 2

# 完整牌组 (108 张)
FULL_DECK: Tuple[str, ...] = tuple(
    r + s for _ in range(DECK_COPIES) for s in SUITS for r in RANKS
) + JOKERS * DECK_COPIES

# 同花顺长度
STRAIGHT_FLUSH_LEN = 5

# 同点数炸弹最少张数
MIN_BOMB_SIZE = 4


def is_joker(card: str) -> bool:
    return isinstance(card, str) and card in JOKER_VALUES


def card_rank(card: str) -> str:
    """点数字符，王牌返回牌码本身"""
    if is_joker(card):
        return card
    return card[:-1]


def card_suit(card: str) -> Optional[str]:
    """花色字符，王牌无花色"""
    if is_joker(card):
        return None
    return card[-1]


def card_value(card: str) -> int:
    """
    牌值 (用于大小比较)

    2 为 0，A 为 12，小王 100，大王 101
    """
    if is_joker(card):
        return JOKER_VALUES[card]
    return RANKS.index(card_rank(card))


def sort_key(card: str) -> Tuple[int, int]:
    """规范排序键: 先按牌值，再按花色优先级"""
    suit = card_suit(card)
    suit_idx = SUIT_ORDER.index(suit) if suit is not None else 0
    return card_value(card), suit_idx


def sort_cards(cards: List[str]) -> List[str]:
    """规范排序 (稳定)"""
    return sorted(cards, key=sort_key)


def cards_to_str(cards: List[str]) -> str:
    """
    将牌列表转换为可读字符串

    Returns:
        如 "3H 4H 5H SJ"
    """
    return ' '.join(cards)


def str_to_cards(s: str) -> List[str]:
    """
    将字符串转换为牌列表

    Args:
        s: 空格或逗号分隔的牌码，如 "3H,4H 5H"

    Returns:
        牌列表 (保持原顺序)
    """
    return s.replace(',', ' ').split()


def is_valid_card(card: str) -> bool:
    if not isinstance(card, str):
        return False
    if is_joker(card):
        return True
    return len(card) == 2 and card[0] in RANKS and card[1] in SUITS


def is_four_kings(cards: List[str]) -> bool:
    """检查是否为天王炸 (四张王)"""
    return len(cards) == 4 and all(is_joker(c) for c in cards)


def is_straight_flush(cards: List[str]) -> bool:
    """检查是否为同花顺 (5 张同花色且点数严格连续)"""
    if len(cards) != STRAIGHT_FLUSH_LEN or any(is_joker(c) for c in cards):
        return False
    if len({card_suit(c) for c in cards}) != 1:
        return False
    values = sorted(card_value(c) for c in cards)
    for i in range(len(values) - 1):
        if values[i + 1] - values[i] != 1:
            return False
    return True


def is_bomb(cards: List[str]) -> bool:
    """检查是否为炸弹 (四张及以上同点数、天王炸或同花顺)"""
    if is_four_kings(cards) or is_straight_flush(cards):
        return True
    if len(cards) >= MIN_BOMB_SIZE and not any(is_joker(c) for c in cards):
        return len({card_rank(c) for c in cards}) == 1
    return False


def check_deck_limit(cards: List[str], copies: int = DECK_COPIES) -> None:
    """
    调用方校验: 牌码合法且每种牌不超过两副牌的张数

    Raises:
        ValueError: 非法牌码或张数超限
    """
    for card in cards:
        if not is_valid_card(card):
            raise ValueError(f"Invalid card code: {card!r}")
    for card, count in Counter(cards).items():
        if count > copies:
            raise ValueError(f"Too many copies of {card}: {count} > {copies}")
