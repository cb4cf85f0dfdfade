"""
麻将牌编码

34 种牌，固定顺序 (数牌在前，字牌在后):
- 1m-9m: 万
- 1p-9p: 筒
- 1s-9s: 条
- E S W N: 东南西北
- P F C: 白发中
"""
from typing import Dict, List, Optional, Sequence, Tuple
from collections import Counter
import numpy as np


TILES_ORDER: Tuple[str, ...] = (
    '1m', '2m', '3m', '4m', '5m', '6m', '7m', '8m', '9m',
    '1p', '2p', '3p', '4p', '5p', '6p', '7p', '8p', '9p',
    '1s', '2s', '3s', '4s', '5s', '6s', '7s', '8s', '9s',
    'E', 'S', 'W', 'N', 'P', 'F', 'C',
)

TILE_TO_INDEX: Dict[str, int] = {t: i for i, t in enumerate(TILES_ORDER)}

NUM_TILE_TYPES = 34
NUM_SUITED_TILES = 27
TILES_PER_SUIT = 9
MAX_COPIES = 4

# 听牌时的手牌张数
READY_HAND_SIZE = 13

# 白、发、中
DRAGON_INDICES: Tuple[int, ...] = (31, 32, 33)

# 五万
FIVE_CHARACTERS_INDEX = 4

SUIT_LABELS: Dict[str, str] = {'m': '万', 'p': '筒', 's': '条'}

HONOR_LABELS: Dict[str, str] = {
    'E': '东', 'S': '南', 'W': '西', 'N': '北',
    'P': '白', 'F': '发', 'C': '中',
}

# 牌码到中文显示名
TILE_NAMES: Dict[str, str] = {
    t: (t[0] + SUIT_LABELS[t[1]] if len(t) == 2 else HONOR_LABELS[t])
    for t in TILES_ORDER
}


def tile_index(tile: str) -> int:
    """牌码在 34 种牌中的下标，未知牌码返回 -1"""
    return TILE_TO_INDEX.get(tile, -1)


def suit_of(index: int) -> Optional[int]:
    """数牌花色 (0=万, 1=筒, 2=条)，字牌返回 None"""
    if index < NUM_SUITED_TILES:
        return index // TILES_PER_SUIT
    return None


def is_honor(index: int) -> bool:
    return index >= NUM_SUITED_TILES


def tiles_to_counts(tiles: Sequence[str]) -> np.ndarray:
    """
    将牌列表转换为 34 维计数向量

    未知牌码被忽略

    Args:
        tiles: 牌码列表

    Returns:
        (34,) int64 数组
    """
    counts = np.zeros(NUM_TILE_TYPES, dtype=np.int64)
    for tile in tiles:
        idx = tile_index(tile)
        if idx != -1:
            counts[idx] += 1
    return counts


def sort_tiles(tiles: Sequence[str]) -> List[str]:
    """按 34 种牌的固定顺序稳定排序 (不去重)"""
    return sorted(tiles, key=tile_index)


def tiles_to_str(tiles: Sequence[str]) -> str:
    return ' '.join(tiles)


def str_to_tiles(s: str) -> List[str]:
    """空格或逗号分隔的牌码"""
    return s.replace(',', ' ').split()


def check_tile_limit(hand: Sequence[str], discards: Sequence[str] = ()) -> None:
    """
    调用方校验: 牌码合法、手牌不超过 13 张、任一牌在手牌+牌河中不超过 4 张

    Raises:
        ValueError: 校验失败
    """
    if len(hand) > READY_HAND_SIZE:
        raise ValueError(f"Hand has {len(hand)} tiles, at most {READY_HAND_SIZE} allowed")
    for tile in list(hand) + list(discards):
        if not isinstance(tile, str) or tile not in TILE_TO_INDEX:
            raise ValueError(f"Invalid tile code: {tile!r}")
    for tile, count in Counter(list(hand) + list(discards)).items():
        if count > MAX_COPIES:
            raise ValueError(f"Too many copies of {tile}: {count} > {MAX_COPIES}")
