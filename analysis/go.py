"""
围棋局面分析

- 棋块与气: 对每个未访问的棋子做 BFS，收集 4 邻接同色的极大连通块及其气
- 地盘估算: 对每个空点区域做洪水填充，若区域边界只有一种颜色则计为该方地盘

所有函数都是纯函数，不修改输入棋盘
"""
from typing import Any, Dict, List, Sequence, Set, Tuple
from dataclasses import dataclass
from collections import deque
import logging

import numpy as np

from core.stones import Stone, Territory, Point, board_to_array, neighbors

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GoGroup:
    """
    棋块

    Attributes:
        color: 棋子颜色
        stones: 棋块内所有棋子坐标 (BFS 访问顺序)
        liberties: 气数 (相邻空点去重计数)
    """
    color: Stone
    stones: Tuple[Point, ...]
    liberties: int

    def __len__(self) -> int:
        return len(self.stones)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color": self.color.name.lower(),
            "stones": [list(p) for p in self.stones],
            "liberties": self.liberties,
        }


@dataclass(frozen=True)
class GoAnalysis:
    """围棋分析结果"""
    groups: Tuple[GoGroup, ...]
    territory_map: Tuple[Tuple[Territory, ...], ...]
    black_stones: int
    white_stones: int
    black_territory: int
    white_territory: int

    @property
    def black_area(self) -> int:
        """数子法: 子 + 地"""
        return self.black_stones + self.black_territory

    @property
    def white_area(self) -> int:
        return self.white_stones + self.white_territory

    def groups_in_atari(self) -> List[GoGroup]:
        """只剩一口气的棋块"""
        return [g for g in self.groups if g.liberties == 1]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "black_stones": self.black_stones,
            "white_stones": self.white_stones,
            "black_territory": self.black_territory,
            "white_territory": self.white_territory,
            "groups": [g.to_dict() for g in self.groups],
            "territory_map": [[int(t) for t in row] for row in self.territory_map],
        }


def find_groups(board: np.ndarray) -> List[GoGroup]:
    """
    找出所有棋块并计算气

    Args:
        board: (N, N) 棋盘

    Returns:
        按扫描顺序 (行优先) 的棋块列表
    """
    size = board.shape[0]
    visited = np.zeros(board.shape, dtype=bool)
    groups: List[GoGroup] = []

    for r in range(size):
        for c in range(size):
            color = int(board[r, c])
            if color == Stone.EMPTY or visited[r, c]:
                continue

            stones: List[Point] = []
            liberties: Set[Point] = set()
            queue = deque([(r, c)])
            visited[r, c] = True

            while queue:
                p = queue.popleft()
                stones.append(p)
                for n in neighbors(p[0], p[1], size):
                    n_color = board[n]
                    if n_color == Stone.EMPTY:
                        liberties.add(n)
                    elif n_color == color and not visited[n]:
                        visited[n] = True
                        queue.append(n)

            groups.append(GoGroup(Stone(color), tuple(stones), len(liberties)))

    return groups


def estimate_territory(board: np.ndarray) -> np.ndarray:
    """
    地盘估算

    空点连通区域的相邻棋子只有一种颜色时，整个区域归该方；
    无边界 (空棋盘) 或两色边界的区域为中立

    Returns:
        (N, N) 地盘归属数组 (Territory 取值)
    """
    size = board.shape[0]
    territory = np.zeros(board.shape, dtype=np.int8)
    visited = np.zeros(board.shape, dtype=bool)

    for r in range(size):
        for c in range(size):
            if board[r, c] != Stone.EMPTY or visited[r, c]:
                continue

            region: List[Point] = []
            borders: Set[int] = set()
            queue = deque([(r, c)])
            visited[r, c] = True

            while queue:
                p = queue.popleft()
                region.append(p)
                for n in neighbors(p[0], p[1], size):
                    n_color = int(board[n])
                    if n_color == Stone.EMPTY:
                        if not visited[n]:
                            visited[n] = True
                            queue.append(n)
                    else:
                        borders.add(n_color)

            if len(borders) == 1:
                owner = borders.pop()
                for p in region:
                    territory[p] = owner

    return territory


def analyze_go_board(board: Sequence[Sequence[int]]) -> GoAnalysis:
    """
    分析围棋局面

    Args:
        board: N×N 棋盘 (0 空, 1 黑, 2 白)

    Returns:
        GoAnalysis
    """
    arr = board_to_array(board)
    groups = find_groups(arr)
    territory = estimate_territory(arr)

    black_stones = sum(len(g) for g in groups if g.color == Stone.BLACK)
    white_stones = sum(len(g) for g in groups if g.color == Stone.WHITE)
    black_territory = int(np.count_nonzero(territory == Territory.BLACK))
    white_territory = int(np.count_nonzero(territory == Territory.WHITE))

    territory_map = tuple(
        tuple(Territory(int(t)) for t in row) for row in territory
    )

    logger.debug(
        f"Go analysis: {len(groups)} groups, "
        f"territory B={black_territory} W={white_territory}"
    )

    return GoAnalysis(
        groups=tuple(groups),
        territory_map=territory_map,
        black_stones=black_stones,
        white_stones=white_stones,
        black_territory=black_territory,
        white_territory=white_territory,
    )
