"""
围棋棋盘编码

棋盘为 N×N 的三值矩阵 (行优先):
- 0: 空
- 1: 黑子
- 2: 白子
"""
from enum import IntEnum
from typing import Dict, List, Sequence, Tuple
import numpy as np


class Stone(IntEnum):
    """交叉点状态"""
    EMPTY = 0
    BLACK = 1
    WHITE = 2


class Territory(IntEnum):
    """地盘归属"""
    NEUTRAL = 0
    BLACK = 1
    WHITE = 2


# (行, 列)
Point = Tuple[int, int]

DEFAULT_BOARD_SIZE = 19

STONE_TO_STR: Dict[int, str] = {0: '.', 1: 'B', 2: 'W'}
STR_TO_STONE: Dict[str, int] = {v: k for k, v in STONE_TO_STR.items()}


def empty_board(size: int = DEFAULT_BOARD_SIZE) -> np.ndarray:
    """创建空棋盘"""
    return np.zeros((size, size), dtype=np.int8)


def board_to_array(board: Sequence[Sequence[int]]) -> np.ndarray:
    """
    将嵌套序列转换为 numpy 棋盘

    总是返回副本，调用方后续修改原棋盘不会影响分析。

    Args:
        board: N×N 嵌套序列或数组

    Returns:
        (N, N) int8 数组
    """
    return np.array(board, dtype=np.int8, copy=True).reshape(len(board), len(board))


def neighbors(row: int, col: int, size: int) -> List[Point]:
    """4 邻接点 (下、上、右、左)，越界点被过滤"""
    result = []
    for nr, nc in ((row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)):
        if 0 <= nr < size and 0 <= nc < size:
            result.append((nr, nc))
    return result


def board_to_str(board: Sequence[Sequence[int]]) -> str:
    """
    将棋盘渲染为文本

    Returns:
        如 ". B W" 的多行字符串，每行一排
    """
    return '\n'.join(
        ' '.join(STONE_TO_STR[int(c)] for c in row) for row in board
    )


def str_to_board(s: str) -> np.ndarray:
    """
    解析 board_to_str 的输出

    Raises:
        ValueError: 未知符号或棋盘不是正方形
    """
    if not isinstance(s, str):
        raise ValueError(f"Board text must be a string, got {type(s).__name__}")
    rows = [line.split() for line in s.strip().splitlines() if line.strip()]
    size = len(rows)
    board = empty_board(size)
    for r, row in enumerate(rows):
        if len(row) != size:
            raise ValueError(f"Row {r} has {len(row)} points, expected {size}")
        for c, symbol in enumerate(row):
            if symbol not in STR_TO_STONE:
                raise ValueError(f"Unknown stone symbol: {symbol!r}")
            board[r, c] = STR_TO_STONE[symbol]
    return board
