"""
中国象棋棋子与棋盘编码

棋盘为 90 格扁平数组 (9 列 × 10 行，行优先)，下标 = 行 * 9 + 列
- 第 0 行为黑方底线，第 9 行为红方底线
- 空格为 ""，棋子用字母表示，大写红方、小写黑方
- K 帅/将, A 仕/士, B 相/象, N 马, R 车, C 炮, P 兵/卒
"""
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple
from collections import Counter


class Side(Enum):
    """阵营"""
    RED = "red"
    BLACK = "black"


BOARD_COLS = 9
BOARD_ROWS = 10
BOARD_SIZE = BOARD_COLS * BOARD_ROWS

EMPTY = ''

PIECE_KINDS: Tuple[str, ...] = ('K', 'A', 'B', 'N', 'R', 'C', 'P')

# 子力价值
PIECE_VALUES: Dict[str, int] = {
    'K': 10000, 'A': 20, 'B': 20, 'N': 40, 'R': 90, 'C': 45, 'P': 10,
    'k': 10000, 'a': 20, 'b': 20, 'n': 40, 'r': 90, 'c': 45, 'p': 10,
}

# 中文棋子名
PIECE_GLYPHS: Dict[str, str] = {
    'R': '車', 'N': '馬', 'B': '相', 'A': '仕', 'K': '帥', 'C': '炮', 'P': '兵',
    'r': '車', 'n': '馬', 'b': '象', 'a': '士', 'k': '將', 'c': '炮', 'p': '卒',
}

# 每方各兵种数量上限
PIECE_LIMITS: Dict[str, int] = {'K': 1, 'A': 2, 'B': 2, 'N': 2, 'R': 2, 'C': 2, 'P': 5}

# 开局局面
INITIAL_BOARD: Tuple[str, ...] = (
    'r', 'n', 'b', 'a', 'k', 'a', 'b', 'n', 'r',
    '', '', '', '', '', '', '', '', '',
    '', 'c', '', '', '', '', '', 'c', '',
    'p', '', 'p', '', 'p', '', 'p', '', 'p',
    '', '', '', '', '', '', '', '', '',
    '', '', '', '', '', '', '', '', '',
    'P', '', 'P', '', 'P', '', 'P', '', 'P',
    '', 'C', '', '', '', '', '', 'C', '',
    '', '', '', '', '', '', '', '', '',
    'R', 'N', 'B', 'A', 'K', 'A', 'B', 'N', 'R',
)


def piece_side(piece: str) -> Optional[Side]:
    """棋子所属阵营，空格返回 None"""
    if not piece:
        return None
    return Side.RED if piece.isupper() else Side.BLACK


def piece_kind(piece: str) -> str:
    """兵种 (大写字母)"""
    return piece.upper()


def index_to_rc(index: int) -> Tuple[int, int]:
    return index // BOARD_COLS, index % BOARD_COLS


def rc_to_index(row: int, col: int) -> int:
    return row * BOARD_COLS + col


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_ROWS and 0 <= col < BOARD_COLS


def in_palace(row: int, col: int, side: Side) -> bool:
    """九宫: 红方 7-9 行，黑方 0-2 行，3-5 列"""
    if not 3 <= col <= 5:
        return False
    if side == Side.RED:
        return 7 <= row <= 9
    return 0 <= row <= 2


def crossed_river(row: int, side: Side) -> bool:
    """是否已过河"""
    if side == Side.RED:
        return row < 5
    return row > 4


def board_from_fen(fen: str) -> List[str]:
    """
    从 FEN 的局面字段构建棋盘

    Args:
        fen: 如 "rnbakabnr/9/1c5c1/..."，后续字段 (行棋方等) 被忽略

    Returns:
        90 格棋盘

    Raises:
        ValueError: 行数、列数或棋子字母非法
    """
    if not isinstance(fen, str):
        raise ValueError(f"FEN must be a string, got {type(fen).__name__}")
    placement = fen.split()[0] if fen.strip() else ''
    ranks = placement.split('/')
    if len(ranks) != BOARD_ROWS:
        raise ValueError(f"FEN must have {BOARD_ROWS} ranks, got {len(ranks)}")

    board: List[str] = []
    for r, rank in enumerate(ranks):
        row: List[str] = []
        for ch in rank:
            if ch.isdigit():
                row.extend([EMPTY] * int(ch))
            elif ch.upper() in PIECE_KINDS:
                row.append(ch)
            else:
                raise ValueError(f"Unknown piece in FEN: {ch!r}")
        if len(row) != BOARD_COLS:
            raise ValueError(f"FEN rank {r} has {len(row)} columns, expected {BOARD_COLS}")
        board.extend(row)
    return board


def board_to_fen(board: Sequence[str]) -> str:
    """将棋盘转换为 FEN 局面字段"""
    ranks = []
    for r in range(BOARD_ROWS):
        rank = ''
        gap = 0
        for c in range(BOARD_COLS):
            piece = board[rc_to_index(r, c)]
            if not piece:
                gap += 1
                continue
            if gap:
                rank += str(gap)
                gap = 0
            rank += piece
        if gap:
            rank += str(gap)
        ranks.append(rank)
    return '/'.join(ranks)


def check_piece_limits(board: Sequence[str]) -> None:
    """
    调用方校验: 棋盘长度、棋子字母及各兵种数量

    Raises:
        ValueError: 校验失败
    """
    if len(board) != BOARD_SIZE:
        raise ValueError(f"Board must have {BOARD_SIZE} cells, got {len(board)}")
    for piece in board:
        if not isinstance(piece, str):
            raise ValueError(f"Piece code must be a string, got {piece!r}")
        if piece and piece not in PIECE_VALUES:
            raise ValueError(f"Unknown piece code: {piece!r}")
    for piece, count in Counter(p for p in board if p).items():
        limit = PIECE_LIMITS[piece_kind(piece)]
        if count > limit:
            raise ValueError(f"Too many {piece}: {count} > {limit}")
