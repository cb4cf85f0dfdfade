"""
中国象棋一步搜索

只为红方生成伪合法着法 (不检测将军、不搜索对方应着)，
按吃子价值打分后取最高分着法，并转换为中文记谱。

着法生成覆盖车、炮、马、兵、帅；相/象与仕/士没有生成分支，
因此永远不会被推荐。
"""
from typing import Any, Dict, List, Optional, Sequence, Tuple
from dataclasses import dataclass, field
import logging

from core.pieces import (
    Side,
    EMPTY,
    PIECE_VALUES,
    PIECE_GLYPHS,
    index_to_rc,
    rc_to_index,
    in_bounds,
    in_palace,
    crossed_river,
    piece_side,
    piece_kind,
)

logger = logging.getLogger(__name__)

ORTHOGONAL: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))

KNIGHT_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (1, 2), (1, -2), (-1, 2), (-1, -2),
    (2, 1), (2, -1), (-2, 1), (-2, -1),
)

# 斜行棋子记谱时写目标纵线，其余写步数
DIAGONAL_KINDS = frozenset({'N', 'B', 'A'})

RED_NUMERALS: Tuple[str, ...] = ('', '一', '二', '三', '四', '五', '六', '七', '八', '九')
BLACK_NUMERALS: Tuple[str, ...] = ('', '1', '2', '3', '4', '5', '6', '7', '8', '9')

ADVANCE = '进'
RETREAT = '退'
TRAVERSE = '平'

RESIGN = "Resign"
FUTURE_STEPS_PLACEHOLDER: Tuple[str, ...] = ("...",)


@dataclass(frozen=True, slots=True)
class Move:
    """
    着法

    Attributes:
        from_index: 起点下标
        to_index: 终点下标
        score: 吃子得分 (不吃子为 0；车吃子扣除自身价值的十分之一，可能带小数)
    """
    from_index: int
    to_index: int
    score: float = 0

    @property
    def is_capture(self) -> bool:
        return self.score > 0


@dataclass(frozen=True)
class XiangqiAnalysis:
    """
    最佳着法结果

    Attributes:
        best_move: 中文记谱，无着可走时为 "Resign"
        reasoning: 简短理由
        future_steps: 后续着法 (由外部推理服务补全)
        move: 选中的着法
    """
    best_move: str
    reasoning: str
    future_steps: Tuple[str, ...] = field(default_factory=tuple)
    move: Optional[Move] = None

    @property
    def resigned(self) -> bool:
        return self.move is None

    def to_dict(self) -> Dict[str, Any]:
        score = None
        if self.move is not None:
            # 车吃子得分带小数，整数值统一输出为 int
            score = self.move.score
            if float(score).is_integer():
                score = int(score)
        return {
            "best_move": self.best_move,
            "reasoning": self.reasoning,
            "future_steps": list(self.future_steps),
            "from": self.move.from_index if self.move else None,
            "to": self.move.to_index if self.move else None,
            "score": score,
        }


class MoveGenerator:
    """
    单方伪合法着法生成器

    按棋盘下标顺序遍历己方棋子，按兵种分派
    """

    def __init__(self, board: Sequence[str], side: Side):
        self.board = tuple(board)
        self.side = side

    def is_own(self, piece: str) -> bool:
        return piece_side(piece) == self.side

    def is_opponent(self, piece: str) -> bool:
        side = piece_side(piece)
        return side is not None and side != self.side

    def generate(self) -> List[Move]:
        moves: List[Move] = []
        for i, piece in enumerate(self.board):
            if not piece or not self.is_own(piece):
                continue
            kind = piece_kind(piece)
            if kind == 'R':
                moves.extend(self._rook_moves(i))
            elif kind == 'C':
                moves.extend(self._cannon_moves(i))
            elif kind == 'N':
                moves.extend(self._knight_moves(i))
            elif kind == 'P':
                moves.extend(self._pawn_moves(i))
            elif kind == 'K':
                moves.extend(self._king_moves(i))
        return moves

    def _rook_moves(self, i: int) -> List[Move]:
        """直线滑行，吃子得分扣除车自身价值的十分之一"""
        r, c = index_to_rc(i)
        own_value = PIECE_VALUES[self.board[i]]
        moves = []
        for dr, dc in ORTHOGONAL:
            nr, nc = r + dr, c + dc
            while in_bounds(nr, nc):
                ni = rc_to_index(nr, nc)
                target = self.board[ni]
                if target == EMPTY:
                    moves.append(Move(i, ni, 0))
                else:
                    if self.is_opponent(target):
                        moves.append(Move(i, ni, PIECE_VALUES[target] - own_value / 10))
                    break
                nr, nc = nr + dr, nc + dc
        return moves

    def _cannon_moves(self, i: int) -> List[Move]:
        """无炮架时滑行，隔一子 (炮架) 吃子"""
        r, c = index_to_rc(i)
        moves = []
        for dr, dc in ORTHOGONAL:
            nr, nc = r + dr, c + dc
            screen = False
            while in_bounds(nr, nc):
                ni = rc_to_index(nr, nc)
                target = self.board[ni]
                if not screen:
                    if target == EMPTY:
                        moves.append(Move(i, ni, 0))
                    else:
                        screen = True
                elif target != EMPTY:
                    if self.is_opponent(target):
                        moves.append(Move(i, ni, PIECE_VALUES[target]))
                    break
                nr, nc = nr + dr, nc + dc
        return moves

    def _knight_moves(self, i: int) -> List[Move]:
        """日字走法，蹩马腿时不能走"""
        r, c = index_to_rc(i)
        moves = []
        for dr, dc in KNIGHT_OFFSETS:
            nr, nc = r + dr, c + dc
            leg_r = r + (dr // 2 if abs(dr) == 2 else 0)
            leg_c = c + (dc // 2 if abs(dc) == 2 else 0)
            if not in_bounds(nr, nc) or self.board[rc_to_index(leg_r, leg_c)] != EMPTY:
                continue
            ni = rc_to_index(nr, nc)
            target = self.board[ni]
            if target == EMPTY:
                moves.append(Move(i, ni, 0))
            elif self.is_opponent(target):
                moves.append(Move(i, ni, PIECE_VALUES[target]))
        return moves

    def _pawn_moves(self, i: int) -> List[Move]:
        """向前一步，过河后可横走；不计吃子得分"""
        r, c = index_to_rc(i)
        forward = -1 if self.side == Side.RED else 1
        targets = [(r + forward, c)]
        if crossed_river(r, self.side):
            targets.extend([(r, c - 1), (r, c + 1)])
        return self._step_moves(i, targets)

    def _king_moves(self, i: int) -> List[Move]:
        """九宫内直走一步；不计吃子得分"""
        r, c = index_to_rc(i)
        targets = [
            (r + dr, c + dc) for dr, dc in ORTHOGONAL
            if in_palace(r + dr, c + dc, self.side)
        ]
        return self._step_moves(i, targets)

    def _step_moves(self, i: int, targets: List[Tuple[int, int]]) -> List[Move]:
        moves = []
        for nr, nc in targets:
            if not in_bounds(nr, nc):
                continue
            ni = rc_to_index(nr, nc)
            target = self.board[ni]
            if target == EMPTY or self.is_opponent(target):
                moves.append(Move(i, ni, 0))
        return moves


def generate_moves(board: Sequence[str], side: Side = Side.RED) -> List[Move]:
    """
    生成一方所有伪合法着法

    Args:
        board: 90 格棋盘
        side: 行棋方

    Returns:
        按得分降序排列的着法 (同分保持生成顺序)
    """
    moves = MoveGenerator(board, side).generate()
    return sorted(moves, key=lambda m: m.score, reverse=True)


def to_chinese_notation(move: Move, board: Sequence[str]) -> str:
    """
    转换为中文记谱，如 "炮二平五"、"馬8进7"

    红方纵线从右到左用中文数字，黑方从左到右用阿拉伯数字；
    平移和斜行棋子写目标纵线，直行棋子进退写步数

    Args:
        move: 着法
        board: 走子前的棋盘

    Returns:
        记谱字符串，起点为空时返回 ""
    """
    piece = board[move.from_index]
    if not piece:
        return ""

    is_red = piece_side(piece) == Side.RED
    numerals = RED_NUMERALS if is_red else BLACK_NUMERALS

    r1, c1 = index_to_rc(move.from_index)
    r2, c2 = index_to_rc(move.to_index)
    src_col = 9 - c1 if is_red else c1 + 1
    dst_col = 9 - c2 if is_red else c2 + 1

    prefix = f"{PIECE_GLYPHS[piece]}{numerals[src_col]}"

    if r1 == r2:
        return f"{prefix}{TRAVERSE}{numerals[dst_col]}"

    advance = r1 > r2 if is_red else r1 < r2
    direction = ADVANCE if advance else RETREAT

    if piece_kind(piece) in DIAGONAL_KINDS:
        return f"{prefix}{direction}{numerals[dst_col]}"
    return f"{prefix}{direction}{numerals[abs(r1 - r2)]}"


def best_move(board: Sequence[str]) -> XiangqiAnalysis:
    """
    红方一步最佳着法

    Args:
        board: 90 格棋盘

    Returns:
        XiangqiAnalysis，无着可走时为认输结果
    """
    moves = generate_moves(board, Side.RED)
    if not moves:
        logger.debug("Xiangqi analysis: no legal moves for red")
        return XiangqiAnalysis(best_move=RESIGN, reasoning="No legal moves.")

    best = moves[0]
    if best.score > 0:
        reasoning = f"Captures value {best.score:g}."
    else:
        reasoning = "Positional."

    notation = to_chinese_notation(best, board)
    logger.debug(f"Xiangqi analysis: {len(moves)} moves, best {notation} ({best.score:g})")

    return XiangqiAnalysis(
        best_move=notation,
        reasoning=reasoning,
        future_steps=FUTURE_STEPS_PLACEHOLDER,
        move=best,
    )
