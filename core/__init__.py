"""
Core Layer - 纯编码层 (无日志、无 I/O)

Modules:
    stones: 围棋棋盘编码
    cards: 掼蛋/扑克牌编码
    tiles: 麻将 34 种牌编码
    pieces: 中国象棋棋子与棋盘编码
"""
from .stones import (
    Stone,
    Territory,
    Point,
    DEFAULT_BOARD_SIZE,
    empty_board,
    board_to_array,
    neighbors,
    board_to_str,
    str_to_board,
)

from .cards import (
    RANKS,
    SUITS,
    SUIT_ORDER,
    SMALL_JOKER,
    BIG_JOKER,
    JOKERS,
    FULL_DECK,
    card_value,
    card_rank,
    card_suit,
    sort_cards,
    cards_to_str,
    str_to_cards,
    is_bomb,
    is_four_kings,
    is_straight_flush,
    check_deck_limit,
)

from .tiles import (
    TILES_ORDER,
    TILE_TO_INDEX,
    TILE_NAMES,
    NUM_TILE_TYPES,
    READY_HAND_SIZE,
    tiles_to_counts,
    sort_tiles,
    tiles_to_str,
    str_to_tiles,
    check_tile_limit,
)

from .pieces import (
    Side,
    BOARD_SIZE,
    PIECE_VALUES,
    PIECE_GLYPHS,
    INITIAL_BOARD,
    piece_side,
    board_from_fen,
    board_to_fen,
    check_piece_limits,
)

__all__ = [
    # stones
    "Stone",
    "Territory",
    "Point",
    "DEFAULT_BOARD_SIZE",
    "empty_board",
    "board_to_array",
    "neighbors",
    "board_to_str",
    "str_to_board",
    # cards
    "RANKS",
    "SUITS",
    "SUIT_ORDER",
    "SMALL_JOKER",
    "BIG_JOKER",
    "JOKERS",
    "FULL_DECK",
    "card_value",
    "card_rank",
    "card_suit",
    "sort_cards",
    "cards_to_str",
    "str_to_cards",
    "is_bomb",
    "is_four_kings",
    "is_straight_flush",
    "check_deck_limit",
    # tiles
    "TILES_ORDER",
    "TILE_TO_INDEX",
    "TILE_NAMES",
    "NUM_TILE_TYPES",
    "READY_HAND_SIZE",
    "tiles_to_counts",
    "sort_tiles",
    "tiles_to_str",
    "str_to_tiles",
    "check_tile_limit",
    # pieces
    "Side",
    "BOARD_SIZE",
    "PIECE_VALUES",
    "PIECE_GLYPHS",
    "INITIAL_BOARD",
    "piece_side",
    "board_from_fen",
    "board_to_fen",
    "check_piece_limits",
]
