"""Legal move generation."""

import logging
from typing import Iterator, List, Tuple

from .board import Board, ORIGIN_COLUMN
from .cascade import solve_cascade
from .models import GameConfig, LegalMove
from .neighbours import FIRST_MOVE_TILES, piece_to_tile, placeable_orientations
from .tiles import Cell, Piece


logger = logging.getLogger(__name__)

ORIGIN: Cell = (0, 0)
ORIGIN_NOTATION = f"{ORIGIN_COLUMN}0"

PIECE_ORDER = (Piece.STRAIGHT, Piece.FORWARD, Piece.BACK)


def can_expand(board: Board, config: GameConfig) -> Tuple[bool, bool]:
    """Whether the board may still grow along (x, y) under `max_extent`."""
    if config.max_extent is None:
        return True, True
    return board.width < config.max_extent, board.height < config.max_extent


def can_place_at(board: Board, config: GameConfig, x: int, y: int) -> bool:
    """Empty, adjacent to a tile, and within the configured maximum extent."""
    if board.has(x, y):
        return False
    expand_x, expand_y = can_expand(board, config)
    if not expand_x and board.expands_x(x):
        return False
    if not expand_y and board.expands_y(y):
        return False
    return len(board.neighbours(x, y)) > 0


def candidate_cells(board: Board, config: GameConfig) -> List[Cell]:
    """Cells where some piece could be placed, ignoring cascades."""
    if board.is_empty:
        return [ORIGIN]
    return [(x, y) for x, y in board.frame_cells() if can_place_at(board, config, x, y)]


def _first_moves() -> List[LegalMove]:
    return [
        LegalMove(notation=ORIGIN_NOTATION, cell=ORIGIN, piece=piece, tile=tile)
        for piece, tile in FIRST_MOVE_TILES.items()
    ]


def _iter_legal_moves(board: Board, config: GameConfig) -> Iterator[LegalMove]:
    for x, y in candidate_cells(board, config):
        neighbours = board.neighbours(x, y)
        pieces = placeable_orientations(neighbours)
        for piece in PIECE_ORDER:
            if piece not in pieces:
                continue
            tile = piece_to_tile(piece, neighbours)
            result = solve_cascade(board, x, y, tile)
            if result.is_contradiction:
                continue
            yield LegalMove(
                notation=board.abs_to_notation(x, y),
                cell=(x, y),
                piece=piece,
                tile=tile,
                forced=result.forced,
            )


def legal_moves(board: Board, config: GameConfig) -> List[LegalMove]:
    """
    All legal placements on `board`, sorted by move string.

    Each entry carries the fills its cascade would force, so callers can
    preview a move without solving it again.
    """
    if board.is_empty:
        return _first_moves()
    moves = sorted(_iter_legal_moves(board, config), key=lambda m: m.move)
    logger.debug("Generated %d legal moves", len(moves))
    return moves


def has_any_legal_move(board: Board, config: GameConfig) -> bool:
    if board.is_empty:
        return True
    for _ in _iter_legal_moves(board, config):
        return True
    return False


def move_strings(board: Board, config: GameConfig) -> List[str]:
    return [m.move for m in legal_moves(board, config)]
