"""Trax rule engine: board, cascades, move generation and win detection."""

from .tiles import Tile, Piece, Direction, Player, Cell
from .models import (
    ErrorKind,
    InvariantViolation,
    EmptyBoardError,
    Extents,
    GameConfig,
    ForcedFill,
    CascadeResult,
    LegalMove,
    ValidationError,
    MoveValidation,
    WinningLine,
    WinResult,
)
from .board import Board, column_label, column_index
from .neighbours import (
    faces_player1,
    facing_player,
    forced_tile,
    placeable_orientations,
    piece_to_tile,
    first_move_tile,
)
from .cascade import solve_cascade
from .moves import candidate_cells, legal_moves, has_any_legal_move, move_strings
from .connectivity import UndirectedGraph, build_graph, find_connections, find_loops, evaluate
from .parsing import normalize_move, is_well_formed, split_move

__all__ = [
    # Tiles
    "Tile",
    "Piece",
    "Direction",
    "Player",
    "Cell",
    # Models
    "ErrorKind",
    "InvariantViolation",
    "EmptyBoardError",
    "Extents",
    "GameConfig",
    "ForcedFill",
    "CascadeResult",
    "LegalMove",
    "ValidationError",
    "MoveValidation",
    "WinningLine",
    "WinResult",
    # Board
    "Board",
    "column_label",
    "column_index",
    # Neighbour model
    "faces_player1",
    "facing_player",
    "forced_tile",
    "placeable_orientations",
    "piece_to_tile",
    "first_move_tile",
    # Cascades and moves
    "solve_cascade",
    "candidate_cells",
    "legal_moves",
    "has_any_legal_move",
    "move_strings",
    # Win detection
    "UndirectedGraph",
    "build_graph",
    "find_connections",
    "find_loops",
    "evaluate",
    # Notation
    "normalize_move",
    "is_well_formed",
    "split_move",
]
