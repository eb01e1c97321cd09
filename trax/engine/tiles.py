"""Tile, piece and direction definitions for Trax."""

from enum import Enum
from typing import Dict, FrozenSet, Literal, Tuple


Player = Literal[1, 2]
Cell = Tuple[int, int]


class Direction(str, Enum):
    """Cardinal direction in absolute coordinates (y grows downward)."""
    N = "N"
    E = "E"
    S = "S"
    W = "W"

    @property
    def offset(self) -> Cell:
        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def step(self, x: int, y: int) -> Cell:
        dx, dy = _OFFSETS[self]
        return x + dx, y + dy


_OFFSETS: Dict[Direction, Cell] = {
    Direction.N: (0, -1),
    Direction.E: (1, 0),
    Direction.S: (0, 1),
    Direction.W: (-1, 0),
}

_OPPOSITES: Dict[Direction, Direction] = {
    Direction.N: Direction.S,
    Direction.S: Direction.N,
    Direction.E: Direction.W,
    Direction.W: Direction.E,
}

ALL_DIRECTIONS: Tuple[Direction, ...] = (Direction.S, Direction.E, Direction.N, Direction.W)


class Piece(str, Enum):
    """Orientation symbol chosen by the player."""
    STRAIGHT = "+"
    FORWARD = "/"
    BACK = "\\"


class Tile(str, Enum):
    """
    A placed tile, named by where player 1's line runs.

    A: N-S, B: W-E, C: N-W, D: S-E, E: S-W, F: N-E.
    Player 2 owns the two remaining edges.
    """
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"

    @property
    def player1_edges(self) -> FrozenSet[Direction]:
        return TILE_PLAYER1_EDGES[self]

    @property
    def piece(self) -> Piece:
        return TILE_PIECES[self]

    def player_at(self, edge: Direction) -> Player:
        """Which player's line leaves the tile through `edge`."""
        return 1 if edge in TILE_PLAYER1_EDGES[self] else 2


TILE_PLAYER1_EDGES: Dict[Tile, FrozenSet[Direction]] = {
    Tile.A: frozenset({Direction.N, Direction.S}),
    Tile.B: frozenset({Direction.W, Direction.E}),
    Tile.C: frozenset({Direction.N, Direction.W}),
    Tile.D: frozenset({Direction.S, Direction.E}),
    Tile.E: frozenset({Direction.S, Direction.W}),
    Tile.F: frozenset({Direction.N, Direction.E}),
}

TILE_PIECES: Dict[Tile, Piece] = {
    Tile.A: Piece.STRAIGHT,
    Tile.B: Piece.STRAIGHT,
    Tile.C: Piece.FORWARD,
    Tile.D: Piece.FORWARD,
    Tile.E: Piece.BACK,
    Tile.F: Piece.BACK,
}

PIECE_TILES: Dict[Piece, Tuple[Tile, Tile]] = {
    Piece.STRAIGHT: (Tile.A, Tile.B),
    Piece.FORWARD: (Tile.C, Tile.D),
    Piece.BACK: (Tile.E, Tile.F),
}
