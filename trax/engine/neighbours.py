"""
Neighbour model: which player's line crosses each tile edge, and which
tile a cell is forced to or may legally hold given its neighbours.

Directions passed to these functions always point from the cell under
consideration towards the neighbour.
"""

from typing import Dict, FrozenSet, List, Sequence, Set, Tuple

from .models import InvariantViolation
from .tiles import PIECE_TILES, Direction, Piece, Player, Tile


Neighbour = Tuple[Direction, Tile]

N, E, S, W = Direction.N, Direction.E, Direction.S, Direction.W

# Tiles routing player 1's line back into the cell, keyed by where the
# neighbour lies.
TILES_FACING_PLAYER1: Dict[Direction, FrozenSet[Tile]] = {
    E: frozenset({Tile.B, Tile.C, Tile.E}),
    W: frozenset({Tile.B, Tile.D, Tile.F}),
    S: frozenset({Tile.A, Tile.C, Tile.F}),
    N: frozenset({Tile.A, Tile.D, Tile.E}),
}

FORCED_TILES: Dict[Tuple[int, FrozenSet[Direction]], Tile] = {
    (1, frozenset({N, S})): Tile.A,
    (1, frozenset({W, E})): Tile.B,
    (1, frozenset({N, W})): Tile.C,
    (1, frozenset({S, E})): Tile.D,
    (1, frozenset({S, W})): Tile.E,
    (1, frozenset({N, E})): Tile.F,
    (2, frozenset({N, S})): Tile.B,
    (2, frozenset({W, E})): Tile.A,
    (2, frozenset({N, W})): Tile.D,
    (2, frozenset({S, E})): Tile.C,
    (2, frozenset({S, W})): Tile.F,
    (2, frozenset({N, E})): Tile.E,
}

ALL_PIECES: FrozenSet[Piece] = frozenset(Piece)

# Orientations allowed next to two neighbours of different players.
_TWO_NEIGHBOUR_PIECES: Dict[FrozenSet[Direction], FrozenSet[Piece]] = {
    frozenset({N, S}): frozenset({Piece.FORWARD, Piece.BACK}),
    frozenset({W, E}): frozenset({Piece.FORWARD, Piece.BACK}),
    frozenset({W, N}): frozenset({Piece.STRAIGHT, Piece.BACK}),
    frozenset({E, S}): frozenset({Piece.STRAIGHT, Piece.BACK}),
    frozenset({E, N}): frozenset({Piece.STRAIGHT, Piece.FORWARD}),
    frozenset({W, S}): frozenset({Piece.STRAIGHT, Piece.FORWARD}),
}

FIRST_MOVE_TILES: Dict[Piece, Tile] = {
    Piece.STRAIGHT: Tile.A,
    Piece.FORWARD: Tile.C,
}


def faces_player1(direction: Direction, tile: Tile) -> bool:
    """True if `tile`, lying in `direction`, routes player 1's line into the cell."""
    return tile in TILES_FACING_PLAYER1[direction]


def facing_player(direction: Direction, tile: Tile) -> Player:
    return 1 if faces_player1(direction, tile) else 2


def split_by_player(neighbours: Sequence[Neighbour]) -> Tuple[List[Direction], List[Direction]]:
    """Partition neighbour directions by the player whose line faces the cell."""
    player1: List[Direction] = []
    player2: List[Direction] = []
    for direction, tile in neighbours:
        if faces_player1(direction, tile):
            player1.append(direction)
        else:
            player2.append(direction)
    return player1, player2


def forced_tile(player: Player, dir1: Direction, dir2: Direction) -> Tile:
    """The tile continuing `player`'s line between the two given edges."""
    try:
        return FORCED_TILES[(player, frozenset({dir1, dir2}))]
    except KeyError:
        raise InvariantViolation(
            f"No forced tile for player {player} entering from {dir1.value} and {dir2.value}"
        ) from None


def placeable_orientations(neighbours: Sequence[Neighbour]) -> Set[Piece]:
    """Pieces a player may choose for an empty cell with 1 or 2 neighbours."""
    if len(neighbours) == 1:
        return set(ALL_PIECES)
    if len(neighbours) != 2:
        raise InvariantViolation(
            f"Orientations are only defined for 1 or 2 neighbours, got {len(neighbours)}"
        )
    (dir1, tile1), (dir2, tile2) = neighbours
    if facing_player(dir1, tile1) == facing_player(dir2, tile2):
        raise InvariantViolation("Cell with two same-player neighbours should have been filled")
    return set(_TWO_NEIGHBOUR_PIECES[frozenset({dir1, dir2})])


def piece_to_tile(piece: Piece, neighbours: Sequence[Neighbour]) -> Tile:
    """Resolve a piece to the tile of its shape that agrees with every neighbour."""
    for tile in PIECE_TILES[piece]:
        if all(tile.player_at(direction) == facing_player(direction, n_tile)
               for direction, n_tile in neighbours):
            return tile
    raise InvariantViolation(f"Piece '{piece.value}' cannot be placed against these neighbours")


def first_move_tile(piece: Piece) -> Tile:
    if piece not in FIRST_MOVE_TILES:
        raise InvariantViolation(f"Piece '{piece.value}' is not a legal first move")
    return FIRST_MOVE_TILES[piece]
