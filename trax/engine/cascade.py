"""Forced-fill propagation after a placement."""

import logging
from typing import List, Optional

from .board import Board
from .models import CascadeResult, ForcedFill
from .neighbours import forced_tile, split_by_player
from .tiles import Cell, Tile


logger = logging.getLogger(__name__)


def solve_cascade(board: Board, x: int, y: int, tile: Optional[Tile] = None) -> CascadeResult:
    """
    Propagate forced fills outward from the tile at (x, y).

    The board is never modified: propagation runs on a clone, with `tile`
    written at (x, y) first when given. An empty cell is forced when two
    lines of the same player enter it. A cell where three or more lines of
    one player would meet is a contradiction and ends propagation.

    Args:
        board: Board snapshot
        x, y: Cell of the triggering placement
        tile: Tile to place at (x, y) if it is not already on the board

    Returns:
        CascadeResult with the forced fills in the order they were made,
        or with only `contradiction` set to the unsatisfiable cell
    """
    work = board.clone()
    if tile is not None:
        work.set(x, y, tile)

    to_check: List[Cell] = work.empty_neighbours(x, y)
    forced: List[ForcedFill] = []

    while to_check:
        cx, cy = to_check.pop()
        if work.has(cx, cy):
            continue

        neighbours = work.neighbours(cx, cy)
        if len(neighbours) < 2:
            continue

        player1, player2 = split_by_player(neighbours)
        if len(player1) > 2 or len(player2) > 2:
            logger.debug("Contradiction at %s after placement at %s", (cx, cy), (x, y))
            return CascadeResult(contradiction=(cx, cy))

        if len(player1) == 2:
            fill = forced_tile(1, player1[0], player1[1])
        elif len(player2) == 2:
            fill = forced_tile(2, player2[0], player2[1])
        else:
            # One line from each player does not force anything
            continue

        work.set(cx, cy, fill)
        forced.append(ForcedFill(cell=(cx, cy), tile=fill))
        to_check.extend(work.empty_neighbours(cx, cy))

    return CascadeResult(forced=forced)
