"""Shared board fixtures."""

import pytest

from trax.engine import Board, Tile


@pytest.fixture
def single_tile_board():
    """Board after the opening move '@0+'."""
    return Board.from_placements([(0, 0, Tile.A)])


@pytest.fixture
def contradiction_board():
    """
    Board where a back-diagonal at (-1, 1) forces (-1, 0) and (0, 1),
    after which (0, 0) would need three lines of one player.
    """
    return Board.from_placements([
        (0, -1, Tile.B),
        (-2, 0, Tile.B),
        (0, 2, Tile.A),
        (-1, 2, Tile.E),
    ])


@pytest.fixture
def ring_board():
    """Four tiles whose player 1 lines close into a loop."""
    return Board.from_placements([
        (0, 0, Tile.D),
        (1, 0, Tile.E),
        (0, 1, Tile.F),
        (1, 1, Tile.C),
    ])
