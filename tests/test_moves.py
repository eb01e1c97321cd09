"""Tests for legal move generation."""

from trax.engine import (
    Board,
    GameConfig,
    Piece,
    Tile,
    candidate_cells,
    has_any_legal_move,
    legal_moves,
    move_strings,
    solve_cascade,
)


class TestFirstMove:
    """Test the opening position."""

    def test_empty_board_offers_two_orientations(self):
        """Only '+' and '/' at the origin are legal on an empty board."""
        moves = legal_moves(Board(), GameConfig())
        assert [m.move for m in moves] == ["@0+", "@0/"]
        assert {m.tile for m in moves} == {Tile.A, Tile.C}
        assert all(m.cell == (0, 0) and m.forced == [] for m in moves)

    def test_empty_board_has_moves(self):
        """The opening position always has a move."""
        assert has_any_legal_move(Board(), GameConfig())


class TestCandidateCells:
    """Test which cells are considered for placement."""

    def test_cells_around_single_tile(self, single_tile_board):
        """The four orthogonal neighbours of the only tile are candidates."""
        cells = candidate_cells(single_tile_board, GameConfig())
        assert sorted(cells) == [(-1, 0), (0, -1), (0, 1), (1, 0)]

    def test_max_extent_blocks_growth(self, single_tile_board):
        """At maximum size no cell outside the current extents is offered."""
        assert candidate_cells(single_tile_board, GameConfig(max_extent=1)) == []

    def test_max_extent_allows_growth_below_limit(self, single_tile_board):
        """Below the maximum size the board may still grow."""
        cells = candidate_cells(single_tile_board, GameConfig(max_extent=2))
        assert len(cells) == 4

    def test_growth_limited_on_one_axis(self):
        """A board at full width may still grow vertically."""
        board = Board.from_placements([(0, 0, Tile.B), (1, 0, Tile.B)])
        cells = candidate_cells(board, GameConfig(max_extent=2))
        assert sorted(cells) == [(0, -1), (0, 1), (1, -1), (1, 1)]


class TestLegalMoves:
    """Test enumeration of legal placements."""

    def test_single_tile_moves(self, single_tile_board):
        """Every piece is legal on every side of a lone tile."""
        moves = move_strings(single_tile_board, GameConfig())
        assert len(moves) == 12
        assert moves == sorted(moves)
        assert "a0+" in moves
        assert "@1\\" in moves
        assert "b1/" in moves

    def test_moves_carry_their_cascade(self):
        """Each legal move reports the fills it would force."""
        board = Board.from_placements([(0, 0, Tile.A), (1, 0, Tile.A), (1, 1, Tile.A), (1, 2, Tile.A)])
        moves = legal_moves(board, GameConfig())
        for move in moves:
            expected = solve_cascade(board, move.cell[0], move.cell[1], move.tile)
            assert {(f.cell, f.tile) for f in move.forced} == {(f.cell, f.tile) for f in expected.forced}
        gap = [m for m in moves if m.cell == (0, 2) and m.piece == Piece.STRAIGHT]
        assert len(gap) == 1
        assert [(f.cell, f.tile) for f in gap[0].forced] == [((0, 1), Tile.A)]

    def test_contradictory_move_is_excluded(self, contradiction_board):
        """A placement whose cascade fails never appears."""
        moves = legal_moves(contradiction_board, GameConfig())
        at_cell = {m.piece for m in moves if m.cell == (-1, 1)}
        assert Piece.BACK not in at_cell
        assert Piece.STRAIGHT in at_cell

    def test_notation_matches_board(self, contradiction_board):
        """Move notation converts back to the move's cell."""
        for move in legal_moves(contradiction_board, GameConfig()):
            assert contradiction_board.notation_to_abs(move.notation) == move.cell

    def test_no_moves_when_board_cannot_grow(self, single_tile_board):
        """A bounded board with no room left has no legal moves."""
        config = GameConfig(max_extent=1)
        assert legal_moves(single_tile_board, config) == []
        assert not has_any_legal_move(single_tile_board, config)

    def test_has_any_legal_move_agrees(self, contradiction_board):
        """The short-circuit query agrees with the full enumeration."""
        config = GameConfig()
        assert has_any_legal_move(contradiction_board, config) == bool(legal_moves(contradiction_board, config))
