"""Tests for edge facing, forced tiles and placeable orientations."""

import pytest

from trax.engine import (
    Direction,
    InvariantViolation,
    Piece,
    Tile,
    faces_player1,
    facing_player,
    first_move_tile,
    forced_tile,
    piece_to_tile,
    placeable_orientations,
)

N, E, S, W = Direction.N, Direction.E, Direction.S, Direction.W


class TestFacing:
    """Test which player's line crosses a shared edge."""

    @pytest.mark.parametrize("tile", list(Tile))
    @pytest.mark.parametrize("direction", list(Direction))
    def test_facing_matches_tile_edges(self, direction, tile):
        """A neighbour faces the cell through its opposite edge."""
        expected = tile.player_at(direction.opposite) == 1
        assert faces_player1(direction, tile) is expected

    def test_each_tile_has_two_edges_per_player(self):
        """Every tile routes each player through exactly two edges."""
        for tile in Tile:
            assert sum(tile.player_at(d) == 1 for d in Direction) == 2

    def test_known_facings(self):
        """Spot-check the lookup table."""
        # A straight tile to the north carries player 1 down into the cell
        assert facing_player(N, Tile.A) == 1
        # ...but to the east it shows player 2
        assert facing_player(E, Tile.A) == 2
        assert facing_player(E, Tile.B) == 1
        assert facing_player(S, Tile.F) == 1
        assert facing_player(W, Tile.E) == 2


class TestForcedTile:
    """Test the 12-entry forced tile table."""

    @pytest.mark.parametrize("player", [1, 2])
    @pytest.mark.parametrize("pair", [(N, S), (W, E), (N, W), (S, E), (S, W), (N, E)])
    def test_forced_tile_carries_player_line(self, player, pair):
        """The forced tile routes the player's line through both edges."""
        tile = forced_tile(player, *pair)
        assert tile.player_at(pair[0]) == player
        assert tile.player_at(pair[1]) == player

    def test_order_of_directions_does_not_matter(self):
        """forced_tile is symmetric in its directions."""
        assert forced_tile(1, N, E) == forced_tile(1, E, N)
        assert forced_tile(2, S, W) == forced_tile(2, W, S)

    def test_known_entries(self):
        """Spot-check the table."""
        assert forced_tile(1, N, S) == Tile.A
        assert forced_tile(2, N, S) == Tile.B
        assert forced_tile(1, S, W) == Tile.E
        assert forced_tile(2, N, W) == Tile.D

    def test_same_direction_is_invariant_violation(self):
        """A direction pair outside the table is a bug."""
        with pytest.raises(InvariantViolation):
            forced_tile(1, N, N)


class TestPlaceableOrientations:
    """Test which pieces may be chosen next to existing tiles."""

    def test_single_neighbour_allows_all(self):
        """One neighbour leaves all three pieces open."""
        assert placeable_orientations([(N, Tile.A)]) == {Piece.STRAIGHT, Piece.FORWARD, Piece.BACK}

    def test_opposite_neighbours(self):
        """Opposite neighbours of different players allow only diagonals."""
        neighbours = [(S, Tile.B), (N, Tile.A)]
        assert placeable_orientations(neighbours) == {Piece.FORWARD, Piece.BACK}

    def test_west_and_north(self):
        """West plus north allows straight and back-diagonal."""
        neighbours = [(N, Tile.B), (W, Tile.B)]
        assert placeable_orientations(neighbours) == {Piece.STRAIGHT, Piece.BACK}

    def test_east_and_north(self):
        """East plus north allows straight and forward-diagonal."""
        neighbours = [(E, Tile.B), (N, Tile.B)]
        assert placeable_orientations(neighbours) == {Piece.STRAIGHT, Piece.FORWARD}

    def test_every_allowed_piece_resolves(self):
        """Each allowed piece has a tile agreeing with both neighbours."""
        neighbours = [(E, Tile.B), (N, Tile.B)]
        for piece in placeable_orientations(neighbours):
            tile = piece_to_tile(piece, neighbours)
            for direction, other in neighbours:
                assert tile.player_at(direction) == facing_player(direction, other)

    def test_same_player_pair_is_invariant_violation(self):
        """Two same-player neighbours means the cell should already be filled."""
        with pytest.raises(InvariantViolation):
            placeable_orientations([(N, Tile.A), (S, Tile.A)])

    def test_no_neighbours_is_invariant_violation(self):
        """Isolated cells are never placeable."""
        with pytest.raises(InvariantViolation):
            placeable_orientations([])


class TestPieceToTile:
    """Test resolving a piece against its neighbours."""

    @pytest.mark.parametrize("piece,tile", [
        (Piece.STRAIGHT, Tile.A),
        (Piece.FORWARD, Tile.C),
        (Piece.BACK, Tile.F),
    ])
    def test_resolve_against_north_neighbour(self, piece, tile):
        """A player 1 line from the north continues into the new tile."""
        assert piece_to_tile(piece, [(N, Tile.A)]) == tile

    def test_same_piece_resolves_differently(self):
        """The same symbol maps to different tiles depending on context."""
        assert piece_to_tile(Piece.STRAIGHT, [(N, Tile.A)]) == Tile.A
        assert piece_to_tile(Piece.STRAIGHT, [(N, Tile.B)]) == Tile.B

    def test_impossible_piece_is_invariant_violation(self):
        """A piece that agrees with no neighbour configuration is a bug."""
        with pytest.raises(InvariantViolation):
            piece_to_tile(Piece.STRAIGHT, [(N, Tile.B), (S, Tile.A)])

    def test_first_move_tiles(self):
        """The opening move only allows '+' and '/'."""
        assert first_move_tile(Piece.STRAIGHT) == Tile.A
        assert first_move_tile(Piece.FORWARD) == Tile.C
        with pytest.raises(InvariantViolation):
            first_move_tile(Piece.BACK)
